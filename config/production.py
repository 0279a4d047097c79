import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# Required in production, e.g. https://asistencia.example.edu
BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "")

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT")) if os.getenv("REQUEST_TIMEOUT") else None

DEFAULT_COURSE = os.getenv("DEFAULT_COURSE", "Inteligencia Artificial")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
