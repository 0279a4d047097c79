import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Single origin of the attendance backend; every API call is built from it.
BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:5000")

# Seconds; unset means no override of the HTTP library default.
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT")) if os.getenv("REQUEST_TIMEOUT") else None

DEFAULT_COURSE = os.getenv("DEFAULT_COURSE", "Inteligencia Artificial")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
