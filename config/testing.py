SECRET_KEY = "test-secret"

BACKEND_BASE_URL = "http://backend.test"

REQUEST_TIMEOUT = None

DEFAULT_COURSE = "Inteligencia Artificial"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
