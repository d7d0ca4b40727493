from config import db_config_from_env

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret-with-enough-length-for-hs256"
TOKEN_EXPIRES_HOURS = 3

DB_CONFIG = db_config_from_env()

DEBUG = False
TESTING = True
PORT = 8000
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
