# app/core/config.py
from app.core.settings import settings

SECRET_KEY = settings.secret_key
ALGORITHM = settings.algorithm
MONGO_URI = settings.MONGO_URI
MONGO_DB_NAME = settings.MONGO_DB_NAME
DEFAULT_PAGE_SIZE = settings.DEFAULT_PAGE_SIZE
RELATED_PAGE_SIZE = settings.RELATED_PAGE_SIZE
LOG_LEVEL = settings.LOG_LEVEL
CORS_ORIGINS = settings.CORS_ORIGINS
PAGE_CACHE_MAX_ENTRIES = settings.PAGE_CACHE_MAX_ENTRIES
PAGE_CACHE_TTL_SECONDS = settings.PAGE_CACHE_TTL_SECONDS
