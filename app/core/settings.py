# app/core/settings.py
from pydantic_settings import BaseSettings
from typing import List
import os
from dotenv import load_dotenv
load_dotenv()  # This will load variables from a .env file in the current directory


class Settings(BaseSettings):
    secret_key: str = os.getenv("SECRET_KEY", "change-me")
    algorithm: str = "HS256"
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "evently")
    DEFAULT_PAGE_SIZE: int = 6
    RELATED_PAGE_SIZE: int = 3
    PAGE_CACHE_MAX_ENTRIES: int = 256
    PAGE_CACHE_TTL_SECONDS: float = 60.0
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]


settings = Settings()
