# scanconsole/core/config.py
from typing import Optional
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Locate the .env file relative to the project root
BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_FILE = BASE_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=str(ENV_FILE), extra="ignore")

    # Application
    PROJECT_NAME: str = "Scan Console"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./scanconsole.db"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10

    # CORS (comma-separated)
    BACKEND_CORS_ORIGINS: str = ""

    # Search / scan results service
    SEARCH_API_URL: str = "http://localhost:8080"
    SEARCH_API_TOKEN: Optional[str] = None
    SEARCH_API_TIMEOUT_SECONDS: float = 30.0

    # Scan listing
    SCAN_PAGE_SIZE: int = 15
    COUNT_OVERSAMPLING_FACTOR: int = 10

    # Provisioned setting defaults
    DEFAULT_CONSOLE_URL: str = "https://127.0.0.1"
    DEFAULT_INACTIVE_DELETE_DAYS: int = 30

    # Field-level encryption for registry secrets
    MASTER_ENCRYPTION_KEY: str = "change-me"
    ENCRYPTION_SALT: str = "scanconsole"


settings = Settings()
