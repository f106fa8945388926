from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Server
    PORT: int

    # Database
    DB_URL: str = Field(min_length=1)
    DB_POOL_SIZE: int = 20  # Maximum number of persistent connections
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # Seconds to wait for a pooled connection
    DB_POOL_RECYCLE: int = 3600

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("DB_URL")
    @classmethod
    def use_async_driver(cls, value: str) -> str:
        """Point plain postgres URLs at the asyncpg driver"""
        for prefix in ("postgres://", "postgresql://"):
            if value.startswith(prefix):
                return "postgresql+asyncpg://" + value[len(prefix):]
        return value


settings = Settings()
