from __future__ import annotations

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./server_database.db"
    DB_ECHO: bool = False

    API_PREFIX: str = "/messenger_api"

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "info"

    WEB_ROOT: str | None = None

    CORS_ORIGINS: list[str] = []

    BCRYPT_ROUNDS: int = Field(12, ge=4, le=31)

    @field_validator("API_PREFIX")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value.startswith("/") or value == "/":
            raise ValueError("API_PREFIX must start with '/' and name a path")
        return value.rstrip("/")

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
