"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "advocates_user"
    POSTGRES_PASSWORD: str = "advocates_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "advocates_db"

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Search ────────────────────────────────
    SEARCH_DEFAULT_LIMIT: int = Field(default=50, ge=1)
    SEARCH_MAX_LIMIT: int = Field(default=1000, ge=1)
    SYNTHETIC_ID_MODE: Literal["random", "deterministic"] = "random"

    # ── Client ────────────────────────────────
    CLIENT_DEBOUNCE_SECONDS: float = Field(default=0.3, ge=0.0)

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
