"""
Database connection settings.
"""
import logging
from typing import Literal, Optional

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """
    Defines settings for connecting to the relational store.

    PostgreSQL (through asyncpg) is used whenever POSTGRES_HOST is configured.
    Without it the application falls back to a local SQLite file through
    aiosqlite, which is what development and the test-suite use.

    REPOSITORY_BACKEND selects the persistence implementation behind the
    repository interfaces: ``sql`` for the SQLModel repositories or ``memory``
    for the process-local in-memory store.

    Security Note:
        - POSTGRES_PASSWORD must be securely stored and never logged or
          exposed in version control.
    Performance Note:
        - Tune POSTGRES_POOL_SIZE and POSTGRES_MAX_OVERFLOW based on load.
    """
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: SecretStr = SecretStr("")
    POSTGRES_DB: str = "eventdesk"
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: int = Field(ge=1, le=65535, default=5432)
    POSTGRES_POOL_SIZE: int = Field(ge=1, default=10)
    POSTGRES_MAX_OVERFLOW: int = Field(ge=0, default=20)
    POSTGRES_POOL_TIMEOUT: float = Field(ge=1.0, default=5.0)
    DATABASE_URL: str = Field(default="", validate_default=True)

    REPOSITORY_BACKEND: Literal["sql", "memory"] = "sql"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_url(cls, v: Optional[str], info: ValidationInfo) -> str:
        """
        Assembles the database connection URL if not provided explicitly.

        Args:
            v: Explicitly provided URL or None.
            info: Validation context with other field values.

        Returns:
            Assembled or provided database URL.
        """
        if v:
            return v

        values = info.data
        host = values.get("POSTGRES_HOST")
        if not host:
            logger.debug("POSTGRES_HOST not set, using local SQLite database.")
            return "sqlite+aiosqlite:///./eventdesk.db"

        password = values.get("POSTGRES_PASSWORD")
        password_value = password.get_secret_value() if password else ""
        if not password_value:
            logger.warning("POSTGRES_PASSWORD not set during DATABASE_URL assembly.")

        url = (
            f"postgresql+asyncpg://{values.get('POSTGRES_USER')}:"
            f"{password_value}@{host}:"
            f"{values.get('POSTGRES_PORT')}/{values.get('POSTGRES_DB')}"
        )
        logger.debug("Assembled DATABASE_URL (password masked for security).")
        return url
