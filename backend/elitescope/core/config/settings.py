"""Application settings.

All values are loaded from environment variables (and an optional ``.env`` file)
through pydantic-settings.
"""

from typing import Optional

from pydantic import Field, PostgresDsn, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from elitescope.core.config.enums import Environment


class Settings(BaseSettings):
    """Settings for the Elitescope backend.

    ``POSTGRES_HOST`` is optional: when it is unset the storage backend is
    considered unconfigured and read operations degrade to empty results.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Elitescope"
    ENVIRONMENT: Environment = Environment.LOCAL
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    TESTING: bool = False

    # Identity provider
    AUTH_ENABLED: bool = False
    AUTH0_DOMAIN: Optional[str] = None
    AUTH0_AUDIENCE: Optional[str] = None
    OWNER_OPEN_ID: Optional[str] = None

    # Storage
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "elitescope"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "elitescope"
    POSTGRES_SSLMODE: str = "prefer"
    SQLALCHEMY_ASYNC_DATABASE_URI: Optional[PostgresDsn] = None

    db_pool_size: int = Field(default=20, ge=1)
    db_pool_max_overflow: int = Field(default=40, ge=0)

    RUN_ALEMBIC_MIGRATIONS: bool = False

    # HTTP surface
    API_REQUEST_TIMEOUT_SECONDS: float = 30.0
    ADDITIONAL_CORS_ORIGINS: Optional[str] = None
    METRICS_PORT: Optional[int] = None

    # Content defaults
    CATALOG_DEFAULT_LIMIT: int = 50
    CONTENT_DEFAULT_LIMIT: int = 20

    @field_validator("AUTH_ENABLED", mode="before")
    @classmethod
    def parse_auth_enabled(cls, v):
        """Accept empty strings as ``False``."""
        if v == "":
            return False
        return v

    @model_validator(mode="after")
    def assemble_db_connection(self) -> "Settings":
        """Build the async database URI from the individual POSTGRES_* fields."""
        if self.SQLALCHEMY_ASYNC_DATABASE_URI is not None or not self.POSTGRES_HOST:
            return self

        self.SQLALCHEMY_ASYNC_DATABASE_URI = PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=self.POSTGRES_USER,
            password=self.POSTGRES_PASSWORD or None,
            host=self.POSTGRES_HOST,
            port=self.POSTGRES_PORT,
            path=self.POSTGRES_DB,
        )
        return self

    @model_validator(mode="after")
    def validate_auth_config(self) -> "Settings":
        """Require the Auth0 tenant settings when authentication is enabled."""
        if self.AUTH_ENABLED and not (self.AUTH0_DOMAIN and self.AUTH0_AUDIENCE):
            raise ValueError("AUTH0_DOMAIN and AUTH0_AUDIENCE are required when AUTH_ENABLED")
        return self

    @property
    def storage_configured(self) -> bool:
        """Whether a storage backend has been configured."""
        return self.SQLALCHEMY_ASYNC_DATABASE_URI is not None
