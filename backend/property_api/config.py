"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (defaults are for local docker-compose)
    - get_settings() is cached (lru_cache) — single instance per process
    - database_url, when set, wins over the individual connection parts

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Connection URL assembled with sqlalchemy URL.create: credentials are escaped correctly
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

from property_api.core.domain_types import StorageBackend, UpdateStrategy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_host: str = "localhost"
    database_port: int = 5433
    database_user: str = "kirmac"
    database_password: str = "kirmac123"
    database_name: str = "kirmac_site"
    database_pool_size: int = 10
    database_max_overflow: int = 0
    database_pool_recycle_seconds: int = 30
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Storage behaviour
    storage_backend: StorageBackend = StorageBackend.POSTGRES
    update_strategy: UpdateStrategy = UpdateStrategy.IN_PLACE

    # API
    cors_origins: list[str] = ["*"]
    request_timeout_seconds: float | None = 30.0

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
