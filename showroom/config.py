"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Credentials come from environment variables (never hardcoded in code paths)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - Defaults provided for all non-secret settings: works out-of-the-box against a local SQL Server container
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "mssql+aioodbc://showroom:showroom@db:1433/showroom"
        "?driver=ODBC+Driver+18+for+SQL+Server&TrustServerCertificate=yes"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_mssql_url(cls, v: str) -> str:
        """Hosting panels hand out mssql:// but the async engine needs mssql+aioodbc://."""
        if isinstance(v, str) and v.startswith("mssql://"):
            return v.replace("mssql://", "mssql+aioodbc://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 5
    database_pool_recycle_seconds: int = 3600

    # Stored procedures live under this schema
    procedure_schema: str = "functional"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
