"""
Configuration management for the usergraph service
"""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="USERGRAPH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./usergraph.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20
    sql_echo: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Runtime
    debug: bool = True
    log_level: str = "INFO"

    # Load the sample users on startup when the table is empty
    seed_sample_data: bool = False


# Global settings instance
settings = Settings()


def get_database_url() -> str:
    """Get database URL, checking the environment first for test compatibility."""
    return os.getenv("USERGRAPH_DATABASE_URL") or settings.database_url
