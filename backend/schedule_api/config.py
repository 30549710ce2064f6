"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the service starts against a local MongoDB with no .env

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PORT kept unprefixed so hosting platforms that inject PORT work unchanged
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 5000

    # Document store
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "gym"
    mongo_collection: str = "schedule"
    mongo_server_selection_timeout_ms: int = 5000
    store_required_on_startup: bool = False

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
