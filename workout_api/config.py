"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from environment variables (never hardcoded in code paths)
    - get_settings() is cached (lru_cache), one instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against a local mongod
    - MONGO_URI accepted alongside MONGODB_URL: the name most hosting providers export
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongodb_url: str = Field(
        "mongodb://localhost:27017",
        validation_alias=AliasChoices("mongodb_url", "mongo_uri"),
    )
    mongodb_database: str = "workouts"
    workouts_collection: str = "workouts"
    mongodb_server_selection_timeout_ms: int = 5000

    @field_validator("mongodb_url")
    @classmethod
    def check_mongodb_scheme(cls, v: str) -> str:
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("mongodb_url must start with mongodb:// or mongodb+srv://")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
