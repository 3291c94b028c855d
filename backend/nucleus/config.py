"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the API starts with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Rate limit expressed in `limits` notation ("3/10 seconds") so it is passed
      to slowapi unchanged
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Api Gateway Nucleus"
    environment: str = "development"

    # Versioning
    default_api_version: str = "1.0"
    supported_api_versions: list[str] = ["1.0"]
    report_api_versions: bool = True

    # Rate limiting (user creation route only)
    rate_limit_enabled: bool = True
    rate_limit_storage_uri: str = "memory://"
    user_creation_rate_limit: str = "3/10 seconds"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
