"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Settings are read once per process; get_settings() is cached (lru_cache)
    - create_app() and the server entry point receive Settings explicitly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - PORT accepts both "8080" and the listen-address form ":8080"
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)

    @field_validator("port", mode="before")
    @classmethod
    def strip_listen_prefix(cls, v):
        """Older deployments set PORT=":8080"; keep only the number."""
        if isinstance(v, str) and v.startswith(":"):
            return v[1:]
        return v

    # API
    app_title: str = "Calculator API"

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
