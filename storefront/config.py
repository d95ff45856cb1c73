"""
config.py
What this file does:
- Uses pydantic-settings (BaseSettings) to load env vars + an optional .env file.
- MONGODB_URL is required; everything else has a working default.
"""

from __future__ import annotations

import os

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_ENV_FILE = ".env"
ENV_FILE_VAR = "STOREFRONT_ENV_FILE"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mongodb_url: str = Field(alias="MONGODB_URL")
    mongodb_db: str = Field(default="firstDB", alias="MONGODB_DB")
    server_api_version: str = Field(default="1", alias="MONGODB_SERVER_API")
    ping_timeout_s: float = Field(default=10.0, alias="MONGODB_PING_TIMEOUT_S")

    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8090, alias="API_PORT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("mongodb_url")
    @classmethod
    def _url_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("MONGODB_URL is empty")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """
    Build Settings from the process environment, merged with a KEY=VALUE file.

    An env file asked for explicitly (argument or STOREFRONT_ENV_FILE) must exist
    and be readable; the default .env is picked up only if present.
    Real environment variables win over file values.
    """
    path = env_file or os.environ.get(ENV_FILE_VAR)
    if path:
        try:
            with open(path, encoding="utf-8"):
                pass
        except OSError as exc:
            raise ConfigurationError(f"Error loading env file {path}: {exc}") from exc
    else:
        path = DEFAULT_ENV_FILE

    try:
        return Settings(_env_file=path)
    except ValidationError as exc:
        missing = [".".join(str(p) for p in err["loc"]) for err in exc.errors()]
        if any(loc in ("MONGODB_URL", "mongodb_url") for loc in missing):
            raise ConfigurationError("Environment variable for MongoDB URL is not set.") from exc
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def get_database_url(settings: Settings) -> str:
    return settings.mongodb_url
