"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from PY_CHANCE_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="PY_CHANCE_", env_file=".env", extra="ignore")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(default=True, description="Render log events as JSON")


settings = Settings()
