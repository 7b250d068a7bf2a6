"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class LookupConfig(BaseSettings):
    """Configuration for the ghuser lookup."""

    # Identifier fallback when --user is not given
    user: str = ""

    # API
    api_base_url: str = "https://api.github.com"

    # Logging
    log_level: str = "WARNING"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "GHUSER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
