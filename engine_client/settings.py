"""
Environment-sourced settings for the wallet engine.

Settings are validated once at startup and passed explicitly to the
service factory; nothing in the client reads the environment.
"""

from typing import Any, Optional

from pydantic import AnyHttpUrl, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class EngineSettings(BaseSettings):
    """Wallet engine connection settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    engine_url: AnyHttpUrl = Field(description="Base URL of the wallet engine")
    engine_token: str = Field(min_length=1, description="Engine access token")

    @property
    def base_url(self) -> str:
        return str(self.engine_url)


def _format_errors(exc: ValidationError) -> str:
    lines = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]).upper() or "settings"
        lines.append(f"  {name}: {error['msg']}")
    return "\n".join(lines)


def load_settings(env_file: Optional[str] = ".env", **overrides: Any) -> EngineSettings:
    """
    Load and validate engine settings.

    Args:
        env_file: Dotenv file to read in addition to the process
            environment, or None to read the environment only
        **overrides: Explicit values taking precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If a required value is missing or invalid
    """
    try:
        return EngineSettings(_env_file=env_file, **overrides)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid environment variables:\n{_format_errors(e)}"
        ) from e
