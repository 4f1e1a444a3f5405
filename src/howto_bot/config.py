"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(RuntimeError):
    """Raised at startup when the service cannot run safely."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack (TOKEN / SECRET are the short names used by older deployments)
    slack_bot_token: str = Field(
        default="", validation_alias=AliasChoices("slack_bot_token", "token")
    )
    slack_signing_secret: str = Field(
        default="", validation_alias=AliasChoices("slack_signing_secret", "secret")
    )

    # wikiHow
    wikihow_api_url: str = "http://www.wikihow.com/api.php"
    wikihow_base_url: str = "http://www.wikihow.com"

    # App
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()


def require_signing_secret(settings: Settings) -> None:
    """Refuse to start without a signing secret.

    Every inbound request is authenticated against this secret, so an empty
    value would make signature checks meaningless.
    """
    if not settings.slack_signing_secret:
        raise ConfigurationError("Missing secret. Unable to authenticate requests.")
