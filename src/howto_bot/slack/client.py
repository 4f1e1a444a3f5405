"""Slack Web API client, built from the injected settings.

One AsyncWebClient is kept per process and rebuilt only if the bot token in
the settings it is asked for differs from the one it was built with.
"""

from slack_sdk.web.async_client import AsyncWebClient

from howto_bot.config import Settings

_client: AsyncWebClient | None = None


def get_slack_client(settings: Settings) -> AsyncWebClient:
    """Return the shared client authenticated with ``settings.slack_bot_token``."""
    global _client
    if _client is None or _client.token != settings.slack_bot_token:
        _client = AsyncWebClient(token=settings.slack_bot_token)
    return _client


def reset_client() -> None:
    """Drop the shared client. Used on shutdown and in tests."""
    global _client
    _client = None
