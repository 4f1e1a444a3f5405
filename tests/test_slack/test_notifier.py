"""Tests for outbound chat replies.

post_reply must be fire-and-forget: Slack and transport errors are logged,
never propagated.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest
from slack_sdk.errors import SlackApiError

from howto_bot.config import Settings
from howto_bot.models.slack import ChatMessage
from howto_bot.slack.notifier import post_reply

CHANNEL = "C0AFQJHAVS6"
TS = "1234567890.123456"


def _make_slack_api_error(error_code: str) -> SlackApiError:
    """Build a SlackApiError with a mock response carrying the given error code."""
    resp = MagicMock()
    resp.get = MagicMock(
        side_effect=lambda key, default="": error_code if key == "error" else default,
    )
    resp.__getitem__ = MagicMock(
        side_effect=lambda key: error_code if key == "error" else None,
    )
    return SlackApiError(message=f"slack error: {error_code}", response=resp)


@pytest.fixture()
def mock_client():
    """Patch get_slack_client to return an AsyncMock Slack client."""
    client = AsyncMock()
    with patch("howto_bot.slack.notifier.get_slack_client", return_value=client):
        yield client


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


async def test_post_reply_in_thread(mock_client: AsyncMock, settings: Settings):
    message = ChatMessage(channel=CHANNEL, text="*Nap*\n_1._ Lie down", thread_ts=TS)

    await post_reply(message, settings)

    mock_client.chat_postMessage.assert_awaited_once_with(
        channel=CHANNEL, text="*Nap*\n_1._ Lie down", thread_ts=TS
    )


async def test_post_reply_top_level_omits_thread_ts(mock_client: AsyncMock, settings: Settings):
    await post_reply(ChatMessage(channel=CHANNEL, text="hello"), settings)

    call_kwargs = mock_client.chat_postMessage.call_args.kwargs
    assert call_kwargs == {"channel": CHANNEL, "text": "hello"}


async def test_post_reply_swallows_slack_error(mock_client: AsyncMock, settings: Settings):
    mock_client.chat_postMessage.side_effect = _make_slack_api_error("not_in_channel")

    # Must not raise
    await post_reply(ChatMessage(channel=CHANNEL, text="hello"), settings)


async def test_post_reply_swallows_connection_error(mock_client: AsyncMock, settings: Settings):
    mock_client.chat_postMessage.side_effect = aiohttp.ClientConnectionError("refused")

    await post_reply(ChatMessage(channel=CHANNEL, text="hello"), settings)


async def test_post_reply_swallows_timeout(mock_client: AsyncMock, settings: Settings):
    mock_client.chat_postMessage.side_effect = TimeoutError()

    await post_reply(ChatMessage(channel=CHANNEL, text="hello"), settings)


async def test_post_reply_propagates_programming_errors(
    mock_client: AsyncMock, settings: Settings
):
    """Only delivery failures are swallowed."""
    mock_client.chat_postMessage.side_effect = TypeError("bad call")

    with pytest.raises(TypeError):
        await post_reply(ChatMessage(channel=CHANNEL, text="hello"), settings)


async def test_post_reply_builds_client_from_settings():
    """The bot token comes from the settings handed to post_reply."""
    settings = Settings(_env_file=None, slack_bot_token="xoxb-injected")
    with patch("howto_bot.slack.notifier.get_slack_client") as mock_get_client:
        mock_get_client.return_value.chat_postMessage = AsyncMock()

        await post_reply(ChatMessage(channel=CHANNEL, text="hello"), settings)

    mock_get_client.assert_called_once_with(settings)
