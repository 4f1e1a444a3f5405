"""Outbound chat replies.

Posting is fire-and-forget: failures are logged and never raised, so a Slack
outage cannot turn an authenticated webhook call into an error response.
"""

import logging

import aiohttp
from slack_sdk.errors import SlackClientError

from howto_bot.config import Settings
from howto_bot.models.slack import ChatMessage
from howto_bot.slack.client import get_slack_client

logger = logging.getLogger(__name__)


async def post_reply(message: ChatMessage, settings: Settings) -> None:
    """Send ``message`` via chat.postMessage, threading it when thread_ts is set.

    Args:
        message: Target channel, reply text, and optional thread timestamp.
        settings: Source of the bot token used as the bearer credential.
    """
    try:
        client = get_slack_client(settings)
        await client.chat_postMessage(**message.model_dump(exclude_none=True))
    except (SlackClientError, aiohttp.ClientError, TimeoutError):
        logger.warning("Failed to post reply to %s", message.channel, exc_info=True)
