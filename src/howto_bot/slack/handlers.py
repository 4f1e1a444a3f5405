"""Slack event dispatch."""

import logging

from fastapi import Response
from fastapi.responses import JSONResponse, PlainTextResponse

from howto_bot.config import Settings
from howto_bot.models.slack import ChatMessage, EventCallback
from howto_bot.slack.notifier import post_reply
from howto_bot.wikihow import fetch_instructions

logger = logging.getLogger(__name__)


async def handle_slack_event(payload: EventCallback, settings: Settings) -> Response:
    """Dispatch a verified Slack payload.

    - challenge present: echo it back as the whole body
    - app_mention: answer the question in the same channel/thread
    - anything else: acknowledge with 200
    """
    if payload.challenge:
        return PlainTextResponse(payload.challenge)

    if payload.event.type == "app_mention":
        await handle_mention(payload, settings)

    return JSONResponse({"ok": True})


async def handle_mention(payload: EventCallback, settings: Settings) -> None:
    """Answer a mention with instructions, posted inline before the webhook returns."""
    event = payload.event
    query = payload.mention_text()

    logger.info("Mention in channel %s: %r", event.channel, query)

    reply = await fetch_instructions(query, settings=settings)

    await post_reply(
        ChatMessage(channel=event.channel, text=reply, thread_ts=event.thread_ts or None),
        settings,
    )
