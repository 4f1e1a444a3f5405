"""Data models for Slack payloads and wikiHow content."""

from howto_bot.models.slack import ChatMessage, EventCallback, MentionEvent
from howto_bot.models.wikihow import ScrapedPage, WikiSearchHit, WikiSearchResult

__all__ = [
    "ChatMessage",
    "EventCallback",
    "MentionEvent",
    "ScrapedPage",
    "WikiSearchHit",
    "WikiSearchResult",
]
