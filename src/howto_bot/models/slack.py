"""Slack Events API payload models and the outbound chat message."""

from pydantic import BaseModel, Field


class MentionEvent(BaseModel):
    """The inner ``event`` object of an Events API callback."""

    type: str = ""
    text: str = ""
    channel: str = ""
    thread_ts: str | None = None  # None for top-level messages


class EventCallback(BaseModel):
    """Decoded webhook body: either a URL verification challenge or an event callback."""

    challenge: str = ""
    event: MentionEvent = Field(default_factory=MentionEvent)
    authed_users: list[str] = []

    def mention_text(self) -> str:
        """Return the event text with the bot's own mention removed.

        Uses the first authed user as the bot's ID, e.g.
        ``"<@U123abc> how do you make scrambled eggs?"`` becomes
        ``"how do you make scrambled eggs?"``.
        """
        text = self.event.text
        if self.authed_users:
            text = text.replace(f"<@{self.authed_users[0]}>", "")
        return text.strip()


class ChatMessage(BaseModel):
    """Body of a ``chat.postMessage`` call."""

    channel: str
    text: str
    thread_ts: str | None = None
