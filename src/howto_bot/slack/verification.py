"""Slack request signature verification as a FastAPI dependency."""

import hashlib
import hmac
import logging
import time

from fastapi import Depends, Request
from pydantic import ValidationError

from howto_bot.config import Settings, get_settings
from howto_bot.models.slack import EventCallback

logger = logging.getLogger(__name__)

# Replay window for X-Slack-Request-Timestamp
MAX_TIMESTAMP_AGE_SECONDS = 300

STALE_TIMESTAMP_REASON = "Timestamp differs by more than 5 minutes."
INVALID_SIGNATURE_REASON = "Invalid signature."


class SlackVerificationError(Exception):
    """Inbound request failed authentication. Rendered as a plaintext 403."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def compute_signature(secret: str, timestamp: str, body: bytes) -> str:
    """Return ``v0=<hex HMAC-SHA256>`` over ``v0:{timestamp}:{body}``.

    The body is signed as raw bytes, never decoded.
    """
    basestring = b"v0:" + timestamp.encode() + b":" + body
    digest = hmac.new(secret.encode(), basestring, hashlib.sha256).hexdigest()
    return f"v0={digest}"


async def verify_slack_request(
    request: Request, settings: Settings = Depends(get_settings)
) -> EventCallback:
    """Verify Slack request signature and return the parsed payload.

    Reads the raw body FIRST (before any JSON parsing) to ensure the
    signature verification uses the exact bytes Slack signed. A missing or
    unparsable timestamp counts as stale.

    Raises SlackVerificationError if the timestamp or signature is invalid.
    """
    body = await request.body()

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    try:
        sent_at = int(timestamp)
    except ValueError:
        raise SlackVerificationError(STALE_TIMESTAMP_REASON) from None
    if abs(time.time() - sent_at) > MAX_TIMESTAMP_AGE_SECONDS:
        raise SlackVerificationError(STALE_TIMESTAMP_REASON)

    expected = compute_signature(settings.slack_signing_secret, timestamp, body)
    if not hmac.compare_digest(expected.encode(), signature.encode()):
        raise SlackVerificationError(INVALID_SIGNATURE_REASON)

    try:
        return EventCallback.model_validate_json(body)
    except ValidationError:
        logger.warning("Ignoring signed request with undecodable payload")
        return EventCallback()
