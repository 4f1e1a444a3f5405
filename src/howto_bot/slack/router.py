"""Slack webhook router with signature verification."""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from howto_bot.config import Settings, get_settings
from howto_bot.models.slack import EventCallback
from howto_bot.slack.handlers import handle_slack_event
from howto_bot.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/")
@router.post("/slack/events")
async def slack_events(
    request: Request,
    payload: EventCallback = Depends(verify_slack_request),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Receive Slack webhook events.

    Slack retries (X-Slack-Retry-Num header) are acknowledged immediately
    so a slow answer is not fetched and posted twice. Challenges are always
    answered, retried or not.
    """
    if request.headers.get("X-Slack-Retry-Num") and not payload.challenge:
        return JSONResponse({"ok": True})

    return await handle_slack_event(payload, settings)
