"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from howto_bot.config import get_settings, require_signing_secret
from howto_bot.logging_config import configure_logging
from howto_bot.slack import SlackVerificationError, reset_client
from howto_bot.slack.router import router as slack_router
from howto_bot.wikihow import close_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, validate config, release clients on exit."""
    settings = get_settings()
    configure_logging(settings.log_level)
    require_signing_secret(settings)
    app.state.settings = settings
    yield
    await close_http_client()
    reset_client()


app = FastAPI(
    title="howto-bot",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.exception_handler(SlackVerificationError)
async def slack_verification_handler(
    request: Request, exc: SlackVerificationError
) -> PlainTextResponse:
    """Reject unauthenticated webhook calls with a plaintext 403."""
    logger.warning("Rejected request to %s: %s", request.url.path, exc.reason)
    return PlainTextResponse(exc.reason, status_code=403)


@app.get("/health")
async def health():
    """Health check endpoint for container platforms and local development."""
    return {
        "status": "ok",
        "service": "howto-bot",
        "version": "0.1.0",
    }
