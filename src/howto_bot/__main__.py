"""Process entry point: ``python -m howto_bot`` or the ``howto-bot`` script."""

import logging
import sys

import uvicorn

from howto_bot.config import ConfigurationError, get_settings, require_signing_secret
from howto_bot.logging_config import configure_logging

logger = logging.getLogger("howto_bot")


def main() -> None:
    """Validate configuration, then serve until killed.

    Exits with status 1 when the signing secret is missing. A failure to
    bind the listen port propagates.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        require_signing_secret(settings)
    except ConfigurationError as exc:
        logger.critical("%s", exc)
        sys.exit(1)

    logger.info("Listening on port %d", settings.port)
    uvicorn.run("howto_bot.app:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    main()
