"""Turn a free-text question into a (mostly) genuine set of wikiHow instructions.

The flow is search -> pick a random title -> fetch and scrape the page ->
keep a random number of leading steps -> append the punchline. Page-level
problems (non-200 status, no usable steps) are retried with a freshly drawn
title; transport errors are reported to the user immediately.
"""

import logging
import random
from typing import Protocol
from urllib.parse import quote

import httpx

from howto_bot.config import Settings, get_settings
from howto_bot.models.wikihow import ScrapedPage
from howto_bot.wikihow.client import get_http_client
from howto_bot.wikihow.scraper import ScrapeError, scrape_steps
from howto_bot.wikihow.search import search_titles

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
PUNCHLINE = "Shove it up your butt."

SEARCH_FAILED_MESSAGE = "Sorry, I couldn't query the wikiHow API."
UNKNOWN_MESSAGE = "Sorry, but I don't know how to do that."
PAGE_FAILED_MESSAGE = "Sorry, but I couldn't fetch the wikiHow page."

# Sub-delimiters that stay literal in a URL path segment
_PATH_SAFE = "$&+,:;=@"


class RandomSource(Protocol):
    """The subset of random.Random used here."""

    def choice(self, seq): ...

    def randrange(self, stop: int) -> int: ...


def page_url(base_url: str, title: str) -> str:
    """Build the article URL for a title, escaping it as a single path segment."""
    return f"{base_url.rstrip('/')}/{quote(title, safe=_PATH_SAFE)}"


def choose_step_count(available: int, rng: RandomSource) -> int:
    """Pick how many leading steps to show.

    Returns a value between 2 and min(4, available). Pages with fewer than two
    steps show all of them.
    """
    if available <= 0:
        return 0
    return min(available, 2 + rng.randrange(min(3, available)))


def format_instructions(page: ScrapedPage, how_many: int) -> str | None:
    """Format the first ``how_many`` steps as a numbered list plus punchline.

    Returns None if any selected step is empty.
    """
    lines = [f"*{page.title}*"]
    for number, step in enumerate(page.steps[:how_many], start=1):
        if not step:
            return None
        lines.append(f"_{number}._ {step}")

    lines.append(f"_{how_many + 1}._ {PUNCHLINE}")
    return "\n".join(lines)


async def fetch_instructions(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    rng: RandomSource | None = None,
    settings: Settings | None = None,
) -> str:
    """Return a formatted how-to reply for ``query``.

    Never raises for upstream failures: every outcome is a chat-ready string.
    """
    settings = settings or get_settings()
    client = client or get_http_client()
    rng = rng or random.Random()

    try:
        titles = await search_titles(client, settings.wikihow_api_url, query)
    except httpx.RequestError:
        logger.warning("wikiHow search failed for %r", query, exc_info=True)
        return SEARCH_FAILED_MESSAGE

    if not titles:
        logger.info("No wikiHow results for %r", query)
        return UNKNOWN_MESSAGE

    for attempt in range(1, MAX_ATTEMPTS + 1):
        title = rng.choice(titles)
        url = page_url(settings.wikihow_base_url, title)

        try:
            response = await client.get(url)
        except httpx.RequestError:
            logger.warning("Failed to fetch wikiHow page %s", url, exc_info=True)
            return PAGE_FAILED_MESSAGE

        if response.status_code != 200:
            logger.info(
                "Attempt %d/%d: %s returned HTTP %d",
                attempt,
                MAX_ATTEMPTS,
                url,
                response.status_code,
            )
            continue

        try:
            steps = scrape_steps(response.content)
        except ScrapeError as exc:
            logger.info(
                "Attempt %d/%d: could not parse %s (%s)", attempt, MAX_ATTEMPTS, url, exc
            )
            continue

        if not steps:
            logger.info("Attempt %d/%d: no steps found on %s", attempt, MAX_ATTEMPTS, url)
            continue

        how_many = choose_step_count(len(steps), rng)
        reply = format_instructions(ScrapedPage(title=title, steps=steps), how_many)
        if reply is None:
            logger.info(
                "Attempt %d/%d: empty step within the first %d on %s",
                attempt,
                MAX_ATTEMPTS,
                how_many,
                url,
            )
            continue

        logger.info("Answered %r with %r (%d steps)", query, title, how_many)
        return reply

    logger.info("Gave up on %r after %d attempts", query, MAX_ATTEMPTS)
    return UNKNOWN_MESSAGE
