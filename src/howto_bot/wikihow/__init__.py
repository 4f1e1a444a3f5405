"""wikiHow search, scraping, and reply formatting.

Public API:
    fetch_instructions(query) -> str
        Search wikiHow, scrape a random matching article, and return a
        numbered list of its first few steps plus a punchline.
"""

from howto_bot.wikihow.client import close_http_client, get_http_client
from howto_bot.wikihow.instructions import fetch_instructions
from howto_bot.wikihow.scraper import ScrapeError, scrape_steps

__all__ = [
    "ScrapeError",
    "close_http_client",
    "fetch_instructions",
    "get_http_client",
    "scrape_steps",
]
