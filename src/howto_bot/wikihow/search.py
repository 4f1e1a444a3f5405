"""wikiHow search API query."""

import logging

import httpx
from pydantic import ValidationError

from howto_bot.models.wikihow import WikiSearchResult

logger = logging.getLogger(__name__)


async def search_titles(client: httpx.AsyncClient, api_url: str, query: str) -> list[str]:
    """Return the article titles matching ``query``, in API order.

    Transport errors (httpx.RequestError) propagate to the caller. A body that
    is not the expected JSON shape is treated as an empty result.
    """
    response = await client.get(
        api_url,
        params={
            "action": "query",
            "list": "search",
            "srsearch": query,
            "format": "json",
        },
    )

    try:
        result = WikiSearchResult.model_validate_json(response.content)
    except ValidationError:
        logger.warning(
            "Undecodable search response (HTTP %d) for query %r",
            response.status_code,
            query,
        )
        return []

    return result.titles
