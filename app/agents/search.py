# app/agents/search.py
"""
Best-effort web context for roadmap prompts.

Uses the DuckDuckGo instant answer API. Every query is optional: a query
that fails for any reason is logged and skipped, so the result may be empty.
"""
import logging
from datetime import date
from typing import List

import httpx

from app.settings import settings
from app.agents.schemas import SearchSnippet

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Career Information"


def build_search_queries(goal: str, year: int | None = None) -> List[str]:
    year = year or date.today().year
    return [
        f"{goal} career requirements skills certifications",
        f"{goal} job requirements education degree",
        f"{goal} salary trends hiring {year}",
        f"{goal} professional development courses training",
    ]


def snippet_from_answer(data: dict) -> SearchSnippet | None:
    content = data.get("AbstractText")
    if not content:
        return None
    return SearchSnippet(
        title=data.get("Heading") or DEFAULT_TITLE,
        content=content,
        url=data.get("AbstractURL") or "",
    )


async def _search_one(client: httpx.AsyncClient, query: str) -> SearchSnippet | None:
    params = {
        "q": query,
        "format": "json",
        "no_html": "1",
        "skip_disambig": "1",
    }
    r = await client.get(settings.search_url, params=params)
    r.raise_for_status()
    data = r.json()
    if not isinstance(data, dict):
        raise ValueError("Instant answer payload is not an object")
    return snippet_from_answer(data)


async def _search_all(client: httpx.AsyncClient, goal: str) -> List[SearchSnippet]:
    results: List[SearchSnippet] = []
    # One request in flight at a time
    for query in build_search_queries(goal):
        try:
            snippet = await _search_one(client, query)
        except (httpx.HTTPError, ValueError) as e:
            logger.info("Search failed for query %r: %s", query, e)
            continue
        if snippet is not None:
            results.append(snippet)
    return results


async def search_web(goal: str, http_client: httpx.AsyncClient | None = None) -> List[SearchSnippet]:
    if http_client is not None:
        return await _search_all(http_client, goal)

    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
        return await _search_all(client, goal)
