"""
Web Search Handler - Keyword shortcuts that open a search URL.

Triggers on "<keyword> <terms>", e.g.:
  g python tutorial   → Google
  wiki python         → Wikipedia
  jira ABC-123        → Jira (needs an instance configured)

Shortcuts come from settings [[web_searches]]. A template containing
{instance} is skipped until an instance is configured.
"""

import urllib.parse

from loguru import logger

from watson.config import INSTANCE_PLACEHOLDER, QUERY_PLACEHOLDER, WebSearchShortcut
from watson.search.actions import OpenUrl
from watson.search.router import ResultType, SearchContext, SearchHandler, SearchResult

WEB_SEARCH_SCORE = 10000


def build_url(shortcut: WebSearchShortcut, search_term: str) -> str:
    """Fill a shortcut's template with the instance and percent-encoded term."""
    url = shortcut.url_template
    if shortcut.requires_instance:
        url = url.replace(INSTANCE_PLACEHOLDER, shortcut.instance)
    return url.replace(QUERY_PLACEHOLDER, urllib.parse.quote(search_term, safe=""))


class WebSearchHandler(SearchHandler):
    """Turn keyword-prefixed queries into web searches."""

    name = "web_search"
    priority = 200

    def matches(self, query: str, collected: list[SearchResult]) -> bool:
        return " " in query

    def get_results(self, query: str, context: SearchContext) -> list[SearchResult]:
        results = []

        for shortcut in context.settings.web_searches:
            prefix = f"{shortcut.keyword} "
            if not query.startswith(prefix):
                continue

            search_term = query[len(prefix):]
            if not search_term:
                continue

            if shortcut.requires_instance and not shortcut.has_instance:
                logger.debug(f"Web search '{shortcut.keyword}' needs an instance, skipping")
                continue

            results.append(SearchResult(
                id=f"web:{shortcut.keyword}",
                name=f"{shortcut.name}: {search_term}",
                description="Web Search",
                icon=shortcut.icon,
                result_type=ResultType.WEB_SEARCH,
                score=WEB_SEARCH_SCORE,
                action=OpenUrl(url=build_url(shortcut, search_term)),
            ))

        return results
