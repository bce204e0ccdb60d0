"""
App Search Handler - Installed applications as the fallback source.

Apps are offered for single-word queries, or for any non-command query
nothing else has answered. Scores are left at 0; the ranker sets them.
"""

from watson.search.actions import LaunchApp
from watson.search.handlers.commands import parse_command_query
from watson.search.router import ResultType, SearchContext, SearchHandler, SearchResult


class AppSearchHandler(SearchHandler):
    """Search installed applications."""

    name = "app_search"
    priority = 1000

    def matches(self, query: str, collected: list[SearchResult]) -> bool:
        if " " not in query:
            return True
        is_command_query, _ = parse_command_query(query)
        return not is_command_query and not collected

    def get_results(self, query: str, context: SearchContext) -> list[SearchResult]:
        return self._apps_to_results(context.apps)

    def _apps_to_results(self, apps) -> list[SearchResult]:
        """Convert AppEntry snapshot to SearchResult list."""
        return [
            SearchResult(
                id=app.id,
                name=app.name,
                description="Application",
                icon=app.icon,
                result_type=ResultType.APPLICATION,
                action=LaunchApp(path=app.path),
            )
            for app in apps
        ]
