"""
Clipboard Handler - Browse and filter clipboard history.

Triggers on:
  cb / clip            → most recent entries
  cb text / clip text  → entries containing "text" (case-insensitive)

Results keep history order and are never fuzzy-ranked.
"""

from watson.search.actions import CopyClipboard
from watson.search.router import ResultType, SearchContext, SearchHandler, SearchResult

KEYWORDS = ("cb", "clip")
MAX_CLIPBOARD_RESULTS = 8
CLIPBOARD_SCORE = 10000


class ClipboardHandler(SearchHandler):
    """Show clipboard history entries for the cb/clip keywords."""

    name = "clipboard"
    priority = 100
    exclusive = True

    def matches(self, query: str, collected: list[SearchResult]) -> bool:
        return self._filter(query) is not None

    def get_results(self, query: str, context: SearchContext) -> list[SearchResult]:
        if context.clipboard is None:
            return []

        clip_query = self._filter(query) or ""
        if clip_query:
            entries = context.clipboard.search_history(clip_query)
        else:
            entries = context.clipboard.get_history()

        return [self._entry_to_result(entry) for entry in entries[:MAX_CLIPBOARD_RESULTS]]

    def _filter(self, query: str):
        """Return the filter text after the keyword, "" for a bare keyword, None otherwise."""
        for keyword in KEYWORDS:
            if query == keyword:
                return ""
            if query.startswith(keyword + " "):
                return query[len(keyword) + 1:]
        return None

    def _entry_to_result(self, entry) -> SearchResult:
        # Stored in UTC, shown in local time
        captured = entry.timestamp.astimezone()
        return SearchResult(
            id=entry.id,
            name=entry.preview,
            description=f"Copied {captured.strftime('%H:%M:%S')}",
            icon="clipboard",
            result_type=ResultType.CLIPBOARD,
            score=CLIPBOARD_SCORE,
            action=CopyClipboard(content=entry.content),
        )
