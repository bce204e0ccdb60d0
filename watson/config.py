"""
Watson Settings - Typed view over the TOML configuration.

The raw dictionary comes from utils.helpers.load_settings(); this module
turns it into immutable snapshots that are safe to hand to any thread.

Example config.toml:
    [search]
    max_results = 8
    fuzzy_threshold = 0.6

    [clipboard]
    max_entries = 50
    poll_interval_ms = 500

    [[web_searches]]
    name = "Jira"
    keyword = "jira"
    url = "https://{instance}.atlassian.net/browse/{query}"
    instance = "mycompany"
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

INSTANCE_PLACEHOLDER = "{instance}"
QUERY_PLACEHOLDER = "{query}"


@dataclass(frozen=True)
class WebSearchShortcut:
    name: str
    keyword: str
    url_template: str
    icon: Optional[str] = None
    instance: Optional[str] = None

    @property
    def requires_instance(self) -> bool:
        return INSTANCE_PLACEHOLDER in self.url_template

    @property
    def has_instance(self) -> bool:
        return bool(self.instance)

    def to_dict(self) -> dict[str, Any]:
        data = {"name": self.name, "keyword": self.keyword, "url": self.url_template}
        if self.icon:
            data["icon"] = self.icon
        if self.requires_instance:
            data["requires_setup"] = True
        if self.instance:
            data["instance"] = self.instance
        return data


DEFAULT_WEB_SEARCHES: tuple[WebSearchShortcut, ...] = (
    WebSearchShortcut("Google", "g", "https://www.google.com/search?q={query}", "google"),
    WebSearchShortcut("DuckDuckGo", "ddg", "https://duckduckgo.com/?q={query}", "duckduckgo"),
    WebSearchShortcut("YouTube", "yt", "https://www.youtube.com/results?search_query={query}", "youtube"),
    WebSearchShortcut("GitHub", "gh", "https://github.com/search?q={query}", "github"),
    WebSearchShortcut("Wikipedia", "wiki", "https://en.wikipedia.org/wiki/Special:Search?search={query}", "wikipedia"),
    WebSearchShortcut("Stack Overflow", "so", "https://stackoverflow.com/search?q={query}", "stackoverflow"),
    WebSearchShortcut("Jira", "jira", "https://{instance}.atlassian.net/browse/{query}", "jira"),
)


@dataclass(frozen=True)
class SearchSettings:
    max_results: int = 8
    # Carried for the settings UI; ranking only drops non-matches.
    fuzzy_threshold: float = 0.6


@dataclass(frozen=True)
class ClipboardSettings:
    max_entries: int = 50
    poll_interval_ms: int = 500


@dataclass(frozen=True)
class Settings:
    search: SearchSettings = field(default_factory=SearchSettings)
    clipboard: ClipboardSettings = field(default_factory=ClipboardSettings)
    web_searches: tuple[WebSearchShortcut, ...] = DEFAULT_WEB_SEARCHES

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """
        Build settings from a merged config dictionary.

        Unknown keys are ignored. Web search entries missing name,
        keyword or url are skipped with a warning, as are sections that
        are not tables and numbers that are malformed or out of range
        (the default is used instead).
        """
        search = _section(data, "search")
        clipboard = _section(data, "clipboard")

        if "web_searches" in data:
            web_searches = tuple(_parse_web_searches(data["web_searches"]))
        else:
            web_searches = DEFAULT_WEB_SEARCHES

        return cls(
            search=SearchSettings(
                max_results=_number(search, "search.max_results", SearchSettings.max_results, int, 0),
                fuzzy_threshold=_number(search, "search.fuzzy_threshold", SearchSettings.fuzzy_threshold, float, 0),
            ),
            clipboard=ClipboardSettings(
                max_entries=_number(clipboard, "clipboard.max_entries", ClipboardSettings.max_entries, int, 1),
                poll_interval_ms=_number(
                    clipboard, "clipboard.poll_interval_ms", ClipboardSettings.poll_interval_ms, int, 1,
                ),
            ),
            web_searches=web_searches,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "search": {
                "max_results": self.search.max_results,
                "fuzzy_threshold": self.search.fuzzy_threshold,
            },
            "clipboard": {
                "max_entries": self.clipboard.max_entries,
                "poll_interval_ms": self.clipboard.poll_interval_ms,
            },
            "web_searches": [ws.to_dict() for ws in self.web_searches],
        }


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        logger.warning(f"Ignoring [{name}]: expected a table, got {section!r}")
        return {}
    return section


def _number(section: dict[str, Any], key: str, default, cast, minimum):
    """Read section[key] as cast, falling back to default when missing, malformed or below minimum."""
    raw = section.get(key.split(".")[-1], default)
    if isinstance(raw, bool):
        logger.warning(f"Ignoring {key} = {raw!r}: expected a number")
        return default
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring {key} = {raw!r}: expected a number")
        return default
    if value < minimum:
        logger.warning(f"Ignoring {key} = {raw!r}: must be at least {minimum}")
        return default
    return value


def _parse_web_searches(entries) -> list[WebSearchShortcut]:
    shortcuts = []
    for entry in entries or []:
        if not isinstance(entry, dict) or not all(entry.get(k) for k in ("name", "keyword", "url")):
            logger.warning(f"Skipping malformed web search entry: {entry!r}")
            continue
        shortcuts.append(WebSearchShortcut(
            name=entry["name"],
            keyword=entry["keyword"],
            url_template=entry["url"],
            icon=entry.get("icon"),
            instance=entry.get("instance") or None,
        ))
    return shortcuts
