"""
Tests for settings loading, saving and deep merge logic.

Uses real TOML files on disk (no mocking).
"""

import toml

from watson.config import DEFAULT_WEB_SEARCHES, ClipboardSettings, SearchSettings, Settings, WebSearchShortcut
from watson.utils.helpers import _deep_merge, default_settings, load_settings, save_settings


class TestDeepMerge:
    """Test the _deep_merge function directly."""

    def test_override_replaces_flat_key(self):
        base = {"a": 1, "b": 2}
        override = {"b": 99}
        result = _deep_merge(base, override)
        assert result == {"a": 1, "b": 99}

    def test_override_adds_new_key(self):
        base = {"a": 1}
        override = {"b": 2}
        result = _deep_merge(base, override)
        assert result == {"a": 1, "b": 2}

    def test_nested_dicts_are_merged(self):
        base = {"section": {"a": 1, "b": 2}}
        override = {"section": {"b": 99, "c": 3}}
        result = _deep_merge(base, override)
        assert result == {"section": {"a": 1, "b": 99, "c": 3}}

    def test_base_is_not_mutated(self):
        base = {"a": {"x": 1}}
        override = {"a": {"x": 2}}
        _deep_merge(base, override)
        assert base["a"]["x"] == 1

    def test_lists_are_replaced(self):
        result = _deep_merge({"items": [1, 2]}, {"items": [3]})
        assert result == {"items": [3]}


class TestLoadSettings:
    """Test load_settings with real TOML files."""

    def test_missing_file_returns_and_writes_defaults(self, tmp_path):
        path = tmp_path / "watson" / "config.toml"
        settings = load_settings(path)
        assert settings["search"]["max_results"] == 8
        assert settings["clipboard"]["max_entries"] == 50
        assert path.exists()
        assert toml.load(path)["search"]["max_results"] == 8

    def test_loaded_values_override_defaults(self, tmp_settings):
        settings = load_settings(tmp_settings)
        assert settings["search"]["max_results"] == 5
        assert settings["clipboard"]["poll_interval_ms"] == 250

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(toml.dumps({"search": {"max_results": 3}}))
        settings = load_settings(path)
        assert settings["search"]["max_results"] == 3
        assert settings["search"]["fuzzy_threshold"] == 0.6
        assert len(settings["web_searches"]) == len(DEFAULT_WEB_SEARCHES)

    def test_corrupt_file_returns_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("this is [not valid toml")
        assert load_settings(path) == default_settings()

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "config.toml"
        data = default_settings()
        data["search"]["max_results"] = 12
        save_settings(data, path)
        assert load_settings(path)["search"]["max_results"] == 12


class TestSettingsModel:
    """Test the typed Settings view."""

    def test_defaults(self):
        settings = Settings()
        assert settings.search.max_results == 8
        assert settings.search.fuzzy_threshold == 0.6
        assert settings.clipboard.max_entries == 50
        assert settings.clipboard.poll_interval_ms == 500
        assert [ws.keyword for ws in settings.web_searches] == [
            "g", "ddg", "yt", "gh", "wiki", "so", "jira",
        ]

    def test_from_file(self, tmp_settings):
        settings = Settings.from_dict(load_settings(tmp_settings))
        assert settings.search.max_results == 5
        assert settings.clipboard.max_entries == 20
        assert [ws.keyword for ws in settings.web_searches] == ["x", "jira"]
        jira = settings.web_searches[1]
        assert jira.requires_instance is True
        assert jira.has_instance is False

    def test_malformed_web_search_skipped(self):
        settings = Settings.from_dict({
            "web_searches": [
                {"name": "Good", "keyword": "g", "url": "https://g/?q={query}"},
                {"name": "No URL", "keyword": "n"},
                "not a table",
            ],
        })
        assert [ws.name for ws in settings.web_searches] == ["Good"]

    def test_empty_instance_normalized(self):
        settings = Settings.from_dict({
            "web_searches": [{"name": "J", "keyword": "j", "url": "https://{instance}/{query}", "instance": ""}],
        })
        assert settings.web_searches[0].instance is None

    def test_round_trip_through_dict(self):
        jira = WebSearchShortcut("Jira", "jira", "https://{instance}.atlassian.net/browse/{query}",
                                 "jira", instance="acme")
        settings = Settings(web_searches=(jira,))
        assert Settings.from_dict(settings.to_dict()) == settings

    def test_non_table_section_uses_defaults(self):
        settings = Settings.from_dict({"search": "fast", "clipboard": [1, 2]})
        assert settings.search == SearchSettings()
        assert settings.clipboard == ClipboardSettings()

    def test_non_numeric_value_uses_default(self):
        settings = Settings.from_dict({
            "search": {"max_results": "lots", "fuzzy_threshold": [0.5]},
            "clipboard": {"poll_interval_ms": None},
        })
        assert settings.search.max_results == SearchSettings.max_results
        assert settings.search.fuzzy_threshold == SearchSettings.fuzzy_threshold
        assert settings.clipboard.poll_interval_ms == ClipboardSettings.poll_interval_ms

    def test_out_of_range_value_uses_default(self):
        settings = Settings.from_dict({
            "search": {"max_results": -2},
            "clipboard": {"max_entries": 0, "poll_interval_ms": -100},
        })
        assert settings.search.max_results == SearchSettings.max_results
        assert settings.clipboard.max_entries == ClipboardSettings.max_entries
        assert settings.clipboard.poll_interval_ms == ClipboardSettings.poll_interval_ms

    def test_boolean_is_not_a_number(self):
        settings = Settings.from_dict({"search": {"max_results": True}})
        assert settings.search.max_results == SearchSettings.max_results

    def test_zero_max_results_is_kept(self):
        assert Settings.from_dict({"search": {"max_results": 0}}).search.max_results == 0

    def test_bad_file_still_loads(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[search]\nmax_results = "eight"\n\n[clipboard]\nmax_entries = -1\n')
        settings = Settings.from_dict(load_settings(path))
        assert settings.search.max_results == SearchSettings.max_results
        assert settings.clipboard.max_entries == ClipboardSettings.max_entries
