"""
Helper utilities for the Watson launcher.

Provides:
- Settings loading and saving (TOML with defaults merged in)
- Action execution for activated search results
"""

import subprocess
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

from watson.config import Settings
from watson.search.actions import (
    CopyClipboard,
    LaunchApp,
    OpenFile,
    OpenNote,
    OpenUrl,
    RunCommand,
)
from watson.services.system_commands import ActionError, execute_command

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "watson" / "config.toml"


def default_settings() -> Dict[str, Any]:
    """Built-in settings as a plain dictionary."""
    return Settings().to_dict()


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load launcher settings from TOML file.

    Args:
        path: Config file, defaults to ~/.config/watson/config.toml

    Returns:
        Dictionary containing settings with defaults applied. A missing
        file is created with the defaults; an unreadable one is ignored.

    Example settings structure:
        {
            "search": {"max_results": 8, "fuzzy_threshold": 0.6},
            "clipboard": {"max_entries": 50, "poll_interval_ms": 500},
            "web_searches": [{"name": "Google", "keyword": "g", "url": "..."}],
        }
    """
    settings_path = Path(path) if path else DEFAULT_CONFIG_PATH
    defaults = default_settings()

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, writing defaults")
        try:
            save_settings(defaults, settings_path)
        except OSError:
            # Already logged by save_settings; defaults still apply
            pass
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}. Using defaults")
        return defaults

    logger.debug(f"Loaded settings from {settings_path}")
    return _deep_merge(defaults, loaded)


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Write settings to TOML, creating the directory if needed.

    Raises:
        OSError: The file could not be written
    """
    settings_path = Path(path) if path else DEFAULT_CONFIG_PATH

    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with open(settings_path, "w") as f:
            toml.dump(data, f)
    except OSError:
        logger.exception(f"Could not save settings to {settings_path}")
        raise


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _xdg_open(target: str) -> None:
    """Hand a path or URL to the desktop's default handler."""
    try:
        subprocess.Popen(
            ["xdg-open", target],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        logger.warning(f"xdg-open failed, cannot open {target}: {e}")
        raise ActionError(f"xdg-open failed: {e}") from e


def execute_action(action, clipboard=None) -> None:
    """
    Carry out the action of an activated result.

    Args:
        action: One of the search.actions variants
        clipboard: ClipboardService used for CopyClipboard actions

    Raises:
        ActionError: The action could not be performed
        ClipboardError: Writing to the clipboard failed
        TypeError: action is not a known action variant
    """
    if isinstance(action, LaunchApp):
        _xdg_open(action.path)
    elif isinstance(action, OpenUrl):
        _xdg_open(action.url)
    elif isinstance(action, OpenFile):
        _xdg_open(action.path)
    elif isinstance(action, RunCommand):
        execute_command(action.command)
    elif isinstance(action, CopyClipboard):
        if clipboard is None:
            raise ActionError("No clipboard service to copy with")
        clipboard.copy_to_clipboard(action.content)
    elif isinstance(action, OpenNote):
        raise ActionError(f"Notes are not available: {action.note_id}")
    else:
        raise TypeError(f"Unknown action: {action!r}")
