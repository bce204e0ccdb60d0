"""
Search Actions - What happens when a result is activated.

Each result carries exactly one action. The set is closed: executors
dispatch over these six variants and treat anything else as a bug.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LaunchApp:
    path: str


@dataclass(frozen=True)
class OpenUrl:
    url: str


@dataclass(frozen=True)
class RunCommand:
    command: str


@dataclass(frozen=True)
class CopyClipboard:
    content: str


@dataclass(frozen=True)
class OpenNote:
    note_id: str


@dataclass(frozen=True)
class OpenFile:
    path: str


Action = Union[LaunchApp, OpenUrl, RunCommand, CopyClipboard, OpenNote, OpenFile]

ACTION_TYPES = (LaunchApp, OpenUrl, RunCommand, CopyClipboard, OpenNote, OpenFile)
