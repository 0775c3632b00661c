# src/tdo/core/ports.py

"""
Ports (interfaces) used by the commands.

Commands depend on the Selector Protocol instead of a concrete picker.
This keeps the fuzzy finder swappable and lets tests script user choices.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class SelectOptions:
    """
    How to present one picker.

    - prompt: text left of the query line
    - query: pre-filled query (free-text entry edits this)
    - header: sticky line above the candidates
    - preview: shell command whose output is shown next to the list
    - preview_window: layout of the preview pane (e.g. "right:80%")
    - color: picker colour spec (fzf --color syntax)
    """

    prompt: str | None = None
    query: str | None = None
    header: str | None = None
    preview: str | None = None
    preview_window: str | None = None
    color: str | None = None


@dataclass(frozen=True, slots=True)
class Selection:
    """
    Result of a non-aborted picker.

    `query` is the live query at accept time (the value for free-text entry).
    `output` is the chosen candidate with ANSI codes stripped, or None when nothing matched.
    """

    query: str
    output: str | None = None


class Selector(Protocol):
    """Pick one line out of newline-separated candidates; None means the user aborted."""

    def select(self, candidates: str, options: SelectOptions) -> Selection | None: ...
