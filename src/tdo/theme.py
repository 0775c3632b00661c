# src/tdo/theme.py

"""Colour helpers for status glyphs and menu entries.

Colouring is explicit: callers pass `color=True/False` (usually settings.color),
nothing here flips a process-wide switch. ANSI output is produced by rich with
the 16-colour palette so fzf's --ansi parser and plain terminals agree.
"""

from __future__ import annotations

import re
from functools import lru_cache

from rich.console import Console
from rich.text import Text

TODO_STYLE = "red"
DONE_STYLE = "green"
OTHER_STYLE = "yellow"

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@lru_cache(maxsize=1)
def _ansi_console() -> Console:
    return Console(
        force_terminal=True,
        color_system="standard",
        no_color=False,
        highlight=False,
        markup=False,
        emoji=False,
    )


def paint(text: str, style: str, *, color: bool = True) -> str:
    """Return `text` wrapped in ANSI codes for `style`, or unchanged when color is off."""
    if not color or not text:
        return text
    console = _ansi_console()
    with console.capture() as capture:
        console.print(Text(text, style=style), end="", soft_wrap=True)
    return capture.get()


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)
