# src/tdo/cli/interactive.py

from __future__ import annotations

import logging
import shlex
import sys

from ..core.ports import SelectOptions
from ..core.state import AppState
from .commands import CommandRegistry, registry as command_registry

logger = logging.getLogger(__name__)

PREVIEW_WINDOW = "right:80%"


def preview_command() -> str:
    """Shell command fzf runs for the preview pane: this program's `view`."""
    return f"{shlex.quote(sys.executable)} -m tdo view"


def pick_command(state: AppState, registry: CommandRegistry) -> str | None:
    selection = state.selector.select(
        "\n".join(registry.names()),
        SelectOptions(preview=preview_command(), preview_window=PREVIEW_WINDOW),
    )
    if selection is None or selection.output is None:
        return None
    return selection.output


def run_interactive(state: AppState, registry: CommandRegistry | None = None) -> None:
    """
    Command picker loop: pick a command, run it against the live collection, repeat.

    Aborting the picker (or accepting something that is not a command) ends the loop.
    Errors from a command propagate to the caller.
    """
    registry = registry or command_registry
    logger.debug("Interactive loop started on %s", state.path)

    while True:
        name = pick_command(state, registry)
        if name is None:
            break
        if not registry.handle(state, name):
            break

    logger.debug("Interactive loop finished.")
