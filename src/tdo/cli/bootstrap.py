# src/tdo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves which todo file this invocation works on,
- reads it into a Tasks collection,
- wires the concrete picker (fzf) into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ..config import LOCAL_TODO_FILE, Settings, get_settings
from ..core.ports import Selector
from ..core.state import AppState
from ..selector.fzf import FzfSelector
from ..tasks.task_store import read_tasks, resolve_todo_path

logger = logging.getLogger(__name__)


def build_selector(settings: Settings, path: Path) -> FzfSelector:
    """
    fzf picker for this invocation.

    The command picker previews `tdo view` in a child process; pointing
    TDO_DEFAULT_FILE at the resolved path makes the preview show the same file.
    """
    extra_env = {"TDO_DEFAULT_FILE": str(path)}
    if settings.color:
        extra_env["FORCE_COLOR"] = "1"
    return FzfSelector(
        settings.fzf_executable,
        height=settings.picker_height,
        extra_env=extra_env,
    )


def create_initial_state(
    *,
    settings: Settings | None = None,
    selector: Selector | None = None,
    cwd: str | Path | None = None,
) -> AppState:
    """
    Create AppState for one invocation.

    Keeping settings and selector injectable makes the app easy to test without a terminal.
    Raises TodoFileNotFoundError / OSError when the file cannot be found or read.
    """
    if settings is None:
        settings = get_settings()

    base = Path.cwd() if cwd is None else Path(cwd)
    if settings.default_file is not None and not (base / LOCAL_TODO_FILE).is_file():
        click.echo(f"using default file: {settings.default_file}")

    path = resolve_todo_path(settings.default_file, cwd=base)
    tasks = read_tasks(path)

    return AppState(
        settings=settings,
        path=path,
        tasks=tasks,
        selector=selector if selector is not None else build_selector(settings, path),
    )
