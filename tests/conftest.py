# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from tdo.config import Settings
from tdo.core.state import AppState
from tdo.tasks.task_store import read_tasks

from .fakes import FakeSelector

SAMPLE = "- [ ] buy milk\n- [x] pay bills\nrandom note"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings for a tmp sandbox.

    Built directly rather than from the environment so tests do not depend on
    the developer's EDITOR, NO_COLOR or .env.
    """
    return Settings(
        app_name="tdo",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        default_file=None,
        editor="vi",
        fzf_executable="fzf",
        picker_height="50%",
        color=False,
    )


@pytest.fixture()
def todo_file(tmp_path: Path) -> Path:
    path = tmp_path / ".todo.md"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture()
def selector() -> FakeSelector:
    return FakeSelector()


@pytest.fixture()
def state(settings: Settings, todo_file: Path, selector: FakeSelector) -> AppState:
    """AppState over the sample file, with a scripted selector instead of fzf."""
    return AppState(
        settings=settings,
        path=todo_file,
        tasks=read_tasks(todo_file),
        selector=selector,
    )
