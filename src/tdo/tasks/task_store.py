# src/tdo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config import LOCAL_TODO_FILE
from .task_models import Task

logger = logging.getLogger(__name__)


class TodoFileNotFoundError(FileNotFoundError):
    """No usable todo file: neither ./.todo.md nor a valid configured default."""


class Tasks:
    """
    Ordered, in-memory task collection for one invocation.

    Order is file order until sort() is called, then status-then-id.
    Ids come from line positions at load time and are not persisted.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Tasks:
        return cls(Task.parse(i, line) for i, line in enumerate(lines, start=1))

    @classmethod
    def from_text(cls, text: str) -> Tasks:
        return cls.from_lines(split_lines(text))

    # ---- sequence protocol ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def __repr__(self) -> str:
        return f"Tasks({self._tasks!r})"

    # ---- mutations ----

    def sort(self) -> None:
        # list.sort is stable; keys are unique per load anyway.
        self._tasks.sort(key=Task.sort_key)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def get(self, task_id: int) -> Task | None:
        """Return the live task object (mutations are visible in the collection)."""
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def delete(self, task_id: int) -> Task | None:
        index = self.index_of(task_id)
        if index is None:
            return None
        return self._tasks.pop(index)

    def next_id(self) -> int:
        # Matches the numbering existing todo files were written with: length + 2.
        return len(self._tasks) + 2

    # ---- serialization ----

    def to_file(self) -> str:
        return "\n".join(t.to_line() for t in self._tasks)

    def render(self, *, color: bool = False) -> str:
        """Display block fed to the picker and printed by `view`: one row + newline per task."""
        return "".join(f"{t.render(color=color)}\n" for t in self._tasks)


# --------------------------------------------------------------------------------------
# File I/O
# --------------------------------------------------------------------------------------


def split_lines(text: str) -> list[str]:
    """
    Split file text into lines.

    Splits on "\\n" only, drops a trailing "\\r" per line and does not produce an
    extra empty line after a final newline.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_tasks(path: str | Path) -> Tasks:
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    tasks = Tasks.from_text(text)
    logger.debug("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def write_tasks(path: str | Path, tasks: Tasks) -> None:
    """Replace the file contents with the serialized collection (no trailing newline added)."""
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(tasks.to_file())
    logger.info("Wrote %d tasks to %s", len(tasks), path)


def resolve_todo_path(default_file: str | Path | None, *, cwd: str | Path | None = None) -> Path:
    """
    Pick the todo file for this invocation.

    - ./.todo.md in the working directory wins
    - else the configured default, which must be an existing file
    - else TodoFileNotFoundError
    """
    base = Path.cwd() if cwd is None else Path(cwd)
    local = base / LOCAL_TODO_FILE
    if local.is_file():
        logger.debug("Using local todo file %s", local)
        return local

    if default_file is not None:
        default_path = Path(default_file).expanduser()
        if default_path.is_file():
            logger.debug("Using default todo file %s", default_path)
            return default_path
        raise TodoFileNotFoundError(f"path does not lead to a valid file: {default_path}")

    raise TodoFileNotFoundError(
        f"file {LOCAL_TODO_FILE} not found in current directory and no default is set"
    )
