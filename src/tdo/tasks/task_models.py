# src/tdo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..theme import DONE_STYLE, TODO_STYLE, paint

TODO_MARKER = "[ ]"
DONE_MARKER = "[x]"

TODO_GLYPH = "✕"
DONE_GLYPH = "✓"

ID_WIDTH = 5


class Status(Enum):
    """Three-way task status. Ordering comes from STATUS_ORDER, not declaration order."""

    TODO = "todo"
    DONE = "done"
    OTHER = "other"

    @property
    def rank(self) -> int:
        return STATUS_ORDER[self]


STATUS_ORDER: dict[Status, int] = {
    Status.TODO: 0,
    Status.DONE: 1,
    Status.OTHER: 2,
}


def compare_status(a: Status, b: Status) -> int:
    """Three-way comparison: negative if a sorts before b, 0 if equal, positive otherwise."""
    return STATUS_ORDER[a] - STATUS_ORDER[b]


@dataclass(slots=True)
class Task:
    """
    One line of the todo file.

    - id: 1-based line position at load time (not persisted)
    - text: body with bullet/checkbox markup stripped
    - status: TODO / DONE / OTHER

    Tasks order by status (TODO < DONE < OTHER), then by id; text is ignored, so
    two tasks with the same status and id are neither < nor > each other.
    Equality (==) still needs equal id, text and status.
    """

    id: int
    text: str
    status: Status = Status.TODO

    def sort_key(self) -> tuple[int, int]:
        return (self.status.rank, self.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.sort_key() >= other.sort_key()

    # ---- line format ----

    @classmethod
    def parse(cls, task_id: int, line: str) -> Task:
        """
        Parse one markdown line.

        "- [ ] a" -> TODO "a", "-[x]  b " -> DONE "b", anything else -> OTHER (trimmed,
        one leading "-" removed).
        """
        text = line[1:].strip() if line.startswith("-") else line.strip()

        if text.startswith(TODO_MARKER):
            return cls(task_id, text[len(TODO_MARKER):].strip(), Status.TODO)

        if text.startswith(DONE_MARKER):
            return cls(task_id, text[len(DONE_MARKER):].strip(), Status.DONE)

        return cls(task_id, text, Status.OTHER)

    def to_line(self) -> str:
        if self.status is Status.TODO:
            return f"- {TODO_MARKER} {self.text}"
        if self.status is Status.DONE:
            return f"- {DONE_MARKER} {self.text}"
        return f"- {self.text}"

    # ---- display ----

    def render(self, *, color: bool = False) -> str:
        """Display row: right-aligned id, pipe, glyph (none for OTHER), text."""
        prefix = f"{self.id:>{ID_WIDTH}} |"
        if self.status is Status.TODO:
            return f"{prefix} {paint(TODO_GLYPH, TODO_STYLE, color=color)} {self.text}"
        if self.status is Status.DONE:
            return f"{prefix} {paint(DONE_GLYPH, DONE_STYLE, color=color)} {self.text}"
        return f"{prefix} {self.text}"

    @staticmethod
    def parse_id(line: str) -> int | None:
        """Read the id back from a rendered row (first whitespace-delimited token)."""
        parts = line.split()
        if not parts:
            return None
        token = parts[0]
        # unsigned integer only: no sign, digits only
        if not token.isascii() or not token.isdigit():
            return None
        return int(token)
