# tests/test_task_models.py

from __future__ import annotations

import pytest

from tdo.tasks.task_models import Status, Task, compare_status


@pytest.mark.parametrize(
    ("line", "text", "status"),
    [
        ("- [ ] buy milk", "buy milk", Status.TODO),
        ("- [x] pay bills", "pay bills", Status.DONE),
        ("random note", "random note", Status.OTHER),
        ("-[x]   finish report   ", "finish report", Status.DONE),
        ("[ ] no bullet", "no bullet", Status.TODO),
        ("  - plain item  ", "- plain item", Status.OTHER),
        ("- [X] capital x is not done", "[X] capital x is not done", Status.OTHER),
        ("", "", Status.OTHER),
    ],
)
def test_parse_line(line: str, text: str, status: Status) -> None:
    task = Task.parse(7, line)
    assert task == Task(7, text, status)


def test_parse_strips_only_one_marker() -> None:
    task = Task.parse(1, "- [ ] [ ] twice")
    assert task.status is Status.TODO
    assert task.text == "[ ] twice"


def test_to_line_per_status() -> None:
    assert Task(1, "a", Status.TODO).to_line() == "- [ ] a"
    assert Task(1, "b", Status.DONE).to_line() == "- [x] b"
    assert Task(1, "c", Status.OTHER).to_line() == "- c"


@pytest.mark.parametrize("line", ["- [ ] buy milk", "- [x] pay bills", "- some note"])
def test_round_trip_is_exact_for_canonical_lines(line: str) -> None:
    assert Task.parse(1, line).to_line() == line


def test_other_without_bullet_gains_one_on_write() -> None:
    # Expected behaviour: OTHER lines are normalised to "- <text>".
    assert Task.parse(1, "   random note").to_line() == "- random note"


def test_status_order_is_todo_done_other() -> None:
    assert compare_status(Status.TODO, Status.DONE) < 0
    assert compare_status(Status.DONE, Status.OTHER) < 0
    assert compare_status(Status.TODO, Status.OTHER) < 0
    assert compare_status(Status.OTHER, Status.TODO) > 0
    assert compare_status(Status.DONE, Status.DONE) == 0


def test_task_ordering_status_then_id() -> None:
    other_1 = Task(1, "note", Status.OTHER)
    done_2 = Task(2, "paid", Status.DONE)
    todo_9 = Task(9, "later", Status.TODO)
    todo_3 = Task(3, "soon", Status.TODO)

    assert sorted([other_1, done_2, todo_9, todo_3]) == [todo_3, todo_9, done_2, other_1]
    assert todo_3 < todo_9
    assert done_2 > todo_9
    assert other_1 >= done_2


def test_same_status_and_id_order_as_ties_whatever_the_text() -> None:
    # remove + add can hand out an id that is already taken
    a = Task(5, "a", Status.TODO)
    b = Task(5, "b", Status.TODO)

    assert a <= b and b <= a
    assert a >= b and b >= a
    assert not a < b and not b < a
    assert not a > b and not b > a
    assert a != b
    assert sorted([b, a]) == [b, a]


def test_equality_needs_id_text_and_status() -> None:
    base = Task(1, "x", Status.TODO)
    assert base == Task(1, "x", Status.TODO)
    assert base != Task(2, "x", Status.TODO)
    assert base != Task(1, "y", Status.TODO)
    assert base != Task(1, "x", Status.DONE)


def test_render_layout_without_color() -> None:
    assert Task(1, "buy milk", Status.TODO).render() == "    1 | ✕ buy milk"
    assert Task(22, "pay bills", Status.DONE).render() == "   22 | ✓ pay bills"
    assert Task(333, "random note", Status.OTHER).render() == "  333 | random note"


def test_render_with_color_wraps_glyph_only() -> None:
    row = Task(4, "buy milk", Status.TODO).render(color=True)
    assert "\x1b[" in row
    assert row.startswith("    4 | ")
    assert row.endswith(" buy milk")
    assert Task.parse_id(row) == 4


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("    1 | ✕ buy milk", 1),
        ("42 | note", 42),
        ("   17", 17),
        ("x | nope", None),
        ("-3 | negative", None),
        ("+3 | signed", None),
        ("", None),
        ("   ", None),
        ("done", None),
    ],
)
def test_parse_id(line: str, expected: int | None) -> None:
    assert Task.parse_id(line) == expected
