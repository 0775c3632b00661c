# tests/test_theme.py

from __future__ import annotations

from tdo.theme import DONE_STYLE, TODO_STYLE, paint, strip_ansi


def test_paint_without_color_is_identity() -> None:
    assert paint("✓", DONE_STYLE, color=False) == "✓"


def test_paint_wraps_text_in_ansi_codes() -> None:
    painted = paint("✕", TODO_STYLE)

    assert painted != "✕"
    assert "\x1b[" in painted
    assert strip_ansi(painted) == "✕"


def test_paint_empty_text_stays_empty() -> None:
    assert paint("", TODO_STYLE) == ""


def test_strip_ansi_leaves_plain_text_alone() -> None:
    assert strip_ansi("    1 | ✕ buy milk") == "    1 | ✕ buy milk"
    assert strip_ansi("\x1b[32m✓\x1b[0m done") == "✓ done"
