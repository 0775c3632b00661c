# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tdo.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("tdo.cli.commands", logging.DEBUG))
    assert f.filter(_record("tdo", logging.INFO))
    assert not f.filter(_record("tdox", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))
    assert not f.filter(_record("rich", logging.WARNING))
    assert f.filter(_record("rich", logging.ERROR))


def test_setup_logging_writes_everything_to_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)

    logging.getLogger("tdo.test").debug("debug line for the file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "tdo.log"
    assert "debug line for the file" in log_file.read_text(encoding="utf-8")
    assert len(logging.getLogger().handlers) == 2


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(logging.getLogger().handlers) == 2


def test_setup_logging_keeps_app_warnings_on_console_only_at_level(
    tmp_path: Path, restore_root_logging, capsys
) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.WARNING)

    logging.getLogger("tdo.cli").info("quiet on console")
    logging.getLogger("tdo.cli").warning("editor exited badly")
    logging.getLogger("somelib").warning("third-party chatter")

    err = capsys.readouterr().err
    assert "editor exited badly" in err
    assert "quiet on console" not in err
    assert "third-party chatter" not in err
    assert logging.getLogger().level == logging.DEBUG
