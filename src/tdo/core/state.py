# src/tdo/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import Settings
from ..tasks.task_store import Tasks
from .ports import Selector


@dataclass
class AppState:
    # Settings live on the state so command handlers never read global config.
    settings: Settings

    # The todo file for this invocation and its in-memory collection.
    path: Path
    tasks: Tasks

    selector: Selector
