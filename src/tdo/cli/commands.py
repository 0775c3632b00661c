# src/tdo/cli/commands.py

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable

import click

from ..core.ports import SelectOptions
from ..core.state import AppState
from ..tasks.task_models import DONE_GLYPH, Status, Task
from ..tasks.task_store import read_tasks, write_tasks
from ..theme import DONE_STYLE, OTHER_STYLE, TODO_STYLE, paint

CommandHandler = Callable[[AppState], None]

logger = logging.getLogger(__name__)

# Dimmed info line / background for the free-text and confirmation pickers.
ENTRY_COLORS = "info:8,bg:8"

YES = "yes"
NO = "no"

DEFAULT_EDITOR = "vi"


class CommandRegistry:
    """Named user commands (view/add/...) shared by the CLI group and the interactive picker."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._aliases[alias.lower()] = key

    def resolve(self, name: str) -> str | None:
        """Map a name or alias to the registered command name."""
        key = name.strip().lower()
        if key in self._handlers:
            return key
        return self._aliases.get(key)

    def names(self) -> list[str]:
        """Command names in registration order (aliases excluded)."""
        return list(self._handlers)

    def aliases_for(self, name: str) -> list[str]:
        return [alias for alias, target in self._aliases.items() if target == name]

    def help_for(self, name: str) -> str:
        return self._help.get(name, "")

    def handle(self, state: AppState, name: str) -> bool:
        """Run the command called `name` (or alias). Returns False if there is no such command."""
        key = self.resolve(name)
        if key is None:
            logger.debug("Unknown command %r", name)
            return False

        logger.info("Running command %s on %s", key, state.path)
        self._handlers[key](state)
        return True


registry = CommandRegistry()


# --------------------------------------------------------------------------------------
# Picker helpers
# --------------------------------------------------------------------------------------


def _pick_task_id(state: AppState, prompt: str) -> int | None:
    """
    Show the rendered tasks and return the id of the chosen row.

    None ends the caller's loop: abort, nothing accepted, or a row whose first
    token is not an id.
    """
    candidates = state.tasks.render(color=state.settings.color)
    selection = state.selector.select(candidates, SelectOptions(prompt=prompt))
    if selection is None or selection.output is None:
        return None
    return Task.parse_id(selection.output)


def _status_menu(color: bool) -> str:
    done = f"{paint(DONE_GLYPH, DONE_STYLE, color=color)} done"
    todo = f"{paint('x', TODO_STYLE, color=color)} todo"
    other = f"{paint('~', OTHER_STYLE, color=color)} other"
    return f"{done}\n{todo}\n{other}\n"


def status_from_choice(choice: str) -> Status | None:
    """Map a status menu line to a Status; later keywords win, as the menu lines are checked in order."""
    status: Status | None = None
    if "done" in choice:
        status = Status.DONE
    if "todo" in choice:
        status = Status.TODO
    if "other" in choice:
        status = Status.OTHER
    return status


def set_status(state: AppState, task_id: int) -> None:
    task = state.tasks.get(task_id)
    if task is None:
        return

    selection = state.selector.select(_status_menu(state.settings.color), SelectOptions())
    if selection is None or selection.output is None:
        return

    status = status_from_choice(selection.output)
    if status is not None:
        logger.debug("Task %d status %s -> %s", task.id, task.status.value, status.value)
        task.status = status


def set_text(state: AppState, task_id: int) -> None:
    task = state.tasks.get(task_id)
    if task is None:
        return

    selection = state.selector.select(
        "",
        SelectOptions(prompt="new text: ", query=task.text, color=ENTRY_COLORS),
    )
    if selection is not None and selection.query:
        task.text = selection.query


def delete_task(state: AppState, task_id: int) -> None:
    task = state.tasks.get(task_id)
    if task is None:
        return

    selection = state.selector.select(
        f"{NO}\n{YES}\n",
        SelectOptions(prompt="permanently delete task: ", header=task.text, color=ENTRY_COLORS),
    )
    if selection is not None and selection.output == YES:
        state.tasks.delete(task_id)
        logger.debug("Deleted task %d", task_id)


def new_task(state: AppState) -> Task | None:
    """Prompt for the text of one new TODO task; None when aborted or left empty."""
    selection = state.selector.select(
        "",
        SelectOptions(prompt="new task text: ", color=ENTRY_COLORS),
    )
    if selection is None or not selection.query:
        return None
    return Task(state.tasks.next_id(), selection.query, Status.TODO)


def _select_loop(state: AppState, prompt: str, action: Callable[[AppState, int], None]) -> None:
    while (task_id := _pick_task_id(state, prompt)) is not None:
        action(state, task_id)


# --------------------------------------------------------------------------------------
# Commands
# --------------------------------------------------------------------------------------


def cmd_view(state: AppState) -> None:
    state.tasks.sort()
    click.echo(f"\n{state.tasks.render(color=state.settings.color)}")


def cmd_add(state: AppState) -> None:
    added = 0
    while (task := new_task(state)) is not None:
        state.tasks.add(task)
        added += 1

    if added:
        write_tasks(state.path, state.tasks)


def cmd_remove(state: AppState) -> None:
    _select_loop(state, "remove > ", delete_task)
    write_tasks(state.path, state.tasks)


def cmd_set(state: AppState) -> None:
    _select_loop(state, "set > ", set_status)
    write_tasks(state.path, state.tasks)


def cmd_modify(state: AppState) -> None:
    _select_loop(state, "modify > ", set_text)
    write_tasks(state.path, state.tasks)


def cmd_editor(state: AppState) -> None:
    """
    Open the todo file in the external editor.

    The editor owns any changes. Afterwards the collection is re-read so a
    following command in the interactive loop does not write stale tasks back.
    """
    try:
        argv = shlex.split(state.settings.editor) or [DEFAULT_EDITOR]
    except ValueError as e:
        raise click.ClickException(
            f"cannot parse editor command {state.settings.editor!r}: {e}"
        ) from e
    argv.append(str(state.path))
    logger.debug("Launching editor: %s", argv)

    proc = subprocess.run(argv, check=False)
    if proc.returncode != 0:
        logger.warning("Editor %s exited with status %s", argv[0], proc.returncode)

    state.tasks = read_tasks(state.path)


def cmd_sort(state: AppState) -> None:
    state.tasks.sort()
    write_tasks(state.path, state.tasks)


registry.register("view", cmd_view, help_text="Show existing tasks", aliases=["v"])
registry.register("add", cmd_add, help_text="Add new tasks", aliases=["a"])
registry.register("remove", cmd_remove, help_text="Select tasks to remove", aliases=["r"])
registry.register("set", cmd_set, help_text="Change status of tasks", aliases=["s"])
registry.register("modify", cmd_modify, help_text="Change text of tasks", aliases=["m"])
registry.register("editor", cmd_editor, help_text="Open tasks with EDITOR", aliases=["e"])
registry.register("sort", cmd_sort, help_text="Sort tasks by status")
