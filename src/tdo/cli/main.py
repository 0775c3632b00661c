# src/tdo/cli/main.py

"""
CLI entrypoint.

Initializes logging, resolves the todo file, then either runs the named
command once or enters the interactive command picker.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from dataclasses import replace
from pathlib import Path

import click

from .. import __version__
from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..selector.fzf import SelectorError
from .bootstrap import create_initial_state
from .commands import registry as command_registry
from .interactive import run_interactive

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# ctx.meta key for the positional DEFAULT_FILE
DEFAULT_FILE_META = "tdo.default_file"

EPILOG = (
    "DEFAULT_FILE (or TDO_DEFAULT_FILE) is used when the current directory has no "
    ".todo.md. Without a COMMAND an interactive command picker is shown."
)


@contextlib.contextmanager
def _reported_errors() -> Iterator[None]:
    """Turn fatal I/O and picker failures into a one-line error + exit status 1."""
    try:
        yield
    except (OSError, SelectorError) as e:
        logger.debug("Fatal error", exc_info=True)
        raise click.ClickException(str(e)) from e


class AliasedGroup(click.Group):
    """
    Group with short aliases (v, a, r, ...) and an optional positional file.

    A first positional that is not a command is DEFAULT_FILE; once given, no
    command may follow it.
    """

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        name = command_registry.resolve(cmd_name) or cmd_name
        return self.commands.get(name)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        _, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd is not None else None), cmd, rest

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        args = list(args)
        if args and not args[0].startswith("-") and self.get_command(ctx, args[0]) is None:
            ctx.meta[DEFAULT_FILE_META] = args.pop(0)
            if args and not args[0].startswith("-"):
                ctx.fail(f"unexpected argument '{args[0]}': no command may follow DEFAULT_FILE")
        return super().parse_args(ctx, args)

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        rows: list[tuple[str, str]] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            label = ", ".join([name, *command_registry.aliases_for(name)])
            rows.append((label, cmd.get_short_help_str(limit=formatter.width)))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)


@click.group(
    cls=AliasedGroup,
    invoke_without_command=True,
    context_settings=CONTEXT_SETTINGS,
    subcommand_metavar="[DEFAULT_FILE | COMMAND]",
    epilog=EPILOG,
)
@click.version_option(__version__, "-V", "--version", prog_name="tdo")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Manage a markdown checklist (.todo.md) with fuzzy-selection menus."""
    obj = ctx.ensure_object(dict)

    settings = obj.get("settings") or get_settings()
    default_file = ctx.meta.get(DEFAULT_FILE_META)
    if default_file:
        settings = replace(settings, default_file=Path(default_file).expanduser())
    obj["settings"] = settings

    if ctx.invoked_subcommand is None:
        with _reported_errors():
            run_interactive(_load_state(obj))


def _load_state(obj: dict) -> AppState:
    """Resolve and read the todo file once per invocation (after --help had its chance)."""
    state = obj.get("state")
    if state is None:
        state = create_initial_state(settings=obj["settings"], selector=obj.get("selector"))
        obj["state"] = state
    return state


def _make_command(name: str) -> click.Command:
    def callback() -> None:
        obj = click.get_current_context().obj
        with _reported_errors():
            command_registry.handle(_load_state(obj), name)

    return click.Command(
        name,
        callback=callback,
        help=command_registry.help_for(name),
        context_settings=CONTEXT_SETTINGS,
    )


for _name in command_registry.names():
    cli.add_command(_make_command(_name))


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.debug("Starting %s %s", settings.app_name, __version__)
    cli(prog_name="tdo", obj={"settings": settings})


if __name__ == "__main__":
    main()
