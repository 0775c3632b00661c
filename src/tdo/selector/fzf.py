# src/tdo/selector/fzf.py

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping

from ..core.ports import SelectOptions, Selection
from ..theme import strip_ansi

logger = logging.getLogger(__name__)

# fzf exit statuses
FZF_OK = 0
FZF_NO_MATCH = 1
FZF_ERROR = 2
FZF_INTERRUPTED = 130


class SelectorError(RuntimeError):
    """The picker could not run (missing executable or fzf reported an error)."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class FzfSelector:
    """
    Selector backed by the fzf executable.

    Candidates go to fzf's stdin; fzf draws on the terminal itself and prints
    the query (--print-query) followed by the accepted line on stdout.
    """

    def __init__(
        self,
        executable: str = "fzf",
        *,
        height: str = "50%",
        extra_env: Mapping[str, str] | None = None,
    ) -> None:
        self.executable = executable
        self.height = height
        self.extra_env = dict(extra_env or {})

    def build_args(self, options: SelectOptions) -> list[str]:
        args = [
            self.executable,
            f"--height={self.height}",
            "--reverse",
            "--ansi",
            "--print-query",
        ]
        if options.prompt is not None:
            args += ["--prompt", options.prompt]
        if options.query is not None:
            args += ["--query", options.query]
        if options.header is not None:
            args += ["--header", options.header]
        if options.color is not None:
            args += ["--color", options.color]
        if options.preview is not None:
            args += ["--preview", options.preview]
        if options.preview_window is not None:
            args += ["--preview-window", options.preview_window]
        return args

    def select(self, candidates: str, options: SelectOptions) -> Selection | None:
        args = self.build_args(options)
        env = {**os.environ, **self.extra_env} if self.extra_env else None
        logger.debug("Running picker prompt=%r candidates=%d", options.prompt, candidates.count("\n"))

        try:
            proc = subprocess.run(
                args,
                input=candidates,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                env=env,
                check=False,
            )
        except FileNotFoundError as e:
            raise SelectorError(
                f"fuzzy finder '{self.executable}' not found; install fzf or set TDO_FZF"
            ) from e

        if proc.returncode == FZF_INTERRUPTED:
            logger.debug("Picker aborted by user.")
            return None

        if proc.returncode not in (FZF_OK, FZF_NO_MATCH):
            raise SelectorError(
                f"fuzzy finder exited with status {proc.returncode}", returncode=proc.returncode
            )

        return parse_output(proc.stdout or "")


def parse_output(stdout: str) -> Selection:
    """First line is the query, the optional second line the accepted candidate."""
    lines = stdout.split("\n")
    query = lines[0].rstrip("\r")
    output: str | None = None
    if len(lines) > 1 and lines[1].strip("\r") != "":
        output = strip_ansi(lines[1].rstrip("\r"))
    return Selection(query=query, output=output)
