"""
Terminal adapters — click-backed Reporter and Prompter.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import IO

import click

from depsync.adapters.base import Prompter, Reporter


class ClickProgressReporter(Reporter):
    """Shows ``dependencies syncing [####  ] 3/7`` while resolving."""

    label = "dependencies syncing"

    def __init__(self, file: IO[str] | None = None) -> None:
        self.file = file
        self._stack = ExitStack()
        self._bar = None

    def start(self, total: int) -> None:
        if total == 0:
            return
        self._bar = self._stack.enter_context(
            click.progressbar(length=total, label=self.label, show_pos=True, file=self.file)
        )

    def advance(self, name: str) -> None:
        if self._bar is not None:
            self._bar.update(1)

    def finish(self) -> None:
        self._stack.close()
        self._bar = None


class ClickPrompter(Prompter):
    """Reads the project path from the terminal."""

    message = "Please enter the project path"

    def ask_project_path(self) -> str:
        return click.prompt(self.message, type=str).strip()
