"""
Adapter base — the contract between the pin pipeline and the terminal.

The services never print or prompt.  Progress goes through a
``Reporter``, questions go through a ``Prompter``.  The CLI supplies
click-backed implementations; tests supply the in-memory ones below.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Reporter(ABC):
    """Receives progress events while dependencies are resolved.

    Purely observational: a reporter must not influence the result.
    """

    @abstractmethod
    def start(self, total: int) -> None:
        """Called once before the first entry, with the entry count."""

    @abstractmethod
    def advance(self, name: str) -> None:
        """Called after each entry has been resolved."""

    @abstractmethod
    def finish(self) -> None:
        """Called once after the last entry, or when resolution aborts."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class Prompter(ABC):
    """Asks the operator for values the invocation did not provide."""

    @abstractmethod
    def ask_project_path(self) -> str:
        """Return the project path entered by the operator."""


class NullReporter(Reporter):
    """Reporter that records progress without displaying it."""

    def __init__(self) -> None:
        self.total = 0
        self.seen: list[str] = []
        self.finished = False

    def start(self, total: int) -> None:
        self.total = total

    def advance(self, name: str) -> None:
        self.seen.append(name)

    def finish(self) -> None:
        self.finished = True


class StaticPrompter(Prompter):
    """Prompter that answers with a fixed value."""

    def __init__(self, path: str) -> None:
        self.path = path
        self.asked = 0

    def ask_project_path(self) -> str:
        self.asked += 1
        return self.path
