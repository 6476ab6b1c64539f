"""
Dialog collaborators (confirm / text prompt).

The controller asks through the `Dialogs` protocol so it never depends on a real UI.
`ConsoleDialogs` backs the interactive CLI session.
"""

from __future__ import annotations

from typing import Callable, Protocol


class Dialogs(Protocol):
    def confirm(self, title: str, message: str) -> bool: ...

    def prompt(self, title: str, message: str, default: str) -> str | None: ...


class ConsoleDialogs:
    """Terminal dialogs; an empty answer to `prompt` or EOF counts as cancel."""

    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print):
        self._read = read
        self._write = write

    def confirm(self, title: str, message: str) -> bool:
        self._write(f"{title}: {message}")
        try:
            answer = self._read("[y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in {"y", "yes", "s", "sim"}

    def prompt(self, title: str, message: str, default: str) -> str | None:
        self._write(f"{title}: {message}")
        try:
            answer = self._read(f"[{default}] ")
        except EOFError:
            return None
        return answer.strip() or None
