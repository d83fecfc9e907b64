"""Interactive console state: input history, completion and a filtered log view."""

from __future__ import annotations

import enum
from typing import Iterator

from myengine.command_manager import CommandManager

WELCOME = "Welcome to MyEngine !"


def trim(text: str) -> str:
    """Strip leading and trailing spaces (only the space character)."""
    return text.strip(" ")


class HistoryDirection(enum.Enum):
    """Which way to move through the command history."""

    UP = "up"
    DOWN = "down"


def _filter_terms(pattern: str) -> Iterator[str]:
    for term in pattern.split(","):
        term = term.strip(" \t")
        if term:
            yield term


def _passes(line: str, pattern: str) -> bool:
    """Comma-separated, case-insensitive terms; a leading '-' excludes."""
    haystack = line.lower()
    has_include = False
    for term in _filter_terms(pattern):
        if term.startswith("-"):
            excluded = term[1:].lower()
            if excluded and excluded in haystack:
                return False
            continue
        if term.lower() in haystack:
            return True
        has_include = True
    return not has_include


class Console:
    """Front end of a command manager: runs lines, browses history, completes words."""

    def __init__(self, manager: CommandManager) -> None:
        self.manager = manager
        self.manager.logs.clear()
        self.history: list[str] = []
        self.history_pos = -1
        self.completions: list[str] = []
        self.selected_completion = 0
        self.auto_scroll = True
        self.scroll_to_bottom = False
        self.manager.logger.write(WELCOME + "\n")

    @property
    def selected(self) -> str | None:
        """The currently selected completion, if any."""
        if not self.completions:
            return None
        return self.completions[self.selected_completion]

    def submit(self, text: str) -> bool:
        """Handle the input line being entered; True if a command line was run."""
        line = trim(text)
        if not line:
            return False
        self.exec_command(line)
        return True

    def exec_command(self, line: str) -> bool:
        """Echo, record in history and run a line; True if a command ran."""
        self.manager.log("> %s\n", line)
        self.history_pos = -1
        for index in range(len(self.history) - 1, -1, -1):
            if self.history[index] == line:
                del self.history[index]
                break
        self.history.append(line)
        result = self.manager.execute(line)
        self.scroll_to_bottom = True
        return result

    def history_step(self, direction: HistoryDirection | str, current: str) -> str:
        """Move through history and return what the input line should now hold."""
        direction = HistoryDirection(direction)
        previous = self.history_pos
        if direction is HistoryDirection.UP:
            if self.history_pos == -1:
                self.history_pos = len(self.history) - 1
            elif self.history_pos > 0:
                self.history_pos -= 1
        elif self.history_pos != -1:
            self.history_pos += 1
            if self.history_pos >= len(self.history):
                self.history_pos = -1
        if previous == self.history_pos:
            return current
        return self.history[self.history_pos] if self.history_pos >= 0 else ""

    def refresh_completions(self, text: str) -> list[str]:
        """Recompute the proposals for the current input line."""
        self.completions = self.manager.completions(text)
        if self.completions:
            self.selected_completion %= len(self.completions)
        return list(self.completions)

    def select_next(self) -> None:
        if self.completions:
            self.selected_completion = (self.selected_completion + 1) % len(
                self.completions
            )

    def select_previous(self) -> None:
        if self.completions:
            self.selected_completion = (self.selected_completion - 1) % len(
                self.completions
            )

    def complete(self, buffer: str, cursor: int) -> tuple[str, int]:
        """Replace the word before ``cursor`` with the selected completion.

        Returns the new buffer and cursor position; unchanged when there is
        nothing to propose.
        """
        if not self.completions:
            return buffer, cursor
        cursor = max(0, min(cursor, len(buffer)))
        start = buffer.rfind(" ", 0, cursor) + 1
        inserted = self.completions[self.selected_completion] + " "
        new_buffer = buffer[:start] + inserted + buffer[cursor:]
        return new_buffer, start + len(inserted)

    def clear(self) -> None:
        """Forget every shown log line."""
        self.manager.logs.clear()

    def filtered_logs(self, pattern: str = "") -> list[str]:
        """Log lines passing a filter such as ``"incl,-excl"``."""
        return [line for line in self.manager.logs if _passes(line, pattern)]