"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from ascii_draw.syntax.types import ParsedCommand


class Parser(Protocol):
    """Protocol that all command-line parsers must implement."""

    def parse(self, line: str) -> ParsedCommand | None:
        """Parse one input line into a command, or None for a blank line."""
        ...
