"""Command line parser.

Turns one input line such as ``LINE 0,0 10,5`` into a ParsedCommand.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from ascii_draw.errors import ParseError
from ascii_draw.syntax.types import ARGS_MAX, Command, ParsedCommand

# ─── Tokenizer ───────────────────────────────────────────────────────────────

_NEWLINE_RE = re.compile(r"(\r\n|\n|\r)$")
_WHITESPACE_RE = re.compile(r"\s+")
_INT_RE = re.compile(r"-?[0-9]+")


def parse_arg(piece: str) -> int:
    """Convert one comma-separated argument to an integer.

    A piece starting with a digit (or ``-`` and a digit) reads its leading
    digit run as a base-10 integer; anything else is the code point of its
    first character, so ``CHAR #`` yields 35.
    """
    m = _INT_RE.match(piece)
    if m:
        try:
            return int(m.group(0))
        except ValueError:
            raise ParseError(f"Invalid number {piece[:20]}...") from None
    return ord(piece[0])


def split_args(tokens: Iterable[str]) -> list[int]:
    args: list[int] = []
    for token in tokens:
        for piece in token.split(","):
            if piece:
                args.append(parse_arg(piece))
    return args


def strip_line(line: str) -> str:
    return _NEWLINE_RE.sub("", line)


class CommandParser:
    """Whitespace/comma tokenizer for the drawing language."""

    def parse(self, line: str) -> ParsedCommand | None:
        """Parse a single line. Returns None for blank lines."""
        tokens = [t for t in _WHITESPACE_RE.split(strip_line(line)) if t]
        if not tokens:
            return None
        name, rest = tokens[0], tokens[1:]
        if Command.from_name(name) is Command.Invalid:
            # Arguments of an unknown command are never read.
            return ParsedCommand.new(name)
        args = split_args(rest)
        if len(args) > ARGS_MAX:
            raise ParseError(f"Too many arguments (max {ARGS_MAX})")
        return ParsedCommand.new(name, args)


def parse(line: str) -> ParsedCommand | None:
    return CommandParser().parse(line)


def parse_script(src: str) -> list[ParsedCommand]:
    """Parse every non-blank line of a script."""
    commands: list[ParsedCommand] = []
    for line in src.splitlines():
        cmd = parse(line)
        if cmd is not None:
            commands.append(cmd)
    return commands
