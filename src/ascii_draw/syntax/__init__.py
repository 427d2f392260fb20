"""Command model: kinds, name table and parsed command."""

from ascii_draw.syntax.types import ARGS_MAX, ARITY, COMMAND_TABLE, Command, ParsedCommand

__all__ = [
    "ARGS_MAX",
    "ARITY",
    "COMMAND_TABLE",
    "Command",
    "ParsedCommand",
]
