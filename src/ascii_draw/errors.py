"""Errors reported by the interpreter.

Every error is recoverable: the interpreter prints ``error: <message>`` and
moves on to the next command.
"""

from __future__ import annotations


class DrawError(ValueError):
    """Base class for all reportable interpreter errors."""


class PreconditionError(DrawError):
    """Canvas used before initialization, or initialized twice."""

    @classmethod
    def not_initialized(cls) -> PreconditionError:
        return cls("Grid isn't initialized")

    @classmethod
    def already_initialized(cls) -> PreconditionError:
        return cls("Grid has already been initialized")


class UnrecognizedCommandError(DrawError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid command `{name}`")
        self.name = name


class ArityError(DrawError):
    def __init__(self, name: str, expected: int, got: int) -> None:
        plural = "argument" if expected == 1 else "arguments"
        super().__init__(f"Command `{name}` expects {expected} {plural}, got {got}")
        self.name = name
        self.expected = expected
        self.got = got


class ParseError(DrawError):
    """Input line could not be turned into a command."""
