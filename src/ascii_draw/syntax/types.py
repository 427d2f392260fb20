"""Command model for the drawing language.

These types represent a parsed input line: the closed Command enum, the
immutable name table, and the ParsedCommand dataclass handed to the interpreter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType

ARGS_MAX = 4


class Command(Enum):
    Char = auto()  # CHAR c
    Circle = auto()  # CIRCLE x,y,r
    Clear = auto()  # CLEAR
    Display = auto()  # DISPLAY
    End = auto()  # END
    Grid = auto()  # GRID w,h
    Invalid = auto()
    Line = auto()  # LINE x1,y1,x2,y2
    Point = auto()  # POINT x,y
    Rectangle = auto()  # RECTANGLE x1,y1,x2,y2

    @classmethod
    def from_name(cls, name: str) -> Command:
        """Look up a command token. Unknown names map to Invalid."""
        return COMMAND_TABLE.get(name, cls.Invalid)

    @property
    def arity(self) -> int:
        return ARITY.get(self, 0)


COMMAND_TABLE: MappingProxyType[str, Command] = MappingProxyType(
    {
        "CHAR": Command.Char,
        "CIRCLE": Command.Circle,
        "CLEAR": Command.Clear,
        "DISPLAY": Command.Display,
        "END": Command.End,
        "GRID": Command.Grid,
        "LINE": Command.Line,
        "POINT": Command.Point,
        "RECTANGLE": Command.Rectangle,
    }
)

ARITY: MappingProxyType[Command, int] = MappingProxyType(
    {
        Command.Char: 1,
        Command.Circle: 3,
        Command.Grid: 2,
        Command.Line: 4,
        Command.Point: 2,
        Command.Rectangle: 4,
    }
)


@dataclass
class ParsedCommand:
    name: str
    kind: Command
    args: tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def new(cls, name: str, args: tuple[int, ...] | list[int] = ()) -> ParsedCommand:
        return cls(name=name, kind=Command.from_name(name), args=tuple(args))
