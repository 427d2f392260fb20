"""ascii-draw: a line-oriented interpreter that rasterizes shapes onto a character grid."""

import io

from ascii_draw.config import DrawConfig
from ascii_draw.interpreter import Interpreter, InterpreterState
from ascii_draw.parsers.command import parse, parse_script
from ascii_draw.renderers.canvas import Canvas
from ascii_draw.syntax.types import Command, ParsedCommand


def run_script(src: str, draw_char: str = "*") -> str:
    """Run a multi-line drawing script and return everything it printed.

    Args:
        src: Script text, one command per line.
        draw_char: Initial draw character.

    Returns:
        DISPLAY output and ``error:`` lines in the order they were produced.
    """
    buf = io.StringIO()
    Interpreter(DrawConfig(draw_char=draw_char), out=buf).run(src.splitlines())
    return buf.getvalue()


__all__ = [
    "Canvas",
    "Command",
    "DrawConfig",
    "Interpreter",
    "InterpreterState",
    "ParsedCommand",
    "parse",
    "parse_script",
    "run_script",
]
