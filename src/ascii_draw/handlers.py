"""Shape handlers, one per command kind.

Each handler validates its arguments and canvas preconditions before touching
the canvas, so a failing command never leaves a partial mutation behind.
"""

from __future__ import annotations

from typing import TextIO

from ascii_draw.errors import ArityError, DrawError, PreconditionError, UnrecognizedCommandError
from ascii_draw.renderers.canvas import Canvas
from ascii_draw.renderers.raster import draw_circle, draw_line
from ascii_draw.syntax.types import ParsedCommand


def _args(cmd: ParsedCommand) -> tuple[int, ...]:
    """Return exactly the arguments the command consumes; extras are ignored."""
    expected = cmd.kind.arity
    if len(cmd.args) < expected:
        raise ArityError(cmd.name, expected, len(cmd.args))
    return cmd.args[:expected]


def set_character(canvas: Canvas, cmd: ParsedCommand) -> None:
    (code,) = _args(cmd)
    try:
        c = chr(code)
    except (ValueError, OverflowError):
        raise DrawError(f"Invalid character code {code}") from None
    canvas.set_draw_character(c)


def circle(canvas: Canvas, cmd: ParsedCommand) -> None:
    canvas.require_initialized()
    x, y, radius = _args(cmd)
    if radius < 0:
        raise DrawError("Radius must be non-negative")
    draw_circle(canvas, x, y, radius)


def clear(canvas: Canvas) -> None:
    canvas.clear()


def display(canvas: Canvas, out: TextIO) -> None:
    out.write(canvas.render())


def grid_init(canvas: Canvas, cmd: ParsedCommand) -> None:
    if canvas.initialized:
        raise PreconditionError.already_initialized()
    width, height = _args(cmd)
    canvas.initialize(width, height)


def line(canvas: Canvas, cmd: ParsedCommand) -> None:
    canvas.require_initialized()
    x1, y1, x2, y2 = _args(cmd)
    draw_line(canvas, x1, y1, x2, y2)


def point(canvas: Canvas, cmd: ParsedCommand) -> None:
    canvas.require_initialized()
    x, y = _args(cmd)
    canvas.plot(x, y)


def rectangle(canvas: Canvas, cmd: ParsedCommand) -> None:
    """Walk the corners (x1,y1) → (x1+|dx|,y1) → (x2,y2) → (x1,y1+|dy|) → (x1,y1).

    For corner pairs other than top-left/bottom-right this walk is not a
    plain box; the order is kept so existing drawings render the same.
    """
    canvas.require_initialized()
    x1, y1, x2, y2 = _args(cmd)
    right = x1 + abs(x2 - x1)
    bottom = y1 + abs(y2 - y1)
    draw_line(canvas, x1, y1, right, y1)
    draw_line(canvas, right, y1, x2, y2)
    draw_line(canvas, x2, y2, x1, bottom)
    draw_line(canvas, x1, bottom, x1, y1)


def invalid(cmd: ParsedCommand) -> None:
    raise UnrecognizedCommandError(cmd.name)
