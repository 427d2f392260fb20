"""Canvas: 2D character grid the drawing commands paint on."""

from __future__ import annotations

from ascii_draw.errors import DrawError, PreconditionError


class Canvas:
    """A fixed-size character grid with a current draw character.

    The canvas starts uninitialized and is allocated exactly once by
    :meth:`initialize`. Storage is row-major, ``cells[row][col]``, with
    ``col`` in ``[0, width)`` and ``row`` in ``[0, height)``; the same bounds
    are used for allocation, plotting and rendering.
    """

    def __init__(self, draw_char: str = "*", blank: str = " ", ruler_wrap: int = 10) -> None:
        self.draw_char = draw_char
        self.blank = blank
        self.ruler_wrap = ruler_wrap
        self.width = 0
        self.height = 0
        self.initialized = False
        self.cells: list[list[str]] = []

    def initialize(self, width: int, height: int) -> None:
        if self.initialized:
            raise PreconditionError.already_initialized()
        if width <= 0 or height <= 0:
            raise DrawError("Grid dimensions must be positive")
        self.width = width
        self.height = height
        self.cells = [[self.blank] * width for _ in range(height)]
        self.initialized = True

    def require_initialized(self) -> None:
        if not self.initialized:
            raise PreconditionError.not_initialized()

    def clear(self) -> None:
        self.require_initialized()
        for row in self.cells:
            for col in range(self.width):
                row[col] = self.blank

    def set_draw_character(self, c: str) -> None:
        self.draw_char = c

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def get(self, col: int, row: int) -> str:
        if self.in_bounds(col, row):
            return self.cells[row][col]
        return self.blank

    def plot(self, col: int, row: int) -> None:
        """Write the draw character at (col, row). Off-canvas points are clipped."""
        if self.in_bounds(col, row):
            self.cells[row][col] = self.draw_char

    def ruler_digit(self, i: int) -> int:
        wrap = self.ruler_wrap
        return ((9 - i) % wrap + wrap) % wrap

    def render(self) -> str:
        """Render rows top to bottom, each prefixed by a ruler digit, then a ruler line."""
        self.require_initialized()
        lines = []
        for row_index, row in enumerate(self.cells):
            lines.append(f"{self.ruler_digit(row_index)} " + "".join(row))
        ruler = "".join(str(self.ruler_digit(i)) for i in range(self.width))
        lines.append(" " + ruler)
        return "\n".join(lines) + "\n"
