"""Integer rasterization of lines and circles.

Point generators are pure; the ``draw_*`` wrappers feed each point to
:meth:`Canvas.plot`, which clips anything off the grid.
"""

from __future__ import annotations

from collections.abc import Iterator

from ascii_draw.renderers.canvas import Canvas

RasterPoint = tuple[int, int]

# ─── Lines ───────────────────────────────────────────────────────────────────


def bresenham_steps(x1: int, y1: int, x2: int, y2: int, dx: int, dy: int, transpose: bool) -> Iterator[RasterPoint]:
    """Step along the driving axis (x here) for ``dx`` iterations.

    ``dx``/``dy`` are the absolute deltas with ``dx >= dy``. The start point is
    not emitted. With ``transpose`` the caller has swapped the axes, so each
    point is yielded as ``(y, x)`` to land back in canvas coordinates.
    """
    sx = 1 if x2 > x1 else -1
    sy = 1 if y2 > y1 else -1
    p = 2 * dy - dx
    x, y = x1, y1
    for _ in range(dx):
        x += sx
        if p < 0:
            p += 2 * dy
        else:
            y += sy
            p += 2 * dy - 2 * dx
        yield (y, x) if transpose else (x, y)


def line_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[RasterPoint]:
    """Yield ``1 + max(|dx|, |dy|)`` points from (x1, y1) to (x2, y2) inclusive."""
    yield (x1, y1)
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    if dx > dy:
        yield from bresenham_steps(x1, y1, x2, y2, dx, dy, False)
    else:
        yield from bresenham_steps(y1, x1, y2, x2, dy, dx, True)


def draw_line(canvas: Canvas, x1: int, y1: int, x2: int, y2: int) -> None:
    for x, y in line_points(x1, y1, x2, y2):
        canvas.plot(x, y)


# ─── Circles ─────────────────────────────────────────────────────────────────


def _octants(cx: int, cy: int, x: int, y: int) -> Iterator[RasterPoint]:
    yield (cx + x, cy + y)
    yield (cx - x, cy + y)
    yield (cx + x, cy - y)
    yield (cx - x, cy - y)
    yield (cx + y, cy + x)
    yield (cx - y, cy + x)
    yield (cx + y, cy - x)
    yield (cx - y, cy - x)


def circle_points(cx: int, cy: int, radius: int) -> Iterator[RasterPoint]:
    """Midpoint circle: yield the 8-way symmetric set for every step.

    Points may repeat where octants meet. ``radius`` must be non-negative.
    """
    if radius < 0:
        raise ValueError("radius must be non-negative")
    x, y = 0, radius
    d = 3 - 2 * radius
    yield from _octants(cx, cy, x, y)
    while y >= x:
        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6
        yield from _octants(cx, cy, x, y)


def draw_circle(canvas: Canvas, cx: int, cy: int, radius: int) -> None:
    for x, y in circle_points(cx, cy, radius):
        canvas.plot(x, y)
