"""Canvas and rasterization."""

from ascii_draw.renderers.canvas import Canvas
from ascii_draw.renderers.raster import circle_points, draw_circle, draw_line, line_points

__all__ = ["Canvas", "circle_points", "draw_circle", "draw_line", "line_points"]
