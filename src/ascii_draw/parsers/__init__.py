"""Parsers for the drawing command language."""

from ascii_draw.parsers.command import CommandParser, parse, parse_script

__all__ = ["CommandParser", "parse", "parse_script"]
