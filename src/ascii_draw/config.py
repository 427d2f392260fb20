"""Centralized configuration for ascii-draw."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DrawConfig:
    """Configuration for the interpreter and its canvas."""

    draw_char: str = "*"
    prompt: str = "> "
    ruler_wrap: int = 10
    blank: str = " "
