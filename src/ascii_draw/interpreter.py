"""Interpreter: owns the canvas and dispatches parsed commands to handlers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from enum import Enum, auto
from typing import TextIO

from ascii_draw import handlers
from ascii_draw.config import DrawConfig
from ascii_draw.errors import DrawError
from ascii_draw.parsers.base import Parser
from ascii_draw.parsers.command import CommandParser
from ascii_draw.renderers.canvas import Canvas
from ascii_draw.syntax.types import Command, ParsedCommand

logger = logging.getLogger(__name__)


class InterpreterState(Enum):
    Ready = auto()
    Stopped = auto()


class Interpreter:
    """Single-canvas command interpreter.

    Holds exactly one :class:`Canvas` and the most recently loaded command.
    Every command kind maps to one handler; handler failures are reported as
    ``error: <message>`` lines on ``err`` and never escape :meth:`eval`.
    ``END`` moves the interpreter to ``Stopped``, after which nothing else runs.
    """

    def __init__(
        self,
        config: DrawConfig | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        parser: Parser | None = None,
    ) -> None:
        self.config = config or DrawConfig()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else self.out
        self.parser = parser or CommandParser()
        self.canvas = Canvas(
            draw_char=self.config.draw_char,
            blank=self.config.blank,
            ruler_wrap=self.config.ruler_wrap,
        )
        self.op: ParsedCommand | None = None
        self._state = InterpreterState.Ready

    @property
    def state(self) -> InterpreterState:
        return self._state

    @property
    def stopped(self) -> bool:
        return self._state is InterpreterState.Stopped

    def load(self, cmd: ParsedCommand) -> None:
        if self.stopped:
            return
        self.op = cmd

    def eval(self) -> None:
        """Run the currently loaded command."""
        if self.stopped or self.op is None:
            return
        cmd = self.op
        logger.debug("dispatch %s %s", cmd.kind.name, cmd.args)
        try:
            self._dispatch(cmd)
        except DrawError as e:
            self.report(str(e))

    def _dispatch(self, cmd: ParsedCommand) -> None:
        canvas = self.canvas
        match cmd.kind:
            case Command.Char:
                handlers.set_character(canvas, cmd)
            case Command.Circle:
                handlers.circle(canvas, cmd)
            case Command.Clear:
                handlers.clear(canvas)
            case Command.Display:
                handlers.display(canvas, self.out)
            case Command.End:
                logger.debug("session stopped")
                self._state = InterpreterState.Stopped
            case Command.Grid:
                handlers.grid_init(canvas, cmd)
            case Command.Invalid:
                handlers.invalid(cmd)
            case Command.Line:
                handlers.line(canvas, cmd)
            case Command.Point:
                handlers.point(canvas, cmd)
            case Command.Rectangle:
                handlers.rectangle(canvas, cmd)

    def execute(self, cmd: ParsedCommand) -> None:
        self.load(cmd)
        self.eval()

    def feed_line(self, line: str) -> None:
        """Parse one raw input line and execute it. Blank lines are skipped."""
        if self.stopped:
            return
        try:
            cmd = self.parser.parse(line)
        except DrawError as e:
            self.report(str(e))
            return
        if cmd is not None:
            self.execute(cmd)

    def run(self, lines: Iterable[str]) -> InterpreterState:
        """Feed lines until END or the input is exhausted."""
        for line in lines:
            self.feed_line(line)
            if self.stopped:
                break
        return self._state

    def report(self, message: str) -> None:
        logger.debug("error: %s", message)
        self.err.write(f"error: {message}\n")
