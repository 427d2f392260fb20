"""CLI entry point for ascii-draw."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from typing import TextIO

import click

from ascii_draw.config import DrawConfig
from ascii_draw.interpreter import Interpreter

logger = logging.getLogger(__name__)


def _validate_char(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if len(value) != 1:
        raise click.BadParameter("must be a single character")
    return value


def _prompted_lines(stream: TextIO, prompt: str) -> Iterator[str]:
    while True:
        if prompt:
            click.echo(prompt, nl=False)
        line = stream.readline()
        if not line:
            return
        yield line


@click.command()
@click.argument("script", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--char", "-c", "draw_char", default="*", callback=_validate_char, help="Initial draw character")
@click.option("--no-prompt", "no_prompt", is_flag=True, help="Do not print the '> ' prompt")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log each dispatched command to stderr")
def main(script: str | None, draw_char: str, no_prompt: bool, output: str | None, verbose: bool) -> None:
    """ASCII drawing interpreter: GRID, POINT, LINE, CIRCLE, RECTANGLE, CHAR, CLEAR, DISPLAY, END."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, stream=sys.stderr)
    config = DrawConfig(draw_char=draw_char)

    if script:
        try:
            with open(script) as f:
                lines = f.read().splitlines()
        except OSError as e:
            click.echo(f"error: cannot read '{script}': {e}", err=True)
            sys.exit(1)
    else:
        prompt = "" if no_prompt else config.prompt
        lines = _prompted_lines(sys.stdin, prompt)

    if output:
        try:
            out = open(output, "w")
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
        with out:
            state = Interpreter(config, out=out).run(lines)
    else:
        state = Interpreter(config, out=sys.stdout).run(lines)

    logger.debug("session ended in state %s", state.name)


if __name__ == "__main__":
    main()
