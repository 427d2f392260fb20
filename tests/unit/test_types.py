"""Tests for the command model."""

import pytest

from ascii_draw.syntax.types import ARGS_MAX, COMMAND_TABLE, Command, ParsedCommand


@pytest.mark.parametrize(
    "name,kind",
    [
        ("CHAR", Command.Char),
        ("CIRCLE", Command.Circle),
        ("CLEAR", Command.Clear),
        ("DISPLAY", Command.Display),
        ("END", Command.End),
        ("GRID", Command.Grid),
        ("LINE", Command.Line),
        ("POINT", Command.Point),
        ("RECTANGLE", Command.Rectangle),
    ],
)
def test_known_names(name, kind):
    assert Command.from_name(name) == kind


def test_unknown_name_is_invalid():
    assert Command.from_name("FOO") == Command.Invalid
    assert Command.from_name("") == Command.Invalid


def test_lookup_is_case_sensitive():
    assert Command.from_name("grid") == Command.Invalid


def test_invalid_has_no_name():
    assert Command.Invalid not in COMMAND_TABLE.values()
    assert "INVALID" not in COMMAND_TABLE


def test_table_is_immutable():
    with pytest.raises(TypeError):
        COMMAND_TABLE["NEW"] = Command.Point  # type: ignore[index]


def test_arity():
    assert Command.Char.arity == 1
    assert Command.Grid.arity == 2
    assert Command.Point.arity == 2
    assert Command.Circle.arity == 3
    assert Command.Line.arity == 4
    assert Command.Rectangle.arity == 4
    assert Command.Display.arity == 0
    assert max(k.arity for k in Command) == ARGS_MAX


def test_parsed_command_new_resolves_kind():
    cmd = ParsedCommand.new("LINE", [0, 0, 3, 4])
    assert cmd.kind == Command.Line
    assert cmd.args == (0, 0, 3, 4)
    assert cmd.name == "LINE"
