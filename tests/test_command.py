import pytest

from minefield.command import (
    Action,
    Command,
    format_position,
    parse_command,
    parse_position,
    row_label,
)
from minefield.errors import MalformedCommandError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Open B 2", Command(Action.OPEN, 1, 2)),
        ("open b2", Command(Action.OPEN, 1, 2)),
        ("OB2", Command(Action.OPEN, 1, 2)),
        ("o b 10", Command(Action.OPEN, 1, 10)),
        ("  OE1  ", Command(Action.OPEN, 4, 1)),
        ("Mark A 0", Command(Action.MARK, 0, 0)),
        ("ma0", Command(Action.MARK, 0, 0)),
        ("M Z 99", Command(Action.MARK, 25, 99)),
        ("Quit", Command(Action.QUIT)),
        ("q", Command(Action.QUIT)),
        ("E", Command(Action.QUIT)),
        ("exit", Command(Action.QUIT)),
    ],
)
def test_parse_command(text, expected):
    assert parse_command(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "   ", "Open", "Open 2 B", "X A1", "Open B -1", "Open BB 2", "quit now", "mark", "O 12"],
)
def test_malformed_command(text):
    with pytest.raises(MalformedCommandError) as e:
        parse_command(text)
    assert e.value.text == text


def test_malformed_command_is_value_error():
    with pytest.raises(ValueError):
        parse_command("dig A1")


def test_parse_position():
    assert parse_position("b12") == (1, 12)
    assert parse_position("A0") == (0, 0)
    assert parse_position("12b") is None
    assert parse_position("ab1") is None


def test_labels():
    assert row_label(0) == "A"
    assert row_label(25) == "Z"
    assert format_position(1, 2) == "B2"
