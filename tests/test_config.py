import pytest

from minefield.config import DEFAULT_LEVELS, parse_levels, validate_spec
from minefield.errors import InvalidDimensionsError
from minefield.model import GameSpec


def test_default_levels():
    levels = parse_levels(DEFAULT_LEVELS)
    assert list(levels) == ["beginner", "intermediate", "expert"]
    assert levels["beginner"] == GameSpec(9, 9, 10)
    assert levels["expert"] == GameSpec(16, 30, 99)


@pytest.mark.parametrize(
    "item",
    ["easy 9 9", "easy a 9 9", "big 27 5 5", "full 2 2 4", "flat 0 5 0", "easy 9 9 10 extra"],
)
def test_invalid_level(item):
    with pytest.raises(InvalidDimensionsError):
        parse_levels([item])


def test_validate_spec_returns_spec():
    spec = GameSpec(26, 1, 0)
    assert validate_spec(spec) is spec
