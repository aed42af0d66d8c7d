import pytest

from minefield.field import Field

# 计数：
#   * 1 0 0
#   1 1 1 1
#   0 0 1 *
LAYOUT = [
    "*...",
    "....",
    "...*",
]


@pytest.fixture
def field() -> Field:
    return Field.from_layout(LAYOUT)


@pytest.fixture
def scripted():
    """Build an input function that replays lines, then raises EOFError."""

    def build(lines):
        it = iter(lines)

        def read(prompt=""):
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return read

    return build
