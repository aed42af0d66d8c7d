import re
from dataclasses import dataclass
from enum import Enum

from .errors import MalformedCommandError


class Action(Enum):
    OPEN = "open"
    MARK = "mark"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    action: Action
    row: int | None = None
    column: int | None = None


# "Open B 2" / "open b2" / "O B2" / "OB2" / "Mark ..." / "Quit" / "E"
COMMAND_RE = re.compile(
    r"^\s*(?:(?P<op>open|o|mark|m)\s*(?P<row>[a-z])\s*(?P<col>\d+)|(?P<quit>quit|q|exit|e))\s*$",
    re.I,
)

POSITION_RE = re.compile(r"^([a-z])(\d+)$", re.I)


def parse_command(text: str) -> Command:
    """
    解析一条玩家指令，不检查是否越界
    """
    m = COMMAND_RE.match(text or "")
    if not m:
        raise MalformedCommandError(text)
    if m.group("quit"):
        return Command(Action.QUIT)

    action = Action.OPEN if m.group("op")[0].lower() == "o" else Action.MARK
    return Command(action, row_index(m.group("row")), int(m.group("col")))


def parse_position(pos: str) -> tuple[int, int] | None:
    """
    将 A0 / b12 解析为 (row, col)
    """
    m = POSITION_RE.match(pos.strip())
    if not m:
        return None
    return row_index(m.group(1)), int(m.group(2))


def row_index(letter: str) -> int:
    return ord(letter.lower()) - ord("a")


def row_label(row: int) -> str:
    return chr(row + ord("A"))


def format_position(row: int, col: int) -> str:
    return f"{row_label(row)}{col}"
