from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    PLAYING = 0
    SOLVED = 1
    FAILED = 2


class Visibility(Enum):
    CLOSED = 0
    OPEN = 1
    MARKED = 2


class TileKind(Enum):
    MINE = 0
    CLUE = 1


class OpenResult(Enum):
    OPENED = 0
    DUP = 1
    WIN = 2
    FAIL = 3
    OVER = 4


class MarkResult(Enum):
    MARKED = 0
    UNMARKED = 1
    OPENED = 2
    OVER = 3


@dataclass(frozen=True)
class GameSpec:
    rows: int
    cols: int
    mines: int


@dataclass
class Tile:
    """
    一个格子：种类（雷 / 数字）在创建时确定，只有可见状态会变化
    """

    kind: TileKind
    count: int = 0
    visibility: Visibility = Visibility.CLOSED

    @classmethod
    def mine(cls) -> "Tile":
        return cls(TileKind.MINE)

    @classmethod
    def clue(cls, count: int) -> "Tile":
        return cls(TileKind.CLUE, count)

    @property
    def is_mine(self) -> bool:
        return self.kind == TileKind.MINE

    @property
    def is_open(self) -> bool:
        return self.visibility == Visibility.OPEN

    @property
    def is_closed(self) -> bool:
        return self.visibility == Visibility.CLOSED

    @property
    def marked(self) -> bool:
        return self.visibility == Visibility.MARKED

    def glyph(self) -> str:
        if self.visibility == Visibility.CLOSED:
            return "-"
        if self.visibility == Visibility.MARKED:
            return "M"
        if self.is_mine:
            return "X"
        return str(self.count) if self.count else " "
