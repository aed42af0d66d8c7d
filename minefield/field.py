import random
from collections.abc import Iterable, Iterator

from .errors import InvalidDimensionsError, OutOfBoundsError
from .model import GameState, MarkResult, OpenResult, Tile, Visibility

# 雷密度超过该值时改用洗牌布雷
SHUFFLE_DENSITY = 0.5


class Field:
    """
    扫雷核心逻辑（纯规则 / 纯状态）

    雷的布局在构造时生成，之后只有格子的可见状态和游戏状态会变化。
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        mines: int,
        seed: int | None = None,
        *,
        mines_at: Iterable[tuple[int, int]] | None = None,
    ):
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (rows, cols, mines)):
            raise InvalidDimensionsError("rows, cols and mines must be integers")
        if rows <= 0 or cols <= 0:
            raise InvalidDimensionsError(f"field must have at least one row and column, got {rows}x{cols}")
        if not 0 <= mines < rows * cols:
            raise InvalidDimensionsError(f"mine count must be in [0, {rows * cols}), got {mines}")

        self._rows = rows
        self._cols = cols
        self._mines = mines
        self.rng = random.Random(seed)

        self.state = GameState.PLAYING

        if mines_at is None:
            mine_cells = self._place_mines()
        else:
            mine_cells = set(mines_at)
            if len(mine_cells) != mines or not all(self.is_valid(r, c) for r, c in mine_cells):
                raise InvalidDimensionsError("mine positions do not match the field")
        self.tiles = self._build_tiles(mine_cells)

    @classmethod
    def from_layout(cls, lines: Iterable[str]) -> "Field":
        """
        由文本布局构造，'*' 为雷，其余字符为数字格
        """
        lines = list(lines)
        if not lines or not lines[0]:
            raise InvalidDimensionsError("layout is empty")
        cols = len(lines[0])
        if any(len(line) != cols for line in lines):
            raise InvalidDimensionsError("layout rows differ in length")

        mines_at = [
            (r, c) for r, line in enumerate(lines) for c, ch in enumerate(line) if ch == "*"
        ]
        return cls(len(lines), cols, len(mines_at), mines_at=mines_at)

    # ========= 状态 =========

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def column_count(self) -> int:
        return self._cols

    @property
    def mine_count(self) -> int:
        return self._mines

    @property
    def is_solved(self) -> bool:
        return self.state == GameState.SOLVED

    @property
    def is_failed(self) -> bool:
        return self.state == GameState.FAILED

    @property
    def is_over(self) -> bool:
        return self.state != GameState.PLAYING

    # ========= 查询 =========

    def tile_at(self, row: int, col: int) -> Tile:
        self._check_bounds(row, col)
        return self.tiles[row][col]

    def all_tiles(self) -> Iterator[Tile]:
        for row in self.tiles:
            yield from row

    def count_by_visibility(self, visibility: Visibility) -> int:
        return sum(1 for t in self.all_tiles() if t.visibility == visibility)

    def remaining_mine_count(self) -> int:
        # 标记多于雷数时允许为负
        return self._mines - self.count_by_visibility(Visibility.MARKED)

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def neighbors(self, row: int, col: int) -> list[tuple[int, int]]:
        return [
            (row + dr, col + dc)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if (dr or dc) and self.is_valid(row + dr, col + dc)
        ]

    # ========= 游戏逻辑 =========

    def open_tile(self, row: int, col: int) -> OpenResult:
        self._check_bounds(row, col)
        if self.is_over:
            return OpenResult.OVER

        t = self.tiles[row][col]
        if not t.is_closed:
            return OpenResult.DUP

        t.visibility = Visibility.OPEN

        if t.is_mine:
            self.state = GameState.FAILED
            return OpenResult.FAIL

        if t.count == 0:
            self._spread(row, col)

        if self._check_win():
            self.state = GameState.SOLVED
            return OpenResult.WIN
        return OpenResult.OPENED

    def mark_tile(self, row: int, col: int) -> MarkResult:
        self._check_bounds(row, col)
        if self.is_over:
            return MarkResult.OVER

        t = self.tiles[row][col]
        if t.visibility == Visibility.CLOSED:
            t.visibility = Visibility.MARKED
            return MarkResult.MARKED
        if t.visibility == Visibility.MARKED:
            t.visibility = Visibility.CLOSED
            return MarkResult.UNMARKED
        return MarkResult.OPENED

    # ========= 内部实现 =========

    def _place_mines(self) -> set[tuple[int, int]]:
        """
        随机布雷：稀疏时拒绝采样，过密时洗牌取前 N 个
        """
        if self._mines > self._rows * self._cols * SHUFFLE_DENSITY:
            cells = [(r, c) for r in range(self._rows) for c in range(self._cols)]
            return set(self.rng.sample(cells, self._mines))

        mine_cells: set[tuple[int, int]] = set()
        while len(mine_cells) < self._mines:
            r = self.rng.randrange(self._rows)
            c = self.rng.randrange(self._cols)
            mine_cells.add((r, c))
        return mine_cells

    def _build_tiles(self, mine_cells: set[tuple[int, int]]) -> list[list[Tile]]:
        return [
            [
                Tile.mine()
                if (r, c) in mine_cells
                else Tile.clue(sum(1 for n in self.neighbors(r, c) if n in mine_cells))
                for c in range(self._cols)
            ]
            for r in range(self._rows)
        ]

    def _spread(self, row: int, col: int):
        """
        从数字为 0 的格子向上下左右展开，对角格只通过链式展开间接打开
        """
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if not self.is_valid(nr, nc):
                    continue

                t = self.tiles[nr][nc]
                if not t.is_closed:
                    continue

                t.visibility = Visibility.OPEN
                if t.count == 0:
                    stack.append((nr, nc))

    def _check_win(self) -> bool:
        opened = self.count_by_visibility(Visibility.OPEN)
        return self._rows * self._cols - opened == self._mines

    def _check_bounds(self, row: int, col: int):
        if not self.is_valid(row, col):
            raise OutOfBoundsError(row, col)
