from .errors import InvalidDimensionsError
from .model import GameSpec

# "名称 行数 列数 雷数"，第一项为默认难度
DEFAULT_LEVELS = [
    "beginner 9 9 10",
    "intermediate 16 16 40",
    "expert 16 30 99",
]

# 行号用单个字母表示
MAX_ROWS = 26


def parse_levels(items: list[str]) -> dict[str, GameSpec]:
    result = {}

    for item in items:
        parts = item.split()
        if len(parts) != 4:
            raise InvalidDimensionsError(f"difficulty entry must be 'name rows cols mines': {item!r}")
        name, rows, cols, mines = parts
        try:
            spec = GameSpec(int(rows), int(cols), int(mines))
        except ValueError:
            raise InvalidDimensionsError(f"difficulty entry has non-numeric size: {item!r}") from None
        validate_spec(spec)
        result[name] = spec

    return result


def validate_spec(spec: GameSpec) -> GameSpec:
    if not 0 < spec.rows <= MAX_ROWS:
        raise InvalidDimensionsError(f"rows must be between 1 and {MAX_ROWS}, got {spec.rows}")
    if spec.cols <= 0:
        raise InvalidDimensionsError(f"cols must be positive, got {spec.cols}")
    if not 0 <= spec.mines < spec.rows * spec.cols:
        raise InvalidDimensionsError(
            f"mines must be in [0, {spec.rows * spec.cols}), got {spec.mines}"
        )
    return spec
