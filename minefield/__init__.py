from .errors import (
    InvalidDimensionsError,
    MalformedCommandError,
    MinefieldError,
    OutOfBoundsError,
)
from .field import Field
from .model import GameSpec, GameState, MarkResult, OpenResult, Tile, TileKind, Visibility

__all__ = [
    "Field",
    "GameSpec",
    "GameState",
    "InvalidDimensionsError",
    "MalformedCommandError",
    "MarkResult",
    "MinefieldError",
    "OpenResult",
    "OutOfBoundsError",
    "Tile",
    "TileKind",
    "Visibility",
]
