class MinefieldError(Exception):
    """Base class for every error raised by the minefield package."""


class InvalidDimensionsError(MinefieldError, ValueError):
    """Rows, columns or mine count cannot form a playable field."""


class OutOfBoundsError(MinefieldError, IndexError):
    def __init__(self, row: int, column: int):
        super().__init__(f"({row}, {column}) is outside the field")
        self.row = row
        self.column = column


class MalformedCommandError(MinefieldError, ValueError):
    def __init__(self, text: str):
        super().__init__(f"cannot parse command: {text!r}")
        self.text = text
