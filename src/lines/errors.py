"""Exception types raised for caller contract violations.

Expected empty outcomes (no path, no free cell, no runs) are plain ``None`` or
empty results and never raise.
"""


class LinesError(Exception):
    """Base class for engine errors."""


class InvalidConfig(LinesError, ValueError):
    """Construction parameters are out of range."""


class OutOfBounds(LinesError, IndexError):
    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"cell ({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class CellOccupied(LinesError):
    def __init__(self, row: int, col: int):
        super().__init__(f"cell ({row}, {col}) is already occupied")
        self.row = row
        self.col = col


class CellEmpty(LinesError):
    def __init__(self, row: int, col: int):
        super().__init__(f"cell ({row}, {col}) holds no ball")
        self.row = row
        self.col = col


class InvalidPiece(LinesError, ValueError):
    """Color index outside ``[0, colors_number)``."""


class PathRequestError(LinesError, ValueError):
    """Path search called with an occupied destination, empty source or equal endpoints."""
