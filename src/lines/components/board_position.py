from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Fixed coordinates of a cell entity; never mutated after creation."""
    row: int
    col: int
