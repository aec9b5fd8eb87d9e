from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True)
class Occupant:
    """Per-cell ball slot.

    color: index of the ball color in [0, colors_number), or None when the cell is empty.
    """
    color: Optional[int] = None

    @property
    def empty(self) -> bool:
        return self.color is None
