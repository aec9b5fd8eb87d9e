from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    size: int
    colors_number: int
