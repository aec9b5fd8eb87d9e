from dataclasses import dataclass
from typing import List, Tuple

@dataclass(slots=True)
class MoveAnimation:
    """Ball travelling along a path one cell per step.

    cursor indexes the path cell currently holding the ball; elapsed is the time
    accumulated towards the next step.
    """
    path: List[Tuple[int, int]]
    cursor: int = 0
    elapsed: float = 0.0

    @property
    def finished(self) -> bool:
        return self.cursor >= len(self.path) - 1

    @property
    def current(self) -> Tuple[int, int]:
        return self.path[self.cursor]
