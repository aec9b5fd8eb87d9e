"""Game state resource describing the turn phase, selection, preview and score."""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, NamedTuple, Optional, Tuple


class TurnPhase(Enum):
    """Phases of the turn state machine."""
    IDLE = auto()
    SELECTED = auto()
    ANIMATING = auto()
    GAME_OVER = auto()


class PreviewEntry(NamedTuple):
    """Ball announced to drop onto ``position`` at the end of the turn."""
    position: Tuple[int, int]
    color: int


@dataclass(slots=True)
class GameState:
    """Singleton component owned by the game controller."""
    phase: TurnPhase = TurnPhase.IDLE
    selected: Optional[Tuple[int, int]] = None
    preview: List[PreviewEntry] = field(default_factory=list)
    score: int = 0
    turns: int = 0

    @property
    def terminal(self) -> bool:
        return self.phase is TurnPhase.GAME_OVER
