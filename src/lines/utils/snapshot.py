"""Read-only views of the board handed to renderers and tests."""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Tuple

from lines.components.game_state import GameState, TurnPhase
from lines.systems.board_ops import BoardGrid, Position

_DIGITS = string.digits + string.ascii_uppercase


@dataclass(frozen=True, slots=True)
class CellView:
    occupant: Optional[int]
    preview: Optional[int] = None


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    size: int
    cells: Tuple[Tuple[CellView, ...], ...]
    score: int
    selected: Optional[Position]
    phase: TurnPhase

    @property
    def game_over(self) -> bool:
        return self.phase is TurnPhase.GAME_OVER

    @property
    def final_score(self) -> Optional[int]:
        return self.score if self.game_over else None

    def occupant(self, row: int, col: int) -> Optional[int]:
        return self.cells[row][col].occupant

    def as_text(self) -> str:
        """Compact grid: color digits for balls, letters for previewed drops (a=0), '.' for empty."""
        lines = []
        for r, row in enumerate(self.cells):
            chars = []
            for c, cell in enumerate(row):
                if cell.occupant is not None:
                    ch = _DIGITS[cell.occupant % len(_DIGITS)]
                elif cell.preview is not None:
                    ch = string.ascii_lowercase[cell.preview % 26]
                else:
                    ch = '.'
                chars.append(f"[{ch}]" if self.selected == (r, c) else f" {ch} ")
            lines.append("".join(chars).rstrip())
        lines.append(f"score={self.score} phase={self.phase.name.lower()}")
        return "\n".join(lines)


def build_snapshot(board: BoardGrid, state: GameState) -> BoardSnapshot:
    previewed = {entry.position: entry.color for entry in state.preview}
    rows = []
    for row in range(board.size):
        cells = []
        for col in range(board.size):
            color = board.get(row, col)
            preview = previewed.get((row, col)) if color is None else None
            cells.append(CellView(occupant=color, preview=preview))
        rows.append(tuple(cells))
    return BoardSnapshot(
        size=board.size,
        cells=tuple(rows),
        score=state.score,
        selected=state.selected,
        phase=state.phase,
    )
