from __future__ import annotations

import logging
import random
from typing import Iterable, List, Tuple

from lines.components.game_state import PreviewEntry
from lines.systems.board_ops import BoardGrid, Position

logger = logging.getLogger(__name__)

Placement = Tuple[Position, int]


def build_preview(
    board: BoardGrid,
    count: int,
    colors_number: int,
    rng: random.Random,
    *,
    reserved: Iterable[Position] = (),
) -> List[PreviewEntry]:
    """Announce up to ``count`` balls on distinct random empty cells.

    Cells listed in ``reserved`` (held by a still pending preview) are not
    candidates. Fewer entries are returned only when fewer cells qualify.
    """
    blocked = set(reserved)
    candidates = [pos for pos in board.empty_cells() if pos not in blocked]
    chosen = rng.sample(candidates, k=min(count, len(candidates)))
    return [PreviewEntry(position=pos, color=rng.randrange(colors_number)) for pos in chosen]


def _place_on_random_empty(board: BoardGrid, color: int, rng: random.Random) -> Position | None:
    empty = board.empty_cells()
    if not empty:
        return None
    pos = rng.choice(empty)
    board.place(pos[0], pos[1], color)
    return pos


def resolve_preview(
    board: BoardGrid,
    preview: List[PreviewEntry],
    count: int,
    colors_number: int,
    rng: random.Random,
) -> List[Placement]:
    """Drop the announced balls and return what was actually placed.

    Entries whose cell is still empty land where announced. Balls of entries
    whose cell got taken in the meantime are carried over to random empty cells,
    missing balls are generated with random colors and any surplus is dropped,
    so ``min(count, empty cells)`` balls end up on the board.
    """
    placed: List[Placement] = []
    carried: List[int] = []
    for entry in preview:
        if len(placed) >= count:
            break
        row, col = entry.position
        if board.is_empty(entry.position):
            board.place(row, col, entry.color)
            placed.append((entry.position, entry.color))
        else:
            carried.append(entry.color)

    remaining = count - len(placed)
    queue = carried[:remaining]
    queue.extend(rng.randrange(colors_number) for _ in range(remaining - len(queue)))
    for color in queue:
        pos = _place_on_random_empty(board, color, rng)
        if pos is None:
            logger.debug("board full, %d ball(s) not placed", count - len(placed))
            break
        placed.append((pos, color))
    logger.debug("spawned %d ball(s), %d carried over", len(placed), min(len(carried), remaining))
    return placed


def place_starting_pieces(
    board: BoardGrid,
    count: int,
    colors_number: int,
    rng: random.Random,
) -> List[Placement]:
    """Scatter ``count`` random balls on random empty cells at game start."""
    placed: List[Placement] = []
    for _ in range(count):
        color = rng.randrange(colors_number)
        pos = _place_on_random_empty(board, color, rng)
        if pos is None:
            break
        placed.append((pos, color))
    return placed
