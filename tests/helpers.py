from __future__ import annotations

import random
from typing import Sequence

from lines.config import GameConfig
from lines.game import LinesGame
from lines.world import announce_preview


def grid_from_strings(rows: Sequence[str]) -> list[list[int | None]]:
    """Parse rows like ``"11.2."`` into a color grid; '.' marks an empty cell."""
    return [[None if ch == '.' else int(ch) for ch in row] for row in rows]


def make_game(
    rows: Sequence[str],
    *,
    min_collapsing_line: int = 5,
    colors_number: int = 7,
    new_drop_balls_number: int = 3,
    seed: int = 1234,
    with_preview: bool = True,
    **kwargs,
) -> LinesGame:
    """Build a headless game whose board is laid out from ``rows`` instead of random balls."""

    config = GameConfig(
        board_size=len(rows),
        colors_number=colors_number,
        starting_balls_number=0,
        new_drop_balls_number=new_drop_balls_number,
        min_collapsing_line=min_collapsing_line,
        step_delay=0.0,
    )
    game = LinesGame(config, rng=random.Random(seed), populate=False, **kwargs)
    game.board.load_rows(grid_from_strings(rows))
    if with_preview:
        announce_preview(game.world, game.event_bus)
    return game
