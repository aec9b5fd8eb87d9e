"""Score strategies: callables turning one collapsed run into points."""
from __future__ import annotations

from typing import Protocol

from lines.errors import InvalidConfig
from lines.systems.run_matcher import Run


class ScoreStrategy(Protocol):
    def __call__(self, run: Run) -> int: ...


class LengthSquaredScore:
    """``L * (L - (m - 1))`` for a run of length L and threshold m.

    Strictly increasing for L >= m: with m=5, 5 -> 5, 6 -> 12, 9 -> 45.
    """

    def __init__(self, min_collapsing_line: int):
        if min_collapsing_line <= 0:
            raise InvalidConfig(f"min_collapsing_line must be positive, got {min_collapsing_line}")
        self.min_collapsing_line = min_collapsing_line

    def __call__(self, run: Run) -> int:
        length = run.length
        return length * (length - (self.min_collapsing_line - 1))


class FlatScore:
    """Fixed number of points per ball in the run."""

    def __init__(self, points_per_ball: int = 1):
        if points_per_ball < 0:
            raise InvalidConfig(f"points_per_ball must not be negative, got {points_per_ball}")
        self.points_per_ball = points_per_ball

    def __call__(self, run: Run) -> int:
        return run.length * self.points_per_ball
