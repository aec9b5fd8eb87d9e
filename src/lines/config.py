"""Validated construction parameters for a game."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from lines.constants import (
    BOARD_SIZE,
    COLORS_NUMBER,
    MIN_COLLAPSING_LINE,
    MOVE_STEP_DELAY,
    NEW_DROP_BALLS_NUMBER,
    STARTING_BALLS_NUMBER,
)
from lines.errors import InvalidConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GameConfig:
    board_size: int = BOARD_SIZE
    colors_number: int = COLORS_NUMBER
    starting_balls_number: int = STARTING_BALLS_NUMBER
    new_drop_balls_number: int = NEW_DROP_BALLS_NUMBER
    min_collapsing_line: int = MIN_COLLAPSING_LINE
    step_delay: float = MOVE_STEP_DELAY

    def __post_init__(self) -> None:
        for name in (
            "board_size",
            "colors_number",
            "starting_balls_number",
            "new_drop_balls_number",
            "min_collapsing_line",
        ):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfig(f"{name} must be an integer, got {value!r}")
        if self.board_size <= 0:
            raise InvalidConfig(f"board_size must be positive, got {self.board_size}")
        if self.colors_number <= 0:
            raise InvalidConfig(f"colors_number must be positive, got {self.colors_number}")
        if self.min_collapsing_line <= 0:
            raise InvalidConfig(
                f"min_collapsing_line must be positive, got {self.min_collapsing_line}"
            )
        if not 0 <= self.starting_balls_number <= self.cell_count:
            raise InvalidConfig(
                f"starting_balls_number must be within [0, {self.cell_count}], "
                f"got {self.starting_balls_number}"
            )
        if self.new_drop_balls_number < 0:
            raise InvalidConfig(
                f"new_drop_balls_number must not be negative, got {self.new_drop_balls_number}"
            )
        if not isinstance(self.step_delay, (int, float)) or isinstance(self.step_delay, bool):
            raise InvalidConfig(f"step_delay must be a number, got {self.step_delay!r}")
        if not math.isfinite(self.step_delay):
            raise InvalidConfig(f"step_delay must be finite, got {self.step_delay}")
        if self.step_delay < 0:
            raise InvalidConfig(f"step_delay must not be negative, got {self.step_delay}")
        if self.min_collapsing_line > self.board_size:
            logger.warning(
                "min_collapsing_line=%d exceeds board_size=%d; no line can ever collapse",
                self.min_collapsing_line,
                self.board_size,
            )

    @property
    def cell_count(self) -> int:
        return self.board_size * self.board_size

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise InvalidConfig(f"unknown config keys: {', '.join(unknown)}")
        return cls(**dict(mapping))
