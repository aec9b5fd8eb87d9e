"""Headless wiring of the Lines engine.

Sets up the event bus, ECS world, animation scheduler and game controller. A
renderer feeds clicks and clock ticks in and reads snapshots back out.
"""
import random

from lines.config import GameConfig
from lines.events.bus import EventBus, EVENT_CELL_CLICK, EVENT_TICK
from lines.systems.animation import AnimationSystem
from lines.systems.game_controller import GameController
from lines.systems.scoring import ScoreStrategy
from lines.utils.snapshot import BoardSnapshot
from lines.world import create_world


class LinesGame:
    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        rng: random.Random | None = None,
        score_strategy: ScoreStrategy | None = None,
        event_bus: EventBus | None = None,
        populate: bool = True,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, config, rng=rng, populate=populate)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.controller = GameController(self.world, self.event_bus, score_strategy=score_strategy)

    @property
    def board(self):
        return self.controller.board

    def click(self, row: int, col: int) -> None:
        self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def tick(self, dt: float) -> None:
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def move(self, src: tuple[int, int], dst: tuple[int, int]) -> None:
        """Select ``src``, click ``dst`` and play out the resulting move."""
        self.click(*src)
        self.click(*dst)
        self.controller.run_pending_animation()

    def snapshot(self) -> BoardSnapshot:
        return self.controller.snapshot()
