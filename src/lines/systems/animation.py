from __future__ import annotations

import logging

from esper import World

from lines.components.duration import Duration
from lines.components.move_animation import MoveAnimation
from lines.constants import MOVE_STEP_DELAY
from lines.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_MOVE_STEP,
    EVENT_TICK,
    EventBus,
)

logger = logging.getLogger(__name__)


class AnimationSystem:
    """Cooperative scheduler for ball moves.

    Each tick adds ``dt`` to every running move; whenever a full step delay has
    elapsed the ball advances one cell and EVENT_MOVE_STEP is emitted. Steps are
    committed one at a time, so no partial move is ever observable. When the
    ball reaches the end of its path the animation entity is removed and
    EVENT_ANIMATION_COMPLETE(kind='move') fires.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)

    def on_animation_start(self, sender, **kwargs):
        if kwargs.get('kind') != 'move':
            return
        path = list(kwargs.get('items') or [])
        if len(path) < 2:
            return
        delay = kwargs.get('step_delay', MOVE_STEP_DELAY)
        self.world.create_entity(MoveAnimation(path=path), Duration(delay))

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for ent, move in list(self.world.get_component(MoveAnimation)):
            delay = self.world.component_for_entity(ent, Duration).value
            move.elapsed += dt
            while not move.finished and move.elapsed >= delay:
                move.elapsed -= delay
                src = move.current
                move.cursor += 1
                self.event_bus.emit(EVENT_MOVE_STEP, src=src, dst=move.current, cursor=move.cursor)
            if move.finished:
                self.world.delete_entity(ent, immediate=True)
                logger.debug("move along %d cells finished", len(move.path))
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='move', items=list(move.path))
