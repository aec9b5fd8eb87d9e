from __future__ import annotations

from esper import World

from lines.components.game_state import GameState
from lines.events.bus import EVENT_PHASE_CHANGED, EventBus


def get_game_state(world: World) -> GameState:
    """Return the singleton GameState component."""
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState not found")


def commit_game_state(world: World, event_bus: EventBus, new_state: GameState) -> GameState:
    """Replace the singleton GameState and emit a change event when the phase differs."""
    for entity, previous in world.get_component(GameState):
        if previous is new_state:
            return new_state
        world.add_component(entity, new_state)
        if previous.phase is not new_state.phase:
            event_bus.emit(
                EVENT_PHASE_CHANGED,
                previous_phase=previous.phase,
                new_phase=new_state.phase,
            )
        return new_state
    raise RuntimeError("GameState not found")
