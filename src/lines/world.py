import logging
import random

from esper import World
from .events.bus import EventBus, EVENT_PREVIEW_CHANGED
from lines.config import GameConfig
from lines.components.game_state import GameState, TurnPhase
from lines.systems.board_ops import BoardGrid
from lines.systems.spawn import build_preview, place_starting_pieces

logger = logging.getLogger(__name__)


def create_world(
    event_bus: EventBus,
    config: GameConfig | None = None,
    *,
    rng: random.Random | None = None,
    populate: bool = True,
) -> World:
    """Build a world holding the board, the game state singleton and the shared RNG.

    With ``populate`` the starting balls are scattered and the first preview is
    announced; tests pass ``populate=False`` to lay out the board themselves and
    then call :func:`announce_preview`.
    """
    config = config or GameConfig()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "config", config)

    board = BoardGrid(world, config.board_size, config.colors_number)
    setattr(world, "board", board)

    state = GameState()
    world.create_entity(state)

    if populate:
        placed = place_starting_pieces(
            board, config.starting_balls_number, config.colors_number, world.random
        )
        logger.debug("placed %d starting ball(s)", len(placed))
        announce_preview(world, event_bus)
        if not board.has_empty_cell():
            state.phase = TurnPhase.GAME_OVER
    return world


def announce_preview(world: World, event_bus: EventBus) -> None:
    """Replace the pending preview with a freshly drawn one."""
    config: GameConfig = world.config
    for _, state in world.get_component(GameState):
        state.preview = build_preview(
            world.board,
            config.new_drop_balls_number,
            config.colors_number,
            world.random,
        )
        event_bus.emit(EVENT_PREVIEW_CHANGED, preview=list(state.preview))
