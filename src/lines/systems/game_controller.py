from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from esper import World

from lines.components.game_state import GameState, TurnPhase
from lines.config import GameConfig
from lines.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_CELL_CLICK,
    EVENT_CELL_SELECTED,
    EVENT_GAME_OVER,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_STARTED,
    EVENT_MOVE_STEP,
    EVENT_PIECES_SPAWNED,
    EVENT_RUNS_COLLAPSED,
    EVENT_SCORE_CHANGED,
    EVENT_TICK,
    EVENT_TURN_COMPLETED,
    EventBus,
)
from lines.systems.board_ops import Position, get_board
from lines.systems.pathfinding import find_path
from lines.systems.run_matcher import Run, cells_of, find_collapsing_runs
from lines.systems.scoring import LengthSquaredScore, ScoreStrategy
from lines.systems.spawn import resolve_preview
from lines.utils.game_state import commit_game_state, get_game_state
from lines.utils.snapshot import BoardSnapshot, build_snapshot
from lines.world import announce_preview

logger = logging.getLogger(__name__)

PathLookup = Callable[[Position, Position], Optional[List[Position]]]


@dataclass(frozen=True, slots=True)
class ClickDecision:
    """Outcome of a click: the next state, plus the path to animate when a move starts."""
    state: GameState
    path: Optional[List[Position]] = None
    rejected: bool = False


def decide_click(state: GameState, target: Position, occupied: bool, lookup: PathLookup) -> ClickDecision:
    """Pure selection/move transition for a click on ``target``.

    Returns the very same ``state`` object when nothing changes.
    """
    if state.phase in (TurnPhase.GAME_OVER, TurnPhase.ANIMATING):
        return ClickDecision(state)
    if occupied:
        if state.phase is TurnPhase.SELECTED and state.selected == target:
            return ClickDecision(state)
        return ClickDecision(replace(state, phase=TurnPhase.SELECTED, selected=target))
    if state.selected is None:
        return ClickDecision(state)
    path = lookup(state.selected, target)
    if path is None:
        # selection is kept so the player can pick another destination
        return ClickDecision(state, rejected=True)
    return ClickDecision(replace(state, phase=TurnPhase.ANIMATING, selected=None), path=path)


class GameController:
    """Runs the turn: select, move along a path, collapse, spawn, collapse again, check for game over.

    Flow:
      - EVENT_CELL_CLICK selects a ball or starts a move; the move is handed to
        the animation scheduler via EVENT_ANIMATION_START(kind='move').
      - Each EVENT_MOVE_STEP relocates the ball one cell.
      - EVENT_ANIMATION_COMPLETE(kind='move') resolves the rest of the turn.
    Clicks arriving while a move is animating are dropped.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        score_strategy: ScoreStrategy | None = None,
    ):
        self.world = world
        self.event_bus = event_bus
        self.config: GameConfig = world.config
        self.board = get_board(world)
        self.score_strategy: ScoreStrategy = score_strategy or LengthSquaredScore(
            self.config.min_collapsing_line
        )
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_MOVE_STEP, self.on_move_step)
        self.event_bus.subscribe(EVENT_ANIMATION_COMPLETE, self.on_animation_complete)

    @property
    def state(self) -> GameState:
        return get_game_state(self.world)

    def snapshot(self) -> BoardSnapshot:
        return build_snapshot(self.board, self.state)

    def on_cell_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        target = (row, col)
        occupied = not self.board.is_empty(target)
        state = self.state
        if state.phase is TurnPhase.ANIMATING:
            logger.debug("click on %s dropped while a move is animating", target)
            return
        decision = decide_click(state, target, occupied, lambda src, dst: find_path(self.board, src, dst))
        if decision.state is state:
            if decision.rejected:
                self.event_bus.emit(EVENT_MOVE_REJECTED, src=state.selected, dst=target)
            return
        commit_game_state(self.world, self.event_bus, decision.state)
        if decision.path is not None:
            self.event_bus.emit(EVENT_MOVE_STARTED, path=list(decision.path))
            self.event_bus.emit(
                EVENT_ANIMATION_START,
                kind='move',
                items=list(decision.path),
                step_delay=self.config.step_delay,
            )
        else:
            self.event_bus.emit(EVENT_CELL_SELECTED, row=row, col=col)

    def on_move_step(self, sender, **kwargs):
        src = kwargs.get('src')
        dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        self.board.move(src, dst)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='move_step', positions=[src, dst])

    def on_animation_complete(self, sender, **kwargs):
        if kwargs.get('kind') != 'move':
            return
        if self.state.phase is not TurnPhase.ANIMATING:
            return
        self._finish_turn()

    def run_pending_animation(self, max_ticks: int | None = None) -> None:
        """Drive the running move to completion by emitting ticks of one step delay each."""
        budget = max_ticks if max_ticks is not None else self.board.size * self.board.size + 1
        for _ in range(budget):
            if self.state.phase is not TurnPhase.ANIMATING:
                return
            self.event_bus.emit(EVENT_TICK, dt=self.config.step_delay)
        if self.state.phase is TurnPhase.ANIMATING:
            raise RuntimeError("move animation did not finish; is an AnimationSystem subscribed?")

    def _finish_turn(self) -> None:
        state = self.state
        runs = find_collapsing_runs(self.board, self.config.min_collapsing_line)
        if runs:
            self._collapse(state, runs)
            next_phase = TurnPhase.IDLE
        else:
            placed = resolve_preview(
                self.board,
                state.preview,
                self.config.new_drop_balls_number,
                self.config.colors_number,
                self.world.random,
            )
            self.event_bus.emit(EVENT_PIECES_SPAWNED, placed=list(placed))
            if placed:
                self.event_bus.emit(
                    EVENT_BOARD_CHANGED, reason='spawn', positions=[pos for pos, _ in placed]
                )
            spawned_runs = find_collapsing_runs(self.board, self.config.min_collapsing_line)
            if spawned_runs:
                self._collapse(state, spawned_runs)
            announce_preview(self.world, self.event_bus)
            next_phase = TurnPhase.IDLE if self.board.has_empty_cell() else TurnPhase.GAME_OVER
        state.turns += 1
        commit_game_state(self.world, self.event_bus, replace(state, phase=next_phase, selected=None))
        self.event_bus.emit(EVENT_TURN_COMPLETED, turn=state.turns, score=state.score)
        if next_phase is TurnPhase.GAME_OVER:
            logger.info("game over after %d turn(s) with score %d", state.turns, state.score)
            self.event_bus.emit(EVENT_GAME_OVER, score=state.score)

    def _collapse(self, state: GameState, runs: List[Run]) -> None:
        positions = cells_of(runs)
        for row, col in positions:
            self.board.clear(row, col)
        gained = sum(self.score_strategy(run) for run in runs)
        state.score += gained
        logger.info(
            "collapsed %d run(s), %d ball(s), +%d points (score %d)",
            len(runs), len(positions), gained, state.score,
        )
        self.event_bus.emit(
            EVENT_RUNS_COLLAPSED, runs=list(runs), positions=positions, gained=gained, score=state.score
        )
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=gained)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='collapse', positions=positions)
