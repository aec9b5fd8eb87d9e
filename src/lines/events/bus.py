from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & SELECTION
# ============================================================================
EVENT_CELL_CLICK = "cell_click"                    # payload: row, col
EVENT_CELL_SELECTED = "cell_selected"              # payload: row, col


# ============================================================================
# MOVES & ANIMATION
# ============================================================================
EVENT_MOVE_REJECTED = "move_rejected"              # payload: src=(r,c), dst=(r,c)
EVENT_MOVE_STARTED = "move_started"                # payload: path=[(r,c),...]
EVENT_MOVE_STEP = "move_step"                      # payload: src=(r,c), dst=(r,c), cursor=int
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list[(r,c)], step_delay=float
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list[(r,c)]


# ============================================================================
# BOARD
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[(r,c)]
EVENT_RUNS_COLLAPSED = "runs_collapsed"            # payload: runs=list[Run], positions=list[(r,c)], gained=int, score=int
EVENT_PIECES_SPAWNED = "pieces_spawned"            # payload: placed=list[((r,c), color)]
EVENT_PREVIEW_CHANGED = "preview_changed"          # payload: preview=list[PreviewEntry]


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_PHASE_CHANGED = "phase_changed"              # payload: previous_phase=TurnPhase, new_phase=TurnPhase
EVENT_TURN_COMPLETED = "turn_completed"            # payload: turn=int, score=int
EVENT_GAME_OVER = "game_over"                      # payload: score=int
