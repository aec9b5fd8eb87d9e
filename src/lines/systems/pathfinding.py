from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional

from lines.errors import PathRequestError
from lines.systems.board_ops import BoardGrid, Position

logger = logging.getLogger(__name__)


def find_path(board: BoardGrid, source: Position, destination: Position) -> Optional[List[Position]]:
    """Shortest route for the ball at ``source`` to the empty ``destination``.

    Breadth-first search through empty cells only, expanding neighbors in
    up/right/down/left order and marking cells visited when they are queued, so
    among equally short routes the first one discovered wins. Returns the path
    including both endpoints, or None when the destination cannot be reached.
    """
    if source == destination:
        raise PathRequestError(f"source and destination are both {source}")
    if board.is_empty(source):
        raise PathRequestError(f"source {source} holds no ball")
    if not board.is_empty(destination):
        raise PathRequestError(f"destination {destination} is occupied")

    came_from: Dict[Position, Optional[Position]] = {source: None}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        if current == destination:
            break
        for neighbor in board.neighbors4(current):
            if neighbor in came_from or not board.is_empty(neighbor):
                continue
            came_from[neighbor] = current
            queue.append(neighbor)

    if destination not in came_from:
        logger.debug("no path from %s to %s", source, destination)
        return None

    path: List[Position] = []
    step: Optional[Position] = destination
    while step is not None:
        path.append(step)
        step = came_from[step]
    path.reverse()
    logger.debug("path %s -> %s has %d steps", source, destination, len(path) - 1)
    return path
