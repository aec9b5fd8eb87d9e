from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple, Set, Tuple

from lines.systems.board_ops import BoardGrid, Position

Line = List[Position]


class Run(NamedTuple):
    """Contiguous same-colored balls along one line, ordered in traversal order."""
    positions: Tuple[Position, ...]
    color: int

    @property
    def length(self) -> int:
        return len(self.positions)


def horizontal_lines(size: int) -> Iterator[Line]:
    for row in range(size):
        yield [(row, col) for col in range(size)]


def vertical_lines(size: int) -> Iterator[Line]:
    for col in range(size):
        yield [(row, col) for row in range(size)]


def _diagonal(start: Position, d_row: int, size: int) -> Line:
    row, col = start
    line: Line = []
    while 0 <= row < size and 0 <= col < size:
        line.append((row, col))
        row += d_row
        col += 1
    return line


def down_right_diagonals(size: int, min_length: int) -> Iterator[Line]:
    """Diagonals where row grows with column.

    Anchored on the top edge (main diagonal included), then on the left edge below it.
    """
    anchors = [(0, col) for col in range(size)] + [(row, 0) for row in range(1, size)]
    for anchor in anchors:
        line = _diagonal(anchor, 1, size)
        if len(line) >= min_length:
            yield line


def up_right_diagonals(size: int, min_length: int) -> Iterator[Line]:
    """Anti-diagonals where row shrinks as column grows, traversed left to right.

    Starts on the bottom edge (longest anti-diagonal first), then on the left
    edge above it; together these reach every cell of the right edge.
    """
    last = size - 1
    anchors = [(last, col) for col in range(size)] + [(row, 0) for row in range(last - 1, -1, -1)]
    for anchor in anchors:
        line = _diagonal(anchor, -1, size)
        if len(line) >= min_length:
            yield line


def iter_lines(size: int, min_length: int) -> Iterator[Line]:
    """Every line that could hold a run: rows, columns, then both diagonal families."""
    if min_length > size:
        return
    yield from horizontal_lines(size)
    yield from vertical_lines(size)
    yield from down_right_diagonals(size, min_length)
    yield from up_right_diagonals(size, min_length)


def runs_in_line(line: Line, colors: Dict[Position, int], min_length: int) -> List[Run]:
    runs: List[Run] = []
    index = 0
    while index < len(line):
        color = colors.get(line[index])
        if color is None:
            index += 1
            continue
        end = index + 1
        while end < len(line) and colors.get(line[end]) == color:
            end += 1
        if end - index >= min_length:
            runs.append(Run(positions=tuple(line[index:end]), color=color))
        index = end
    return runs


def find_collapsing_runs(board: BoardGrid, min_collapsing_line: int) -> List[Run]:
    """Detect all straight same-color runs of length >= min_collapsing_line.

    A ball can belong to several runs (a row run and a column run crossing it);
    each run is reported separately so it can be scored on its own.
    """
    colors = board.occupied_map()
    if len(colors) < min_collapsing_line:
        return []
    runs: List[Run] = []
    seen: Set[Run] = set()
    for line in iter_lines(board.size, min_collapsing_line):
        for run in runs_in_line(line, colors, min_collapsing_line):
            if run not in seen:
                seen.add(run)
                runs.append(run)
    return runs


def cells_of(runs: List[Run]) -> List[Position]:
    """Deduplicated union of run cells, sorted row-major."""
    return sorted({pos for run in runs for pos in run.positions})
