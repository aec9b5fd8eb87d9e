from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from esper import World

from lines.components.board import Board
from lines.components.board_position import BoardPosition
from lines.components.occupant import Occupant
from lines.constants import NEIGHBOR_OFFSETS
from lines.errors import CellEmpty, CellOccupied, InvalidPiece, OutOfBounds

Position = Tuple[int, int]


class CellRange:
    """Row-major positions of a square board.

    Iterating is lazy and can be repeated; every pass yields the same order.
    """

    __slots__ = ("size",)

    def __init__(self, size: int):
        self.size = size

    def __iter__(self) -> Iterator[Position]:
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)

    def __len__(self) -> int:
        return self.size * self.size

    def __contains__(self, pos: object) -> bool:
        if not isinstance(pos, tuple) or len(pos) != 2:
            return False
        row, col = pos
        return 0 <= row < self.size and 0 <= col < self.size


class BoardGrid:
    """Square grid of cell entities, each carrying a BoardPosition and an Occupant."""

    def __init__(self, world: World, size: int, colors_number: int):
        self.world = world
        self.board_entity = world.create_entity(Board(size=size, colors_number=colors_number))
        self._cells: Dict[Position, int] = {}
        for row, col in CellRange(size):
            self._cells[(row, col)] = world.create_entity(BoardPosition(row=row, col=col), Occupant())

    @property
    def dimensions(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @property
    def size(self) -> int:
        return self.dimensions.size

    @property
    def colors_number(self) -> int:
        return self.dimensions.colors_number

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.size and 0 <= col < self.size

    def entity_at(self, row: int, col: int) -> int:
        try:
            return self._cells[(row, col)]
        except KeyError:
            raise OutOfBounds(row, col, self.size) from None

    def _occupant(self, row: int, col: int) -> Occupant:
        return self.world.component_for_entity(self.entity_at(row, col), Occupant)

    def get(self, row: int, col: int) -> int | None:
        return self._occupant(row, col).color

    def is_empty(self, pos: Position) -> bool:
        return self._occupant(*pos).empty

    def place(self, row: int, col: int, piece: int) -> None:
        occupant = self._occupant(row, col)
        if not occupant.empty:
            raise CellOccupied(row, col)
        if not 0 <= piece < self.colors_number:
            raise InvalidPiece(f"color {piece} outside [0, {self.colors_number})")
        occupant.color = piece

    def clear(self, row: int, col: int) -> None:
        self._occupant(row, col).color = None

    def move(self, src: Position, dst: Position) -> None:
        source = self._occupant(*src)
        target = self._occupant(*dst)
        if source.empty:
            raise CellEmpty(*src)
        if not target.empty:
            raise CellOccupied(*dst)
        target.color, source.color = source.color, None

    def neighbors4(self, pos: Position) -> List[Position]:
        """In-bounds orthogonal neighbors ordered up, right, down, left."""
        row, col = pos
        if not self.in_bounds(pos):
            raise OutOfBounds(row, col, self.size)
        result: List[Position] = []
        for dr, dc in NEIGHBOR_OFFSETS:
            candidate = (row + dr, col + dc)
            if self.in_bounds(candidate):
                result.append(candidate)
        return result

    def all_cells(self) -> CellRange:
        return CellRange(self.size)

    def empty_cells(self) -> List[Position]:
        return [pos for pos in self.all_cells() if self.is_empty(pos)]

    def has_empty_cell(self) -> bool:
        return any(self.is_empty(pos) for pos in self.all_cells())

    def occupied_map(self) -> Dict[Position, int]:
        """Return mapping of occupied positions to ball colors."""
        mapping: Dict[Position, int] = {}
        for entity, position in self.world.get_component(BoardPosition):
            occupant = self.world.component_for_entity(entity, Occupant)
            if occupant.color is not None:
                mapping[(position.row, position.col)] = occupant.color
        return mapping

    def load_rows(self, rows: List[List[int | None]]) -> None:
        """Overwrite the whole board from a row-major color grid (None for empty)."""
        if len(rows) != self.size or any(len(r) != self.size for r in rows):
            raise ValueError(f"expected a {self.size}x{self.size} grid")
        for row, values in enumerate(rows):
            for col, color in enumerate(values):
                self.clear(row, col)
                if color is not None:
                    self.place(row, col, color)


def get_board(world: World) -> BoardGrid:
    board = getattr(world, "board", None)
    if board is None:
        raise RuntimeError("BoardGrid not attached to world")
    return board
