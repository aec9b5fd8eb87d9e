import pytest
from esper import World

from lines.components.board import Board
from lines.components.board_position import BoardPosition
from lines.components.occupant import Occupant
from lines.errors import CellEmpty, CellOccupied, InvalidPiece, OutOfBounds
from lines.systems.board_ops import BoardGrid


def make_board(size=3, colors=4):
    return BoardGrid(World(), size, colors)


def test_one_cell_entity_per_coordinate():
    board = make_board(4)
    positions = [(p.row, p.col) for _, p in board.world.get_component(BoardPosition)]
    assert sorted(positions) == [(r, c) for r in range(4) for c in range(4)]
    assert all(occ.empty for _, occ in board.world.get_component(Occupant))


def test_dimensions_come_from_board_component():
    board = make_board(4, colors=5)
    boards = list(board.world.get_component(Board))
    assert [ent for ent, _ in boards] == [board.board_entity]
    assert board.size == 4 and board.colors_number == 5
    board.world.component_for_entity(board.board_entity, Board).colors_number = 2
    with pytest.raises(InvalidPiece):
        board.place(0, 0, 3)


def test_place_get_and_clear():
    board = make_board()
    assert board.get(1, 2) is None
    board.place(1, 2, 3)
    assert board.get(1, 2) == 3
    board.clear(1, 2)
    assert board.get(1, 2) is None
    # clearing an empty cell is harmless
    board.clear(1, 2)


def test_place_on_occupied_cell_raises():
    board = make_board()
    board.place(0, 0, 1)
    with pytest.raises(CellOccupied):
        board.place(0, 0, 2)
    assert board.get(0, 0) == 1


def test_invalid_color_rejected():
    board = make_board(colors=2)
    with pytest.raises(InvalidPiece):
        board.place(0, 0, 2)
    with pytest.raises(InvalidPiece):
        board.place(0, 0, -1)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_bounds_access(row, col):
    board = make_board(3)
    with pytest.raises(OutOfBounds):
        board.get(row, col)
    with pytest.raises(OutOfBounds):
        board.place(row, col, 0)
    with pytest.raises(IndexError):
        board.clear(row, col)


def test_neighbors_ordered_up_right_down_left():
    board = make_board(3)
    assert board.neighbors4((1, 1)) == [(0, 1), (1, 2), (2, 1), (1, 0)]
    assert board.neighbors4((0, 0)) == [(0, 1), (1, 0)]
    assert board.neighbors4((2, 2)) == [(1, 2), (2, 1)]


def test_all_cells_is_row_major_and_restartable():
    board = make_board(2)
    cells = board.all_cells()
    first = list(cells)
    assert first == [(0, 0), (0, 1), (1, 0), (1, 1)]
    assert list(cells) == first
    assert len(cells) == 4
    assert (1, 1) in cells and (2, 0) not in cells


def test_move_relocates_ball():
    board = make_board()
    board.place(0, 0, 2)
    board.move((0, 0), (0, 1))
    assert board.get(0, 0) is None
    assert board.get(0, 1) == 2
    with pytest.raises(CellEmpty):
        board.move((0, 0), (1, 1))
    board.place(1, 1, 0)
    with pytest.raises(CellOccupied):
        board.move((0, 1), (1, 1))


def test_empty_cells_and_occupied_map():
    board = make_board(2)
    board.load_rows([[1, None], [None, 0]])
    assert board.empty_cells() == [(0, 1), (1, 0)]
    assert board.occupied_map() == {(0, 0): 1, (1, 1): 0}
    assert board.has_empty_cell()
    board.load_rows([[1, 1], [1, 1]])
    assert not board.has_empty_cell()


def test_load_rows_rejects_wrong_shape():
    board = make_board(2)
    with pytest.raises(ValueError):
        board.load_rows([[1, 1]])
