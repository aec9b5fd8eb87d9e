import random

from tests.helpers import make_game
from lines.systems.run_matcher import (
    Run,
    cells_of,
    down_right_diagonals,
    find_collapsing_runs,
    iter_lines,
    runs_in_line,
    up_right_diagonals,
)


def board_from(rows):
    return make_game(rows, with_preview=False).board


def test_row_of_exactly_five_is_one_run():
    rows = ["." * 9 for _ in range(9)]
    rows[4] = "111110000"
    runs = find_collapsing_runs(board_from(rows), 5)
    assert runs == [Run(positions=tuple((4, c) for c in range(5)), color=1)]
    assert runs[0].length == 5


def test_four_in_a_row_is_not_enough():
    rows = ["." * 9 for _ in range(9)]
    rows[0] = "1111.1111"
    rows[1] = "222233333"
    runs = find_collapsing_runs(board_from(rows), 5)
    assert runs == [Run(positions=tuple((1, c) for c in range(4, 9)), color=3)]


def test_empty_cells_break_runs():
    line = [(0, c) for c in range(7)]
    colors = {(0, 0): 2, (0, 1): 2, (0, 3): 2, (0, 4): 2, (0, 5): 2, (0, 6): 2}
    assert runs_in_line(line, colors, 4) == [Run(positions=tuple(line[3:7]), color=2)]


def test_column_and_both_diagonals_detected():
    board = board_from([
        "1...2",
        "1..2.",
        "1.2..",
        ".2..3",
        "....3",
    ])
    runs = find_collapsing_runs(board, 3)
    assert Run(positions=((0, 0), (1, 0), (2, 0)), color=1) in runs
    assert Run(positions=((3, 1), (2, 2), (1, 3), (0, 4)), color=2) in runs
    assert len(runs) == 2


def test_down_right_diagonal_run():
    board = board_from([
        ".....",
        "4....",
        ".4...",
        "..4..",
        ".....",
    ])
    runs = find_collapsing_runs(board, 3)
    assert runs == [Run(positions=((1, 0), (2, 1), (3, 2)), color=4)]


def test_crossing_runs_share_a_cell_but_are_reported_separately():
    board = board_from([
        "..1..",
        "..1..",
        "11111",
        "..1..",
        "..1..",
    ])
    runs = find_collapsing_runs(board, 5)
    assert len(runs) == 2
    assert cells_of(runs).count((2, 2)) == 1
    assert len(cells_of(runs)) == 9


def test_short_diagonals_are_skipped():
    assert [line[0] for line in down_right_diagonals(5, 4)] == [(0, 0), (0, 1), (1, 0)]
    assert [line[0] for line in up_right_diagonals(5, 4)] == [(4, 0), (4, 1), (3, 0)]
    assert all(len(line) >= 4 for line in iter_lines(5, 4))


def test_every_anti_diagonal_runs_left_to_right():
    for line in up_right_diagonals(4, 1):
        for (r1, c1), (r2, c2) in zip(line, line[1:]):
            assert (r2, c2) == (r1 - 1, c1 + 1)
    covered = {pos for line in up_right_diagonals(4, 1) for pos in line}
    assert len(covered) == 16


def test_threshold_larger_than_board_never_matches():
    board = board_from(["111", "111", "111"])
    assert list(iter_lines(3, 4)) == []
    assert find_collapsing_runs(board, 4) == []


def _rotate(rows):
    size = len(rows)
    # (r, c) -> (c, size - 1 - r): clockwise quarter turn
    return ["".join(rows[size - 1 - r][c] for r in range(size)) for c in range(size)]


def _run_cell_sets(runs, transform=lambda pos: pos):
    return {frozenset(transform(pos) for pos in run.positions) for run in runs}


def test_rotation_maps_runs_onto_runs():
    rows = [
        "11111.",
        "2.....",
        "2..3..",
        "2.3...",
        "23....",
        "3.....",
    ]
    rng = random.Random(7)
    random_rows = ["".join(rng.choice("12.") for _ in range(7)) for _ in range(7)]
    for layout in (rows, random_rows):
        size = len(layout)
        before = find_collapsing_runs(board_from(layout), 3)
        after = find_collapsing_runs(board_from(_rotate(layout)), 3)
        expected = _run_cell_sets(before, lambda pos: (pos[1], size - 1 - pos[0]))
        assert _run_cell_sets(after) == expected


def test_rotation_turns_rows_into_columns():
    rows = [
        "11111",
        ".....",
        ".....",
        ".....",
        ".....",
    ]
    rotated = find_collapsing_runs(board_from(_rotate(rows)), 5)
    assert rotated == [Run(positions=tuple((r, 4) for r in range(5)), color=1)]
