# tests/test_candidates.py
from candidates import DIGITS, candidates, has_conflict, used_in_block, used_in_column, used_in_row


def test_used_sets_ignore_empty_cells(classic):
    assert used_in_row(classic, 0) == {5, 3, 7}
    assert used_in_column(classic, 2) == {8}
    assert used_in_block(classic, 1, 1) == {5, 3, 6, 9, 8}


def test_block_is_chosen_by_top_left_corner(classic):
    # (4,4) y (3,3) comparten el bloque central
    assert used_in_block(classic, 4, 4) == used_in_block(classic, 3, 3) == {6, 8, 3, 2}


def test_candidates_excludes_row_column_and_block(classic):
    assert candidates(classic, 0, 2) == {1, 2, 4}
    assert candidates(classic, 4, 4) == {5}


def test_candidates_on_empty_grid_is_full_digit_set():
    empty = [[0] * 9 for _ in range(9)]
    assert candidates(empty, 8, 8) == set(DIGITS)


def test_candidates_empty_when_cell_is_blocked():
    table = [[0] * 9 for _ in range(9)]
    table[0][1:] = [1, 2, 3, 4, 5, 6, 7, 8]
    table[5][0] = 9
    assert candidates(table, 0, 0) == set()


def test_candidates_does_not_mutate(classic):
    before = [row[:] for row in classic]
    candidates(classic, 2, 3)
    assert classic == before


def test_has_conflict(classic, classic_solution):
    assert not has_conflict(classic)
    assert not has_conflict(classic_solution)
    assert not has_conflict([[0] * 9 for _ in range(9)])


def test_has_conflict_detects_row_column_and_block():
    row = [[0] * 9 for _ in range(9)]
    row[0][0] = row[0][8] = 9
    col = [[0] * 9 for _ in range(9)]
    col[0][4] = col[8][4] = 2
    block = [[0] * 9 for _ in range(9)]
    block[3][3] = block[5][5] = 7
    assert has_conflict(row)
    assert has_conflict(col)
    assert has_conflict(block)
