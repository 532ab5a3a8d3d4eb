import pygame
import pytest

from blockdrop.board import Board
from blockdrop.constants import EMPTY_CELL, HEIGHT, WIDTH, YELLOW
from blockdrop.pieces import PatternO


class _Cells:
    """A stand-in piece occupying fixed cells."""

    def __init__(self, cells, sign="X"):
        self.pivot = (0, 0)
        self.grid_sign = sign
        self._cells = list(cells)

    def pattern_positions(self, pivot=None, rotate=False):
        return list(self._cells)


def _fill(board, cells, sign="X"):
    return board.lock_piece(_Cells(cells, sign))


def _full_row(row):
    return [(col, row) for col in range(WIDTH)]


@pytest.fixture
def board():
    return Board((800, 600))


def test_new_board_is_empty(board):
    assert all(
        board.get_cell(r, c) == EMPTY_CELL for r in range(HEIGHT) for c in range(WIDTH)
    )


def test_block_size_fits_window(board):
    assert board.block_size == 30.0
    assert board.offset == (0.0, 0.0)


def test_lock_piece_returns_touched_rows(board):
    rows = _fill(board, [(0, 5), (3, 7), (4, 7)], "T")
    assert rows == {5, 7}
    assert board.get_cell(5, 0) == "T"
    assert board.get_cell(7, 3) == "T"


def test_lock_piece_ignores_cells_above_board(board):
    rows = _fill(board, [(2, -1), (2, 0)])
    assert rows == {0}


def test_collision_with_walls_and_floor(board):
    assert board.check_collision([(-1, 5)])
    assert board.check_collision([(WIDTH, 5)])
    assert board.check_collision([(0, HEIGHT)])
    assert not board.check_collision([(0, HEIGHT - 1), (WIDTH - 1, 0)])


def test_rows_above_top_do_not_collide(board):
    assert not board.check_collision([(3, -2), (3, -1)])


def test_collision_with_filled_cell(board):
    _fill(board, [(4, 10)])
    assert board.check_collision([(4, 10)])
    assert not board.check_collision([(5, 10)])


def test_get_cell_out_of_range(board):
    with pytest.raises(IndexError):
        board.get_cell(HEIGHT, 0)
    with pytest.raises(IndexError):
        board.get_cell(0, -1)


def test_find_full_lines(board):
    _fill(board, _full_row(HEIGHT - 1) + _full_row(HEIGHT - 3))
    _fill(board, [(0, HEIGHT - 2)])
    full = board.find_full_lines({HEIGHT - 1, HEIGHT - 2, HEIGHT - 3})
    assert full == {HEIGHT - 1, HEIGHT - 3}


def test_clear_and_collapse(board):
    bottom = HEIGHT - 1
    _fill(board, _full_row(bottom))
    _fill(board, [(0, bottom - 1)], "L")
    board.clear_lines_from_grid({bottom})
    assert all(board.get_cell(bottom, c) == EMPTY_CELL for c in range(WIDTH))
    board.collapse_lines({bottom})
    assert board.get_cell(bottom, 0) == "L"
    assert board.get_cell(bottom - 1, 0) == EMPTY_CELL


def test_collapse_multiple_gaps(board):
    _fill(board, _full_row(HEIGHT - 1) + _full_row(HEIGHT - 3))
    _fill(board, [(2, HEIGHT - 2)], "A")
    _fill(board, [(3, HEIGHT - 4)], "B")
    cleared = {HEIGHT - 1, HEIGHT - 3}
    board.clear_lines_from_grid(cleared)
    board.collapse_lines(cleared)
    assert board.get_cell(HEIGHT - 1, 2) == "A"
    assert board.get_cell(HEIGHT - 2, 3) == "B"
    assert board.get_cell(HEIGHT - 4, 3) == EMPTY_CELL


def test_collapse_with_nothing_cleared_keeps_grid(board):
    _fill(board, [(1, 3)])
    before = str(board)
    board.collapse_lines(set())
    assert str(board) == before


def test_clear_empties_everything(board):
    _fill(board, _full_row(4))
    board.clear()
    assert set(str(board).replace("\n", "")) == {EMPTY_CELL}


def test_debug_print(board, capsys):
    _fill(board, [(0, 0)], "Z")
    board.debug_print()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == HEIGHT + 1
    assert lines[0].startswith("Z")
    assert lines[-1] == "=" * 22


def test_draw_colours_locked_cells(board):
    surface = pygame.Surface((800, 600))
    board.lock_piece(PatternO())
    board.draw(surface)
    x, y = board.pattern_cell if hasattr(board, "pattern_cell") else (4, 1)
    center = (int((x + 0.5) * board.block_size), int((y + 0.5) * board.block_size))
    assert tuple(surface.get_at(center))[:3] == YELLOW
    assert tuple(surface.get_at((5, 500)))[:3] == (0, 0, 0)