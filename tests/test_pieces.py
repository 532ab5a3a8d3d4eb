import random
from types import SimpleNamespace

import pygame
import pytest

from blockdrop.board import Board
from blockdrop.constants import HEIGHT, MAGENTA, WIDTH, Patterns
from blockdrop.pieces import (
    CubePattern,
    PatternI,
    PatternO,
    PatternS,
    PatternT,
    PatternZ,
    create_pattern,
    random_pattern,
)

ALL_KINDS = list(Patterns)


class _Cells:
    def __init__(self, cells):
        self.pivot = (0, 0)
        self.grid_sign = "X"
        self._cells = list(cells)

    def pattern_positions(self, pivot=None, rotate=False):
        return list(self._cells)


@pytest.fixture
def board():
    return Board((800, 600))


def test_base_class_cannot_be_built():
    with pytest.raises(TypeError):
        CubePattern()


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_every_state_has_four_distinct_cells(kind):
    piece = create_pattern(kind)
    sizes = []
    for index in range(len(piece.rotations)):
        piece.rotation_index = index
        sizes.append(len(set(piece.pattern_positions())))
    assert sizes == [4] * len(piece.rotations)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_first_kick_is_no_offset(kind):
    piece = create_pattern(kind)
    firsts = [piece.kick_offsets(index)[0] for index in range(len(piece.rotations))]
    assert firsts == [(0, 0)] * len(piece.rotations)


def test_kick_offsets_wrap_around():
    piece = PatternI()
    assert piece.kick_offsets(2) == piece.kick_offsets(0)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_full_rotation_cycle_returns_to_start(kind, board):
    piece = create_pattern(kind)
    piece.pivot = (WIDTH // 2, HEIGHT // 2)
    start = sorted(piece.pattern_positions())
    results = [piece.rotate(board) for _ in range(len(piece.rotations))]
    assert results == [True] * len(piece.rotations)
    assert sorted(piece.pattern_positions()) == start
    assert piece.rotation_index == 0


def test_rotate_preview_matches_rotation(board):
    piece = PatternT()
    piece.pivot = (4, 10)
    preview = piece.pattern_positions(piece.pivot, rotate=True)
    piece.rotate(board)
    assert piece.pattern_positions() == preview


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_moves_stop_at_walls_and_floor(kind, board):
    piece = create_pattern(kind)
    while piece.move_left(board):
        pass
    assert min(x for x, _ in piece.pattern_positions()) == 0
    while piece.move_right(board):
        pass
    assert max(x for x, _ in piece.pattern_positions()) == WIDTH - 1
    while piece.move_down(board):
        pass
    assert max(y for _, y in piece.pattern_positions()) == HEIGHT - 1
    assert piece.move_down(board) is False


def test_move_blocked_by_locked_cell(board):
    piece = PatternO()
    below = [(x, y + 1) for x, y in piece.pattern_positions()]
    board.lock_piece(_Cells(below))
    pivot = piece.pivot
    assert not piece.move_down(board)
    assert piece.pivot == pivot


def test_wall_kick_from_vertical_i(board):
    piece = PatternI()
    piece.rotate(board)
    piece.pivot = (0, 10)
    assert piece.rotate(board)
    cells = piece.pattern_positions()
    assert min(x for x, _ in cells) >= 0
    assert len({y for _, y in cells}) == 1


def test_rotation_blocked_when_no_kick_fits(board):
    piece = PatternS()
    piece.pivot = (4, 10)
    own = set(piece.pattern_positions())
    others = [
        (x, y) for y in range(HEIGHT) for x in range(WIDTH) if (x, y) not in own
    ]
    board.lock_piece(_Cells(others))
    before = piece.pattern_positions()
    assert not piece.rotate(board)
    assert piece.pattern_positions() == before
    assert piece.rotation_index == 0


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_ghost_color_is_translucent(kind):
    piece = create_pattern(kind)
    assert piece.ghost_color() == (*piece.color, 100)


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_create_pattern_matches_kind(kind):
    piece = create_pattern(kind)
    assert piece.grid_sign == kind.name


def test_create_pattern_rejects_unknown():
    with pytest.raises(ValueError):
        create_pattern(len(Patterns))


def test_random_pattern_uses_rng():
    class _Fixed:
        def randrange(self, n):
            return Patterns.O.value

    assert random_pattern(_Fixed()).grid_sign == "O"


def test_random_pattern_is_reproducible():
    first = [random_pattern(random.Random(7)).grid_sign for _ in range(3)]
    second = [random_pattern(random.Random(7)).grid_sign for _ in range(3)]
    assert first == second
    assert set(first) <= {k.name for k in Patterns}


def test_lock_piece_writes_sign(board):
    piece = PatternZ()
    while piece.move_down(board):
        pass
    board.lock_piece(piece)
    for x, y in piece.pattern_positions():
        assert board.get_cell(y, x) == "Z"


def test_draw_paints_piece(board):
    surface = pygame.Surface((800, 600))
    piece = PatternT()
    piece.draw(surface, board)
    x, y = piece.pivot
    center = (int((x + 0.5) * board.block_size), int((y + 0.5) * board.block_size))
    assert tuple(surface.get_at(center))[:3] == MAGENTA


def test_draw_display_pattern_uses_display_pivot():
    surface = pygame.Surface((200, 200))
    display = SimpleNamespace(position=(0, 0), disp_pivot=(5, 3))
    piece = PatternT()
    piece.draw_display_pattern(surface, 10, display, 255)
    assert tuple(surface.get_at((55, 35)))[:3] == MAGENTA
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)