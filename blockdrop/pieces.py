"""The falling tetromino shapes and their movement and rotation rules."""

import random

import pygame

from blockdrop.constants import (
    BLUE,
    CYAN,
    GREEN,
    MAGENTA,
    RED,
    WHITE,
    WIDTH,
    YELLOW,
    Patterns,
)

GHOST_ALPHA = 100


def _draw_block(surface, x, y, size, color, alpha, outline=(0, 0, 0, 255)):
    side = max(1, round(size))
    block = pygame.Surface((side, side), pygame.SRCALPHA)
    block.fill((*color[:3], alpha))
    pygame.draw.rect(block, outline, block.get_rect(), 1)
    surface.blit(block, (round(x), round(y)))


class CubePattern:
    """A piece: a pivot on the grid plus cell offsets for each rotation state.

    Subclasses set grid_sign, color, rotations and kicks.
    """

    grid_sign = ""
    color = BLACK = (0, 0, 0)
    spawn_pivot = (WIDTH // 2 - 1, 0)
    rotations = ()
    kicks = ()

    def __init__(self):
        if not self.rotations:
            raise TypeError("CubePattern needs a concrete shape")
        self.pivot = self.spawn_pivot
        self.rotation_index = 0

    def __repr__(self):
        return f"{type(self).__name__}(pivot={self.pivot}, rotation={self.rotation_index})"

    def _shift(self, board, dx, dy):
        target = (self.pivot[0] + dx, self.pivot[1] + dy)
        if board.check_collision(self.pattern_positions(target)):
            return False
        self.pivot = target
        return True

    def move_left(self, board):
        return self._shift(board, -1, 0)

    def move_right(self, board):
        return self._shift(board, 1, 0)

    def move_down(self, board):
        return self._shift(board, 0, 1)

    def kick_offsets(self, rotation_index):
        """Pivot offsets tried, in order, when rotating out of this state."""
        return self.kicks[rotation_index % len(self.kicks)]

    def pattern_positions(self, pivot=None, rotate=False):
        """Absolute (x, y) cells for the given pivot, in the next state if rotate."""
        px, py = self.pivot if pivot is None else pivot
        index = self.rotation_index
        if rotate:
            index = (index + 1) % len(self.rotations)
        return [(px + dx, py + dy) for dx, dy in self.rotations[index]]

    def rotate(self, board):
        """Rotate clockwise using the first kick that fits; return whether it did."""
        next_rotation = (self.rotation_index + 1) % len(self.rotations)
        for kx, ky in self.kick_offsets(self.rotation_index):
            test_pivot = (self.pivot[0] + kx, self.pivot[1] + ky)
            if not board.check_collision(self.pattern_positions(test_pivot, rotate=True)):
                self.pivot = test_pivot
                self.rotation_index = next_rotation
                return True
        return False

    def ghost_color(self):
        return (*self.color[:3], GHOST_ALPHA)

    def draw(self, surface, board, alpha=255):
        ox, oy = board.offset
        size = board.block_size
        for x, y in self.pattern_positions():
            _draw_block(surface, ox + x * size, oy + y * size, size, self.color, alpha)

    def draw_ghost(self, surface, board, ghost_pivot):
        ox, oy = board.offset
        size = board.block_size
        for x, y in self.pattern_positions(ghost_pivot):
            _draw_block(
                surface,
                ox + x * size,
                oy + y * size,
                size,
                self.color,
                GHOST_ALPHA,
                outline=(255, 255, 255, 50),
            )

    def draw_display_pattern(self, surface, block_size, display, alpha=255):
        """Draw the piece inside a display box, around the box's own pivot."""
        dpx, dpy = display.disp_pivot
        ox, oy = display.position
        for dx, dy in self.rotations[self.rotation_index]:
            x, y = dpx + dx, dpy + dy
            _draw_block(
                surface, ox + x * block_size, oy + y * block_size, block_size, self.color, alpha
            )


class PatternI(CubePattern):
    grid_sign = "I"
    color = CYAN
    rotations = (
        ((-1, 0), (0, 0), (1, 0), (2, 0)),
        ((0, -1), (0, 0), (0, 1), (0, 2)),
    )
    kicks = (
        ((0, 0), (0, -1), (0, -2)),
        ((0, 0), (1, 0), (-1, 0), (-2, 0)),
    )


class PatternJ(CubePattern):
    grid_sign = "J"
    color = BLUE
    rotations = (
        ((-1, 0), (0, 0), (1, 0), (1, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, 1)),
        ((-1, -1), (-1, 0), (0, 0), (1, 0)),
        ((0, -1), (0, 0), (0, 1), (1, -1)),
    )
    kicks = (
        ((0, 0), (0, 1), (1, 0), (2, 0)),
        ((0, 0), (-1, 0), (0, 1), (0, 2)),
        ((0, 0), (-1, 0), (-2, 0), (0, -1)),
        ((0, 0), (1, 0), (0, -1), (0, -2)),
    )


class PatternL(CubePattern):
    grid_sign = "L"
    color = WHITE
    rotations = (
        ((-1, 0), (0, 0), (1, 0), (-1, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, -1)),
        ((-1, 0), (0, 0), (1, 0), (1, -1)),
        ((0, -1), (0, 0), (0, 1), (1, 1)),
    )
    kicks = (
        ((0, 0), (0, 1), (1, 0), (-1, 0), (0, -1)),
        ((0, 0), (-1, 0), (0, 1)),
        ((0, 0), (0, -1), (-1, 0)),
        ((0, 0), (1, 0), (0, -1)),
    )


class PatternO(CubePattern):
    grid_sign = "O"
    color = YELLOW
    spawn_pivot = (WIDTH // 2 - 1, 1)
    rotations = (((0, -1), (0, 0), (1, 0), (1, -1)),)
    kicks = (((0, 0),),)


class PatternS(CubePattern):
    grid_sign = "S"
    color = GREEN
    rotations = (
        ((0, 0), (1, 0), (-1, 1), (0, 1)),
        ((0, 0), (0, -1), (1, 0), (1, 1)),
    )
    kicks = (
        ((0, 0), (0, -1), (0, 1), (0, 2)),
        ((0, 0), (1, 0), (2, 0)),
    )


class PatternT(CubePattern):
    grid_sign = "T"
    color = MAGENTA
    rotations = (
        ((-1, 0), (0, 0), (1, 0), (0, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, 0)),
        ((-1, 0), (0, 0), (1, 0), (0, -1)),
        ((0, -1), (0, 0), (0, 1), (1, 0)),
    )
    kicks = (
        ((0, 0), (0, 1)),
        ((0, 0), (-1, 0)),
        ((0, 0), (0, -1)),
        ((0, 0), (1, 0)),
    )


class PatternZ(CubePattern):
    grid_sign = "Z"
    color = RED
    rotations = (
        ((0, 0), (-1, 0), (0, 1), (1, 1)),
        ((0, 0), (0, -1), (-1, 0), (-1, 1)),
    )
    kicks = (
        ((0, 0), (1, 0), (0, 1)),
        ((0, 0), (-1, 0), (-2, 0)),
    )


_PATTERN_CLASSES = {
    Patterns.I: PatternI,
    Patterns.O: PatternO,
    Patterns.T: PatternT,
    Patterns.J: PatternJ,
    Patterns.L: PatternL,
    Patterns.S: PatternS,
    Patterns.Z: PatternZ,
}


def create_pattern(kind):
    """Return a new piece of the given Patterns kind."""
    try:
        return _PATTERN_CLASSES[Patterns(kind)]()
    except (KeyError, ValueError):
        raise ValueError(f"unknown pattern: {kind!r}") from None


def random_pattern(rng=None):
    """Return a new piece chosen uniformly at random."""
    rng = rng if rng is not None else random
    return create_pattern(Patterns(rng.randrange(len(Patterns))))