"""The playing field: a grid of locked cells."""

import sys

import pygame

from blockdrop.constants import (
    BLACK,
    EMPTY_CELL,
    HEIGHT,
    PIECE_COLORS,
    UI_WIDTH,
    WIDTH,
)


def _draw_block(surface, x, y, size, color, alpha, outline=(0, 0, 0, 255)):
    side = max(1, round(size))
    block = pygame.Surface((side, side), pygame.SRCALPHA)
    block.fill((*color[:3], alpha))
    pygame.draw.rect(block, outline, block.get_rect(), 1)
    surface.blit(block, (round(x), round(y)))


class Board:
    """A WIDTH x HEIGHT grid; each cell holds a piece letter or EMPTY_CELL."""

    def __init__(self, window_size):
        self._grid = [[EMPTY_CELL] * WIDTH for _ in range(HEIGHT)]
        self.block_size = 0.0
        self.offset = (0.0, 0.0)
        self.update_block_size(window_size)

    def __str__(self):
        return "\n".join("".join(row) for row in self._grid)

    def draw(self, surface, alpha=255):
        """Draw every filled cell onto the surface with the given opacity."""
        ox, oy = self.offset
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                if cell == EMPTY_CELL:
                    continue
                color = PIECE_COLORS.get(cell, BLACK)
                _draw_block(
                    surface,
                    ox + x * self.block_size,
                    oy + y * self.block_size,
                    self.block_size,
                    color,
                    alpha,
                )

    def lock_piece(self, piece):
        """Write the piece into the grid and return the set of rows it touched."""
        affected = set()
        for col, row in piece.pattern_positions(piece.pivot):
            if 0 <= row < HEIGHT and 0 <= col < WIDTH:
                self._grid[row][col] = piece.grid_sign
                affected.add(row)
        return affected

    def check_collision(self, positions):
        """True if any (x, y) position is off the sides/bottom or on a filled cell.

        Rows above the top edge are allowed so pieces can spawn and rotate there.
        """
        for col, row in positions:
            if col < 0 or col >= WIDTH or row >= HEIGHT:
                return True
            if row >= 0 and self._grid[row][col] != EMPTY_CELL:
                return True
        return False

    def get_cell(self, row, col):
        if not (0 <= row < HEIGHT and 0 <= col < WIDTH):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return self._grid[row][col]

    def update_block_size(self, window_size):
        """Fit the blocks to the window, leaving UI_WIDTH pixels on the right."""
        width, height = window_size
        board_width = width - UI_WIDTH
        self.block_size = min(board_width / WIDTH, height / HEIGHT)
        self.offset = (0.0, 0.0)

    def find_full_lines(self, rows_to_check):
        return {
            row
            for row in rows_to_check
            if all(cell != EMPTY_CELL for cell in self._grid[row])
        }

    def collapse_lines(self, cleared_rows):
        """Move the rows above each cleared row down to close the gaps."""
        if not cleared_rows:
            return
        shift = 0
        for row in range(HEIGHT - 1, -1, -1):
            if row in cleared_rows:
                shift += 1
            elif shift:
                self._grid[row + shift] = self._grid[row]
                self._grid[row] = [EMPTY_CELL] * WIDTH

    def clear_lines_from_grid(self, full_lines):
        for row in full_lines:
            self._grid[row] = [EMPTY_CELL] * WIDTH

    def clear(self):
        for row in range(HEIGHT):
            self._grid[row] = [EMPTY_CELL] * WIDTH

    def debug_print(self):
        """Write the grid and a separator line to stdout and return that text."""
        text = f"{self}\n{'=' * 22}\n"
        sys.stdout.write(text)
        return text