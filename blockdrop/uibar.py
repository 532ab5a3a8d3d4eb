"""The side bar next to the board: score, next piece and control buttons."""

import pygame

from blockdrop.buttons import ButtonBackToMenu, ButtonPause, ButtonRetry
from blockdrop.constants import WIDTH, Button, DisplaysOptions
from blockdrop.display_window import DisplayWindow
from blockdrop.resources import get_resources

SPACE = 10.0
TILE_RECT = (0, 0, 128, 128)


class UIBar:
    """Everything drawn to the right of the board."""

    def __init__(self, window_size, block_size, board_offset, resources=None):
        resources = resources if resources is not None else get_resources()
        self.block_size = float(block_size)
        self.offset = (block_size * WIDTH + board_offset[0], float(board_offset[1]))
        self.next_piece = None

        texture = resources.texture("ui_bar_bg")
        clipped = pygame.Rect(TILE_RECT).clip(texture.get_rect())
        side = max(1, round(block_size))
        self._tile = pygame.transform.scale(texture.subsurface(clipped), (side, side))

        display_size = block_size * 6.0
        bar_width = window_size[0] - self.offset[0]
        centre_x = self.offset[0] + (bar_width - 2 * display_size) / 2
        box = (2 * display_size, display_size)
        self.displays = [
            DisplayWindow(
                (centre_x, self.offset[1] + SPACE),
                box,
                "Score:",
                DisplaysOptions.SCORE,
                resources,
            ),
            DisplayWindow(
                (centre_x, self.offset[1] + 2 * SPACE + display_size),
                box,
                "Next:",
                DisplaysOptions.NEXT_PATTERN,
                resources,
            ),
        ]
        self.buttons = [
            ButtonPause(resources),
            ButtonBackToMenu(resources),
            ButtonRetry(resources),
        ]
        self._position_buttons(window_size, SPACE)

    def _position_buttons(self, window_size, space):
        """Spread the buttons evenly along the bottom of the bar."""
        if not self.buttons:
            return
        side = 2 * self.block_size
        count = len(self.buttons)
        available = window_size[0] - self.offset[0]
        spacing = (available - count * side) / (count + 1)
        y = window_size[1] - side
        x = self.offset[0] + spacing
        for button in self.buttons:
            button.place((x, y - space), (side, side))
            x += side + spacing

    def update_score(self, score):
        self.displays[DisplaysOptions.SCORE].set_value(str(score))

    def update_next_piece(self, piece):
        self.next_piece = piece

    def _draw_background(self, surface, alpha):
        self._tile.set_alpha(alpha)
        width, height = surface.get_size()
        ox, oy = self.offset
        cols = int((width - int(ox)) / self.block_size)
        rows = int((height - int(oy)) / self.block_size)
        for row in range(rows + 1):
            for col in range(cols + 1):
                surface.blit(
                    self._tile,
                    (round(ox + col * self.block_size), round(oy + row * self.block_size)),
                )

    def draw(self, surface, alpha=255):
        self._draw_background(surface, alpha)
        for display in self.displays:
            display.draw(surface, alpha, self.next_piece, self.block_size)
        for button in self.buttons:
            button.draw(surface, alpha)

    def mouse_button_click(self, mouse_pos):
        """Mark every button under the pressed mouse as held."""
        for button in self.buttons:
            if not button.held_click and button.is_hovered(mouse_pos):
                button.held_click = True

    def mouse_button_handle(self):
        """On release, fire the first held button and return what it stands for."""
        for button in self.buttons:
            if button.held_click:
                button.held_click = False
                return button.on_click()
        return Button.NONE

    def update(self):
        for button in self.buttons:
            button.update()

    def reset_buttons(self):
        for button in self.buttons:
            button.reset()