"""A titled box in the side bar showing a value or the next piece."""

import pygame

from blockdrop.constants import CYAN, WHITE, DisplaysOptions
from blockdrop.resources import get_resources

BACKGROUND = (30, 30, 30)
FONT_SIZE = 36
OUTLINE = 2


class DisplayWindow:
    """A box at a position with a title and either a text value or a piece."""

    def __init__(
        self, position, size, title="", option=DisplaysOptions.SCORE, resources=None
    ):
        resources = resources if resources is not None else get_resources()
        self._font = resources.font("main", FONT_SIZE)
        self.position = (float(position[0]), float(position[1]))
        self.size = (float(size[0]), float(size[1]))
        self.disp_pivot = (5, 3)
        self.title = title
        self.value = ""
        self.option = DisplaysOptions(option)

    @property
    def center(self):
        return (
            self.position[0] + self.size[0] / 2,
            self.position[1] + self.size[1] / 2,
        )

    def set_value(self, value):
        """Show the given value, centred in the box."""
        self.value = str(value)

    def _text(self, text, color, alpha):
        image = self._font.render(text, True, color)
        image.set_alpha(alpha)
        return image

    def draw(self, surface, alpha=255, piece=None, block_size=0.0):
        x, y = self.position
        width, height = self.size
        rect = pygame.Rect(round(x), round(y), max(1, round(width)), max(1, round(height)))

        background = pygame.Surface(rect.size, pygame.SRCALPHA)
        background.fill((*BACKGROUND, alpha))
        surface.blit(background, rect.topleft)
        pygame.draw.rect(surface, WHITE, rect.inflate(2 * OUTLINE, 2 * OUTLINE), OUTLINE)

        if self.title:
            surface.blit(self._text(self.title, WHITE, alpha), (round(x + 8), round(y + 4)))

        if self.option is DisplaysOptions.SCORE:
            if self.value:
                image = self._text(self.value, CYAN, alpha)
                cx, cy = self.center
                surface.blit(image, image.get_rect(center=(round(cx), round(cy))))
        elif piece is not None:
            piece.draw_display_pattern(surface, block_size, self, alpha)