"""A page describing the game and its controls."""

import pygame

from blockdrop.constants import BLACK, CYAN, WHITE, YELLOW
from blockdrop.page import Page
from blockdrop.resources import get_resources

TITLE = "About This Game:"
DESCRIPTION = (
    "This is a falling-blocks puzzle game.\n"
    "Made with Python and pygame.\n"
    "For learning and fun!\n\n"
    "Keys:\n"
    "Left key: Moving left.\n"
    "Right key: Moving right.\n"
    "Down key: Moving down faster.\n"
    "Up key: For rotating piece.\n\n"
    "The rules you already know :)\n"
    "Enjoy!"
)
BACK_LABEL = "<< Back to Menu"
BACK_POSITION = (15, 15)
BACK_SCALE = 1.05


def _render(font, text, color, outline=BLACK, thickness=0):
    """Render possibly multi-line text with an optional outline."""
    lines = text.split("\n")
    line_height = font.get_linesize()
    width = max(font.size(line)[0] for line in lines) + 2 * thickness
    height = line_height * len(lines) + 2 * thickness
    image = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)
    for index, line in enumerate(lines):
        y = thickness + index * line_height
        if thickness:
            edge = font.render(line, True, outline)
            for dx in (-thickness, 0, thickness):
                for dy in (-thickness, 0, thickness):
                    if dx or dy:
                        image.blit(edge, (thickness + dx, y + dy))
        image.blit(font.render(line, True, color), (thickness, y))
    return image


class AboutPage(Page):
    """Static text with a back button that returns to the menu."""

    def __init__(self, window_size, resources=None):
        self._resources = resources if resources is not None else get_resources()
        width, height = int(window_size[0]), int(window_size[1])
        self.back_to_menu = False
        self.hover_back = False
        self.back_color = WHITE

        self._background = pygame.transform.scale(
            self._resources.texture("about_bg_pic"), (width, height)
        )
        self._title_font = self._resources.font("main", 40)
        self._text_font = self._resources.font("main", 24)
        self._back_font = self._resources.font("main", 30)

        x = (width - self._title_font.size(TITLE)[0]) / 2
        self.title_pos = (x, 100.0)
        self.description_pos = (x, 200.0)

        back_width, back_height = self._back_font.size(BACK_LABEL)
        self.back_rect = pygame.Rect(
            *BACK_POSITION, round(back_width * BACK_SCALE), round(back_height * BACK_SCALE)
        )

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.hover_back = self.back_rect.collidepoint(event.pos)
            self.back_color = YELLOW if self.hover_back else WHITE
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._resources.sound("mouse_click").play()
            if event.button == 1 and self.hover_back:
                self.back_to_menu = True

    def draw(self, surface):
        surface.blit(self._background, (0, 0))
        title = _render(self._title_font, TITLE, CYAN, BLACK, 2)
        surface.blit(title, (round(self.title_pos[0]), round(self.title_pos[1])))
        text = _render(self._text_font, DESCRIPTION, WHITE, BLACK, 1)
        surface.blit(text, (round(self.description_pos[0]), round(self.description_pos[1])))
        back = _render(self._back_font, BACK_LABEL, self.back_color, BLACK, 2)
        back = pygame.transform.scale(back, self.back_rect.size)
        surface.blit(back, self.back_rect.topleft)

    def reset(self):
        """Clear the return request and the hover highlight."""
        self.back_to_menu = False
        self.hover_back = False
        self.back_color = WHITE