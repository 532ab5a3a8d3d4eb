"""The main menu: play, about, leaderboard and exit."""

from dataclasses import dataclass

import pygame

from blockdrop.constants import BLACK, BLUE, RED, WHITE, MenuOptions
from blockdrop.page import Page
from blockdrop.resources import SoundStatus, get_resources

FONT_SIZE = 40
PADDING = 20
OUTLINE = 3

MENU_ITEMS = (
    ("Play", MenuOptions.PLAY),
    ("About", MenuOptions.ABOUT),
    ("Leaders board", MenuOptions.LEADERS_BOARD),
    ("Exit", MenuOptions.EXIT),
)


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


@dataclass
class _MenuItem:
    label: str
    choice: MenuOptions
    rect: pygame.Rect
    color: tuple = WHITE


class MenuMain(Page):
    """A vertical list of options centred on a background picture."""

    def __init__(self, window_size, resources=None):
        self._resources = resources if resources is not None else get_resources()
        self._font = self._resources.font("main", FONT_SIZE)
        width, height = int(window_size[0]), int(window_size[1])
        self.window_size = (width, height)
        self.back_to_menu = False

        self.music = self._resources.music("menu")
        self.music.looping = True
        self.music.play()

        self._background = pygame.transform.scale(
            self._resources.texture("menu_bg_pic"), self.window_size
        )

        total_height = len(MENU_ITEMS) * FONT_SIZE + (len(MENU_ITEMS) - 1) * PADDING
        start_y = (height - total_height) / 2
        self.options = []
        for index, (label, choice) in enumerate(MENU_ITEMS):
            text_width, text_height = self._font.size(label)
            x = (width - text_width) / 2
            y = start_y + index * (FONT_SIZE + PADDING)
            rect = pygame.Rect(round(x), round(y), text_width, text_height)
            self.options.append(_MenuItem(label, choice, rect))
        self.selection = MenuOptions.NONE

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            for item in self.options:
                item.color = BLUE if item.rect.collidepoint(event.pos) else WHITE
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._resources.sound("mouse_click").play()
            if event.button != 1:
                return
            for item in self.options:
                if item.rect.collidepoint(event.pos):
                    item.color = RED
                    self.selection = item.choice
                    break

    def draw(self, surface):
        surface.blit(self._background, (0, 0))
        for item in self.options:
            image = _render(self._font, item.label, item.color, BLACK, OUTLINE)
            surface.blit(image, (item.rect.x - OUTLINE, item.rect.y - OUTLINE))

    def reset_selection(self):
        """Forget the chosen option and repaint every option white."""
        self.selection = MenuOptions.NONE
        for item in self.options:
            item.color = WHITE

    def stop_music(self):
        if self.music.status is SoundStatus.PLAYING:
            self.music.stop()

    def play_music(self):
        if self.music.status in (SoundStatus.STOPPED, SoundStatus.PAUSED):
            self.music.play()