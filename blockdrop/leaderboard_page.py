"""A page listing the best scores."""

import pygame

from blockdrop.constants import BLACK, BLUE, CYAN, SCORES_FILE, WHITE, YELLOW
from blockdrop.leaderboard import load_scores
from blockdrop.page import Page
from blockdrop.resources import get_resources

TITLE = "Top 5 Scores:"
BACK_LABEL = "<< Back to Menu"
BACK_POSITION = (15, 15)
FIRST_LINE_Y = 150.0
LINE_X = 100.0
LINE_SPACING = 40.0


def _render(font, text, color, outline=BLACK, thickness=0):
    """Render one line of text with an optional outline."""
    width, height = font.size(text)
    image = pygame.Surface(
        (max(width + 2 * thickness, 1), max(height + 2 * thickness, 1)), pygame.SRCALPHA
    )
    if thickness:
        edge = font.render(text, True, outline)
        for dx in (-thickness, 0, thickness):
            for dy in (-thickness, 0, thickness):
                if dx or dy:
                    image.blit(edge, (thickness + dx, thickness + dy))
    image.blit(font.render(text, True, color), (thickness, thickness))
    return image


class LeaderboardPage(Page):
    """The top scores read from the scores file, with a back button."""

    def __init__(self, window_size, resources=None, scores_path=SCORES_FILE):
        self._resources = resources if resources is not None else get_resources()
        width, height = int(window_size[0]), int(window_size[1])
        self.scores_path = scores_path
        self.back_to_menu = False
        self.hover_back = False
        self.back_color = WHITE
        self.scores = []
        self.score_lines = []

        self._background = pygame.transform.scale(
            self._resources.texture("menu_bg_pic"), (width, height)
        )
        self._title_font = self._resources.font("main", 40)
        self._font = self._resources.font("main", 30)

        self.title_pos = ((width - self._title_font.size(TITLE)[0]) / 2, 50.0)
        self.back_rect = pygame.Rect(*BACK_POSITION, *self._font.size(BACK_LABEL))

        self.load_scores()

    def load_scores(self):
        """Re-read the scores file and rebuild the listed lines."""
        self.scores = load_scores(self.scores_path)
        self.update_score_texts()

    def update_score_texts(self):
        self.score_lines = [
            (f"{entry.name}: {entry.score}", (LINE_X, FIRST_LINE_Y + index * LINE_SPACING))
            for index, entry in enumerate(self.scores)
        ]

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.hover_back = self.back_rect.collidepoint(event.pos)
            self.back_color = YELLOW if self.hover_back else WHITE
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and self.hover_back:
                self.back_to_menu = True

    def draw(self, surface):
        surface.blit(self._background, (0, 0))
        title = _render(self._title_font, TITLE, CYAN, BLUE, 2)
        surface.blit(title, (round(self.title_pos[0]), round(self.title_pos[1])))
        surface.blit(_render(self._font, BACK_LABEL, self.back_color, BLACK, 2), BACK_POSITION)
        for text, (x, y) in self.score_lines:
            surface.blit(_render(self._font, text, WHITE, BLACK, 2), (round(x), round(y)))

    def reset(self):
        """Clear the return request and the hover highlight."""
        self.back_to_menu = False
        self.hover_back = False
        self.back_color = WHITE