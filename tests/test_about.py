import pygame
import pytest

from blockdrop.about import AboutPage
from blockdrop.constants import WHITE, YELLOW
from blockdrop.resources import ResourceManager

WINDOW = (800, 600)
BG_COLOR = (40, 50, 60)


class RecordingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1

    def stop(self):
        pass


@pytest.fixture
def resources():
    manager = ResourceManager()
    manager.load_font("main", None)
    background = pygame.Surface((20, 20))
    background.fill(BG_COLOR)
    manager.add_texture("about_bg_pic", background)
    manager.add_sound("mouse_click", RecordingSound())
    return manager


@pytest.fixture
def page(resources):
    return AboutPage(WINDOW, resources)


def _move(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos)


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def test_starts_without_return_request(page):
    assert page.back_to_menu is False
    assert page.hover_back is False
    assert page.back_color == WHITE


def test_description_aligned_with_title(page):
    assert page.description_pos[0] == page.title_pos[0]
    assert page.description_pos[1] > page.title_pos[1]


def test_hover_highlights_back(page):
    page.handle_event(_move(page.back_rect.center))
    assert page.hover_back is True
    assert page.back_color == YELLOW
    page.handle_event(_move((WINDOW[0] - 1, WINDOW[1] - 1)))
    assert page.hover_back is False
    assert page.back_color == WHITE


def test_click_on_hovered_back_returns(page, resources):
    page.handle_event(_move(page.back_rect.center))
    page.handle_event(_click(page.back_rect.center))
    assert page.back_to_menu is True
    assert resources.sound("mouse_click").plays == 1


def test_click_without_hover_stays(page, resources):
    page.handle_event(_click(page.back_rect.center))
    assert page.back_to_menu is False
    assert resources.sound("mouse_click").plays == 1


def test_right_click_does_not_return(page):
    page.handle_event(_move(page.back_rect.center))
    page.handle_event(_click(page.back_rect.center, button=3))
    assert page.back_to_menu is False


def test_reset(page):
    page.handle_event(_move(page.back_rect.center))
    page.handle_event(_click(page.back_rect.center))
    page.reset()
    assert page.back_to_menu is False
    assert page.hover_back is False
    assert page.back_color == WHITE


def test_draw_fills_background(page):
    surface = pygame.Surface(WINDOW)
    page.draw(surface)
    assert tuple(surface.get_at((WINDOW[0] - 1, WINDOW[1] - 1)))[:3] == BG_COLOR