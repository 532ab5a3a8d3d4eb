import pygame
import pytest

from blockdrop.buttons import ButtonBackToMenu, ButtonPause, ButtonRetry, UIButton
from blockdrop.constants import Button, ButtonStatus
from blockdrop.resources import ResourceManager

SHEET_COLOR = (200, 0, 0)


@pytest.fixture
def resources():
    manager = ResourceManager()
    sheet = pygame.Surface((512, 512))
    sheet.fill(SHEET_COLOR)
    manager.add_texture("buttons", sheet)
    return manager


def test_base_button_is_abstract(resources):
    with pytest.raises(TypeError):
        UIButton(resources)


def test_initial_frames(resources):
    assert ButtonRetry(resources).texture_rect == (32, 32, 32, 32)
    assert ButtonBackToMenu(resources).texture_rect == (320, 0, 32, 32)
    assert ButtonPause(resources).texture_rect == (128, 256, 32, 32)


def test_retry_and_home_clicks(resources):
    assert ButtonRetry(resources).on_click() is Button.RETRY
    assert ButtonBackToMenu(resources).on_click() is Button.HOME


def test_pause_toggles(resources):
    button = ButtonPause(resources)
    assert button.on_click() is Button.PAUSE
    assert button.paused is True
    assert button.on_click() is Button.PLAY
    assert button.paused is False


def test_pause_shows_play_icon_after_update(resources):
    button = ButtonPause(resources)
    button.on_click()
    button.update()
    assert button.texture_rect == (128, 96, 32, 32)


def test_pause_reset(resources):
    button = ButtonPause(resources)
    button.on_click()
    button.held_click = True
    button.update()
    button.reset()
    assert button.paused is False
    assert button.status is ButtonStatus.NORMAL
    assert button.texture_rect == (128, 256, 32, 32)
    assert button.on_click() is Button.PAUSE


def test_held_click_sets_status(resources):
    button = ButtonRetry(resources)
    button.held_click = True
    assert button.status is ButtonStatus.CLICKED
    button.update()
    assert button.texture_rect == (64, 32, 32, 32)
    button.held_click = False
    assert button.held_click is False
    assert button.status is ButtonStatus.NORMAL


def test_reset_restores_normal_frame(resources):
    button = ButtonBackToMenu(resources)
    button.held_click = True
    button.update()
    button.reset()
    assert button.texture_rect == (320, 0, 32, 32)
    assert button.status is ButtonStatus.NORMAL


def test_place_sets_bounds(resources):
    button = ButtonRetry(resources)
    button.place((10, 20), (64, 48))
    assert button.bounds == pytest.approx((10, 20, 64, 48))


def test_is_hovered(resources):
    button = ButtonRetry(resources)
    button.place((10, 20), (64, 64))
    assert button.is_hovered((10, 20))
    assert button.is_hovered((40, 50))
    assert not button.is_hovered((74, 50))
    assert not button.is_hovered((9, 50))


def test_is_clicked_always_true(resources):
    assert ButtonRetry(resources).is_clicked((0, 0)) is True


def test_draw_blits_frame(resources):
    button = ButtonRetry(resources)
    button.place((10, 10), (64, 64))
    surface = pygame.Surface((100, 100))
    button.draw(surface)
    assert surface.get_at((40, 40))[:3] == SHEET_COLOR
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)


def test_draw_transparent(resources):
    button = ButtonRetry(resources)
    button.place((10, 10), (64, 64))
    surface = pygame.Surface((100, 100))
    button.draw(surface, alpha=0)
    assert surface.get_at((40, 40))[:3] == (0, 0, 0)