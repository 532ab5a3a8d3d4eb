"""Clickable icon buttons of the side bar, cut from one sprite sheet."""

import math
from abc import ABC, abstractmethod

import pygame

from blockdrop.constants import Button, ButtonStatus
from blockdrop.resources import get_resources

_TILE = 32


def _frame(col, row):
    return (col * _TILE, row * _TILE, _TILE, _TILE)


PAUSE_FRAMES = (_frame(4, 8), _frame(5, 8))
PLAY_FRAMES = (_frame(4, 3), _frame(5, 3))
RETRY_FRAMES = ((32, 32, 32, 32), (64, 32, 32, 32))
HOME_FRAMES = ((320, 0, 32, 32), (352, 0, 32, 32))


def _crop(texture, rect):
    clipped = pygame.Rect(rect).clip(texture.get_rect())
    if clipped.width == 0 or clipped.height == 0:
        return None
    return texture.subsurface(clipped)


class UIButton(ABC):
    """A button with one sprite-sheet frame per ButtonStatus.

    Subclasses give the frames and decide what a click means.
    """

    frames = ()

    def __init__(self, resources=None):
        resources = resources if resources is not None else get_resources()
        self._texture = resources.texture("buttons")
        self.status = ButtonStatus.NORMAL
        self._held_click = False
        self.position = (0.0, 0.0)
        self.scale = (1.0, 1.0)
        self.texture_rect = self.frames[ButtonStatus.NORMAL]

    @property
    def held_click(self):
        """True between a press on the button and the release that follows."""
        return self._held_click

    @held_click.setter
    def held_click(self, clicked):
        self._held_click = bool(clicked)
        self.status = ButtonStatus.CLICKED if clicked else ButtonStatus.NORMAL

    @property
    def bounds(self):
        """The (x, y, width, height) area the button covers on screen."""
        x, y = self.position
        sx, sy = self.scale
        return (x, y, self.texture_rect[2] * sx, self.texture_rect[3] * sy)

    def draw(self, surface, alpha=255):
        frame = _crop(self._texture, self.texture_rect)
        if frame is None:
            return
        x, y, width, height = self.bounds
        image = pygame.transform.scale(frame, (max(1, round(width)), max(1, round(height))))
        image.set_alpha(alpha)
        surface.blit(image, (round(x), round(y)))

    def update(self):
        """Show the frame that matches the current status."""
        self.texture_rect = self.frames[self.status]

    def is_clicked(self, mouse_pos):
        """Any click at a real screen position counts as a click on the button."""
        mx, my = mouse_pos
        return math.isfinite(mx) and math.isfinite(my)

    @abstractmethod
    def on_click(self):
        """Act on a completed click and return the Button it stands for."""

    @abstractmethod
    def reset(self):
        """Return to the initial look and state."""

    def is_hovered(self, mouse_pos):
        x, y, width, height = self.bounds
        mx, my = mouse_pos
        return x <= mx < x + width and y <= my < y + height

    def place(self, pos, size):
        """Move the button to pos and scale it to the given (width, height)."""
        self.scale = (size[0] / self.texture_rect[2], size[1] / self.texture_rect[3])
        self.position = (float(pos[0]), float(pos[1]))


class ButtonPause(UIButton):
    """Toggles between pausing and resuming; its icon follows the state."""

    frames = PAUSE_FRAMES

    def __init__(self, resources=None):
        super().__init__(resources)
        self.paused = False

    def on_click(self):
        self.frames = PAUSE_FRAMES if self.paused else PLAY_FRAMES
        self.paused = not self.paused
        return Button.PAUSE if self.paused else Button.PLAY

    def reset(self):
        self.frames = PAUSE_FRAMES
        self.status = ButtonStatus.NORMAL
        self.texture_rect = self.frames[ButtonStatus.NORMAL]
        self.paused = False


class ButtonRetry(UIButton):
    frames = RETRY_FRAMES

    def on_click(self):
        return Button.RETRY

    def reset(self):
        self.status = ButtonStatus.NORMAL
        self.texture_rect = self.frames[ButtonStatus.NORMAL]


class ButtonBackToMenu(UIButton):
    frames = HOME_FRAMES

    def on_click(self):
        return Button.HOME

    def reset(self):
        self.status = ButtonStatus.NORMAL
        self.texture_rect = self.frames[ButtonStatus.NORMAL]