"""Board animations: exploding cleared lines and the fast-drop fire trail."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import pygame

from blockdrop.constants import WIDTH
from blockdrop.resources import get_resources

EXPLOSION_FRAMES = (
    (35, 35, 62, 62),
    (155, 31, 74, 70),
    (275, 23, 94, 84),
    (0, 147, 128, 100),
    (128, 147, 128, 100),
    (256, 147, 128, 100),
    (0, 282, 128, 100),
)

FIRE_FRAMES = (
    (27, 22, 55, 62),
    (157, 22, 55, 62),
    (27, 130, 55, 62),
    (157, 130, 55, 62),
    (27, 259, 55, 62),
)


def _crop(texture, rect):
    clipped = pygame.Rect(rect).clip(texture.get_rect())
    if clipped.width == 0 or clipped.height == 0:
        return None
    return texture.subsurface(clipped)


class Animation(ABC):
    """Something drawn over the board that runs for a while."""

    @abstractmethod
    def update(self, dt):
        """Advance by dt seconds."""

    @abstractmethod
    def draw(self, surface, block_size, board_offset):
        """Draw the current frame."""

    @abstractmethod
    def is_finished(self):
        """True once there is nothing left to show."""


@dataclass
class ExplosionBlock:
    frame: int = 0
    active: bool = False


class LineClearAnimation(Animation):
    """Cells of cleared rows ignite column by column, then explode together."""

    BASE_ACTIVATION_DELAY = 0.2
    ACCELERATION = 0.85

    def __init__(self, resources=None):
        self._resources = resources if resources is not None else get_resources()
        self._texture = self._resources.texture("block_explosion")
        self.blocks = {}
        self.frame_duration = 0.5
        self._elapsed = 0.0
        self._activate_column = 0
        self._before_explosion_played = False

    def start(self, rows_to_clear):
        """Prepare every cell of the given rows to explode."""
        self.blocks = {
            (row, col): ExplosionBlock() for row in sorted(rows_to_clear) for col in range(WIDTH)
        }
        self._activate_column = 0
        self._elapsed = 0.0

    def update(self, dt):
        if not self.blocks:
            return
        self._elapsed += dt
        # Each column ignites a little sooner than the one before it.
        self.frame_duration = self.BASE_ACTIVATION_DELAY * self.ACCELERATION**self._activate_column
        if self._elapsed < self.frame_duration:
            return
        self._elapsed -= self.frame_duration

        if self._activate_column < WIDTH:
            if not self._before_explosion_played:
                self._before_explosion_played = True
                self._resources.sound("before_explosion").play()
            for (_, col), block in self.blocks.items():
                if col == self._activate_column:
                    block.active = True
            self._activate_column += 1
            return

        if self._before_explosion_played:
            self._before_explosion_played = False
            self._resources.sound("before_explosion").stop()
            self._resources.sound("explosion_sound").play()
        for block in self.blocks.values():
            if block.active:
                block.frame += 1
        if all(block.frame >= len(EXPLOSION_FRAMES) for block in self.blocks.values()):
            self.blocks.clear()

    def draw(self, surface, block_size, board_offset):
        ox, oy = board_offset
        side = max(1, round(block_size))
        for (row, col), block in self.blocks.items():
            if not block.active or block.frame >= len(EXPLOSION_FRAMES):
                continue
            frame = _crop(self._texture, EXPLOSION_FRAMES[block.frame])
            if frame is None:
                continue
            image = pygame.transform.scale(frame, (side, side))
            surface.blit(image, (round(ox + col * block_size), round(oy + row * block_size)))

    def is_finished(self):
        return not self.blocks


class FireTrailAnimation(Animation):
    """Flames under a piece while it is being dropped fast."""

    FRAME_TIME = 0.09
    LAST_FRAME = 4
    LOOP_FRAME = 3
    ALPHA = 230

    def __init__(self, resources=None):
        self._resources = resources if resources is not None else get_resources()
        self._texture = self._resources.texture("fire_trail")
        self.current_frame = 0
        self.active = False
        self.world_position = (0.0, 0.0)
        self._loop_mode = False
        self._elapsed = 0.0

    def start(self, position):
        """Show the trail at a position; restarts the frames only if it was off."""
        if not self.active:
            self.current_frame = 0
            self._loop_mode = False
            self._elapsed = 0.0
        self.active = True
        self.world_position = tuple(position)

    def stop(self):
        self.active = False

    def update(self, dt):
        if not self.active:
            return
        self._elapsed += dt
        if self._elapsed < self.FRAME_TIME:
            return
        self._elapsed -= self.FRAME_TIME
        if not self._loop_mode:
            self.current_frame += 1
            if self.current_frame >= self.LAST_FRAME:
                self.current_frame = self.LAST_FRAME
                self._loop_mode = True
        else:
            self.current_frame = (
                self.LAST_FRAME if self.current_frame == self.LOOP_FRAME else self.LOOP_FRAME
            )

    def draw(self, surface, block_size, board_offset):
        if not self.active:
            return
        rect = FIRE_FRAMES[self.current_frame]
        frame = _crop(self._texture, rect)
        if frame is None:
            return
        scale = block_size / 16.0
        width, height = rect[2] * scale, rect[3] * scale
        image = pygame.transform.scale(frame, (max(1, round(width)), max(1, round(height))))
        image.set_alpha(self.ALPHA)
        wx, wy = self.world_position
        # The sprite is anchored at its centre.
        centre_x = wx + block_size * 0.5
        centre_y = wy - height + block_size
        surface.blit(image, (round(centre_x - width / 2), round(centre_y - height / 2)))

    def is_finished(self):
        return not self.active