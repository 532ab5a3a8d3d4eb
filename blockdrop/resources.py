"""Named fonts, music, sounds and textures loaded once and shared."""

import functools
import logging
import os
from enum import Enum

import pygame

log = logging.getLogger(__name__)


class ResourceError(RuntimeError):
    """A resource could not be loaded or was never registered."""


class SoundStatus(Enum):
    STOPPED = 0
    PAUSED = 1
    PLAYING = 2


def _mixer_ready():
    return pygame.mixer.get_init() is not None


class Music:
    """A streamed track; only one track plays through the mixer at a time."""

    _owner = None

    def __init__(self, path):
        if not os.path.isfile(path):
            raise ResourceError(f"Cannot load music: {path}")
        self.path = os.fspath(path)
        self.status = SoundStatus.STOPPED
        self.looping = False
        self.volume = 100.0

    def play(self):
        """Start, resume or restart the track."""
        if _mixer_ready():
            try:
                if self.status is SoundStatus.PAUSED and Music._owner is self:
                    pygame.mixer.music.unpause()
                else:
                    pygame.mixer.music.load(self.path)
                    pygame.mixer.music.set_volume(self.volume / 100.0)
                    pygame.mixer.music.play(loops=-1 if self.looping else 0)
            except pygame.error as exc:
                log.warning("Cannot play music %s: %s", self.path, exc)
        previous = Music._owner
        if previous is not None and previous is not self:
            previous.status = SoundStatus.STOPPED
        Music._owner = self
        self.status = SoundStatus.PLAYING

    def pause(self):
        if self.status is not SoundStatus.PLAYING:
            return
        if Music._owner is self and _mixer_ready():
            pygame.mixer.music.pause()
        self.status = SoundStatus.PAUSED

    def stop(self):
        if Music._owner is self and _mixer_ready():
            pygame.mixer.music.stop()
        self.status = SoundStatus.STOPPED

    def set_volume(self, volume):
        """Set the volume on a 0-100 scale."""
        self.volume = max(0.0, min(100.0, float(volume)))
        if Music._owner is self and _mixer_ready():
            pygame.mixer.music.set_volume(self.volume / 100.0)


class SilentSound:
    """Stands in for a sound effect when no audio device is available.

    It keeps track of whether it would be playing and how often it was started.
    """

    def __init__(self):
        self.playing = False
        self.play_count = 0

    def play(self, *args, **kwargs):
        self.playing = True
        self.play_count += 1
        return self

    def stop(self):
        was_playing = self.playing
        self.playing = False
        return was_playing


class ResourceManager:
    """Registry of game assets, each looked up by name."""

    def __init__(self):
        self._font_paths = {}
        self._fonts = {}
        self._music = {}
        self._sounds = {}
        self._textures = {}

    def load_font(self, name, path):
        """Register a font file; None selects pygame's default font."""
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            pygame.font.Font(path, 12)
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"Cannot load font: {path}") from exc
        self._font_paths[name] = path
        self._fonts = {key: f for key, f in self._fonts.items() if key[0] != name}

    def font(self, name, size):
        """Return the named font at the given pixel size."""
        key = (name, int(size))
        if key not in self._fonts:
            if name not in self._font_paths:
                raise ResourceError(f"Font not found: {name}")
            self._fonts[key] = pygame.font.Font(self._font_paths[name], int(size))
        return self._fonts[key]

    def load_music(self, name, path):
        self._music[name] = Music(path)

    def music(self, name):
        try:
            return self._music[name]
        except KeyError:
            raise ResourceError(f"Music not found: {name}") from None

    def load_sound(self, name, path):
        if not os.path.isfile(path):
            raise ResourceError(f"Cannot load sound file: {path}")
        if _mixer_ready():
            try:
                sound = pygame.mixer.Sound(path)
            except pygame.error as exc:
                raise ResourceError(f"Cannot load sound file: {path}") from exc
        else:
            sound = SilentSound()
        self._sounds[name] = sound

    def add_sound(self, name, sound):
        """Register an already built sound object under a name."""
        self._sounds[name] = sound

    def sound(self, name):
        try:
            return self._sounds[name]
        except KeyError:
            raise ResourceError(f"Sound not found: {name}") from None

    def load_texture(self, name, path):
        try:
            image = pygame.image.load(os.fspath(path))
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"Cannot load texture: {path}") from exc
        self._textures[name] = image

    def add_texture(self, name, texture):
        """Register an already built surface under a name."""
        self._textures[name] = texture

    def texture(self, name):
        try:
            return self._textures[name]
        except KeyError:
            raise ResourceError(f"Texture not found: {name}") from None


@functools.lru_cache(maxsize=None)
def get_resources():
    """The shared manager used by the game."""
    return ResourceManager()