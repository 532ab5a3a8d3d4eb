"""Timers driven by a monotonic clock: one-shot delays and falling gravity."""

import logging
import time

log = logging.getLogger(__name__)

MIN_GRAVITY_DELAY = 0.1
DEFAULT_SPEED_UP = 0.95


class DelayTimer:
    """A one-shot countdown that reports when its duration has passed."""

    def __init__(self, clock=None):
        self._clock = clock if clock is not None else time.monotonic
        self._started = self._clock()
        self.duration = 0.0
        self._active = False

    def start(self, seconds):
        """Begin counting down the given number of seconds."""
        self.duration = float(seconds)
        self._started = self._clock()
        self._active = True

    def is_done(self):
        return self._active and self.elapsed() >= self.duration

    def is_active(self):
        return self._active

    def reset(self):
        self._active = False

    def elapsed(self):
        """Seconds since the timer was created or last started."""
        return self._clock() - self._started


class GravityTimer:
    """Tells when the falling piece should drop one row."""

    def __init__(self, clock=None):
        self._clock = clock if clock is not None else time.monotonic
        self._started = self._clock()
        self.delay = 1.0

    def start(self, seconds):
        self.delay = float(seconds)
        self._started = self._clock()

    def should_fall(self):
        return self._clock() - self._started >= self.delay

    def reset(self):
        self._started = self._clock()

    def speed_up(self, factor=DEFAULT_SPEED_UP):
        """Shorten the fall delay by the factor, never below MIN_GRAVITY_DELAY."""
        self.delay = max(self.delay * factor, MIN_GRAVITY_DELAY)
        log.debug("Speed up delay: %s", self.delay)
        return self.delay