"""A short random screen shake, used when lines are cleared."""

import random


class ShakeManager:
    """Produces a random offset of up to the given strength for a while."""

    def __init__(self, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self.duration = 0.0
        self.strength = 0.0
        self.elapsed = 0.0
        self.offset = (0.0, 0.0)

    def start(self, duration, strength):
        self.duration = float(duration)
        self.strength = float(strength)
        self.elapsed = 0.0

    def update(self, dt):
        """Advance by dt seconds and pick a new offset, or settle at rest."""
        if self.elapsed < self.duration:
            self.elapsed += dt
            self.offset = (
                self._rng.uniform(-1.0, 1.0) * self.strength,
                self._rng.uniform(-1.0, 1.0) * self.strength,
            )
        else:
            self.offset = (0.0, 0.0)

    def is_shaking(self):
        return self.elapsed < self.duration