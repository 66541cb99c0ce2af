"""Invisible object that keeps adding asteroids to the scene."""

from __future__ import annotations

import random

from ppgfx.asteroid import Asteroid
from ppgfx.object import SceneObject

SPAWN_INTERVAL = 0.3
SPREAD = 20.0


class Generator(SceneObject):
    """Spawns an asteroid near its position every SPAWN_INTERVAL seconds."""

    def __init__(self):
        super().__init__()
        self.time = 0.0

    def update(self, scene, dt):
        """Accumulate time and spawn an asteroid once the interval has passed."""
        self.time += dt
        if self.time > SPAWN_INTERVAL:
            asteroid = Asteroid()
            asteroid.position = self.position.copy()
            asteroid.position[0] += random.uniform(-SPREAD, SPREAD)
            scene.objects.append(asteroid)
            self.time = 0.0
        return True