"""Short-lived expanding explosion."""

from __future__ import annotations

import math

import numpy as np

from ppgfx.object import SceneObject, _ball_rand


class Explosion(SceneObject):
    """A spinning, growing, fading blast that lasts max_age seconds."""

    def __init__(self):
        super().__init__()
        self.age = 0.0
        self.max_age = 0.2
        self.rotation = _ball_rand(math.pi) * 3.0
        self.rot_momentum = _ball_rand(math.pi) * 3.0
        self.speed = np.array([0.0, 0.0, 0.0])

    @property
    def transparency(self) -> float:
        """Opacity falling from 1 at birth to 0 at max_age."""
        return 1.0 - self.age / self.max_age

    def update(self, scene, dt):
        """Grow, spin and drift; return False once older than max_age."""
        self.scale = self.scale * (1.0 + dt * 5.0)
        self.rotation = self.rotation + self.rot_momentum * dt
        self.position = self.position + self.speed * dt
        self.age += dt
        if self.age > self.max_age:
            return False
        self.generate_model_matrix()
        return True