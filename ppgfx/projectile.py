"""Rocket projectile that accelerates upwards and expires."""

from __future__ import annotations

import math
import random

import numpy as np

from ppgfx.object import SceneObject

LIFETIME = 5.0
ACCELERATION = np.array([0.0, 20.0, 0.0])


class Projectile(SceneObject):
    """A spinning rocket that speeds up along Y and dies after five seconds."""

    def __init__(self):
        super().__init__()
        self.age = 0.0
        self.speed = np.array([0.0, 3.0, 0.0])
        self.rot_momentum = np.array(
            [0.0, 0.0, random.uniform(-math.pi / 4.0, math.pi / 4.0)]
        )

    def update(self, scene, dt):
        """Accelerate, spin and move; return False once older than its lifetime."""
        self.age += dt
        self.speed = self.speed + ACCELERATION * dt
        self.rotation = self.rotation + self.rot_momentum * dt
        self.position = self.position + self.speed * dt
        if self.age > LIFETIME:
            return False
        self.generate_model_matrix()
        return True

    def destroy(self):
        """Mark the projectile so that its next update removes it."""
        self.age = 100.0