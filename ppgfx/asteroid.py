"""Asteroid that falls through the scene and splits when hit."""

from __future__ import annotations

import math
import random

import numpy as np

from ppgfx.explosion import Explosion
from ppgfx.object import SceneObject, _ball_rand
from ppgfx.projectile import Projectile

LIFETIME = 10.0
BOTTOM = -10.0
COLLISION_GRACE = 0.5
PIECES = 3
MIN_SPLIT_SCALE = 0.5
COLLISION_FACTOR = 0.7
CLICK_EXPLOSION_SCALE = (10.0, 10.0, 10.0)


class Asteroid(SceneObject):
    """A tumbling rock moving down along Y that breaks apart on collision."""

    def __init__(self):
        super().__init__()
        self.age = 0.0
        self.scale = self.scale * random.uniform(1.0, 3.0)
        self.speed = np.array(
            [random.uniform(-2.0, 2.0), random.uniform(-10.0, -5.0), 0.0]
        )
        self.rotation = _ball_rand(math.pi)
        self.rot_momentum = _ball_rand(math.pi)

    def update(self, scene, dt):
        """Move and spin; return False when expired, off screen or destroyed."""
        self.age += dt
        self.position = self.position + self.speed * dt
        self.rotation = self.rotation + self.rot_momentum * dt

        if self.age > LIFETIME or self.position[1] < BOTTOM:
            return False

        for obj in scene.objects:
            if obj is self:
                continue
            is_asteroid = isinstance(obj, Asteroid)
            is_projectile = isinstance(obj, Projectile)
            if not (is_asteroid or is_projectile):
                continue
            # Fresh fragments would otherwise collide with their siblings at once.
            if is_asteroid and self.age < COLLISION_GRACE:
                continue

            reach = (obj.scale[1] + self.scale[1]) * COLLISION_FACTOR
            if float(np.linalg.norm(self.position - obj.position)) < reach:
                pieces = 0 if self.scale[1] < MIN_SPLIT_SCALE else PIECES
                if is_projectile:
                    obj.destroy()
                self._explode(
                    scene,
                    (obj.position + self.position) / 2.0,
                    (obj.scale + self.scale) / 2.0,
                    pieces,
                )
                return False

        self.generate_model_matrix()
        return True

    def _explode(self, scene, explosion_position, explosion_scale, pieces: int) -> None:
        explosion = Explosion()
        explosion.position = np.array(explosion_position, dtype=np.float64)
        explosion.scale = np.array(explosion_scale, dtype=np.float64)
        explosion.speed = self.speed / 2.0
        scene.objects.append(explosion)

        for _ in range(pieces):
            piece = Asteroid()
            piece.speed = self.speed + np.array(
                [random.uniform(-3.0, 3.0), random.uniform(-5.0, 0.0), 0.0]
            )
            piece.position = self.position.copy()
            piece.rot_momentum = self.rot_momentum.copy()
            piece.scale = self.scale / (pieces / 2.0)
            scene.objects.append(piece)

    def on_click(self, scene):
        """Blow up without fragments and expire on the next update."""
        print("Asteroid clicked!")
        self._explode(scene, self.position, CLICK_EXPLOSION_SCALE, 0)
        self.age = 10000.0