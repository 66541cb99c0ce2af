"""Player ship steered by the keyboard that fires projectiles."""

from __future__ import annotations

import math

import numpy as np

from ppgfx.asteroid import Asteroid
from ppgfx.explosion import Explosion
from ppgfx.object import SceneObject
from ppgfx.projectile import Projectile

# Keyboard codes shared with the window layer.
_KEY_SPACE = 32
_KEY_RIGHT = 262
_KEY_LEFT = 263

MOVE_SPEED = 10.0
TILT = math.pi / 4.0
MUZZLE = np.array([0.0, 0.0, 0.3])


class Player(SceneObject):
    """The ship: moves sideways on arrow keys, fires on space, dies on impact."""

    def __init__(self):
        super().__init__()
        self.scale = self.scale * 3.0
        self.fire_delay = 0.0
        self.fire_rate = 0.1
        self.fire_offset = np.array([0.7, 0.0, 0.0])

    def update(self, scene, dt):
        """Handle collisions, movement and firing; return False when destroyed."""
        self.fire_delay += dt

        for obj in scene.objects:
            if obj is self or not isinstance(obj, Asteroid):
                continue
            if float(np.linalg.norm(self.position - obj.position)) < obj.scale[1]:
                explosion = Explosion()
                explosion.position = self.position.copy()
                explosion.scale = self.scale * 3.0
                scene.objects.append(explosion)
                return False

        keyboard = scene.keyboard
        if keyboard.get(_KEY_LEFT, 0):
            self.position[0] += MOVE_SPEED * dt
            self.rotation[2] = -TILT
        elif keyboard.get(_KEY_RIGHT, 0):
            self.position[0] -= MOVE_SPEED * dt
            self.rotation[2] = TILT
        else:
            self.rotation[2] = 0.0

        if keyboard.get(_KEY_SPACE, 0) and self.fire_delay > self.fire_rate:
            self.fire_delay = 0.0
            self.fire_offset = -self.fire_offset
            projectile = Projectile()
            projectile.position = self.position + MUZZLE + self.fire_offset
            scene.objects.append(projectile)

        self.generate_model_matrix()
        return True

    def on_click(self, scene):
        """Report that the player was picked."""
        print("Player has been clicked!")