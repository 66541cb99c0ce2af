"""Base class of objects that live in a scene."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

import numpy as np

from ppgfx.transform import orientate4, scale, translate


def _ball_rand(radius: float) -> np.ndarray:
    """Return a uniformly random point inside a ball of the given radius."""
    while True:
        point = np.array([random.uniform(-radius, radius) for _ in range(3)])
        if float(np.dot(point, point)) <= radius * radius:
            return point


class SceneObject(ABC):
    """An object with position, rotation and scale that updates itself each frame."""

    def __init__(self):
        self.position = np.array([0.0, 0.0, 0.0])
        self.rotation = np.array([0.0, 0.0, 0.0])
        self.scale = np.array([1.0, 1.0, 1.0])
        self.model_matrix = np.identity(4)

    @abstractmethod
    def update(self, scene, dt):
        """Advance the object by dt seconds; return False to remove it from the scene."""

    def on_click(self, scene):
        """React to being picked by the cursor; objects ignore clicks by default."""

    def generate_model_matrix(self):
        """Rebuild the model matrix from position, rotation and scale."""
        self.model_matrix = (
            translate(self.position) @ orientate4(self.rotation) @ scale(self.scale)
        )
        return self.model_matrix