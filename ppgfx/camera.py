"""Perspective camera that tracks view and projection matrices."""

from __future__ import annotations

import math

import numpy as np

from ppgfx.transform import look_at, normalize, perspective


class Camera:
    """A camera placed by position, up and back vectors with a perspective projection."""

    def __init__(self, fov=45.0, ratio=1.0, near=0.1, far=10.0):
        self.up = np.array([0.0, 1.0, 0.0])
        self.position = np.array([0.0, 0.0, 0.0])
        self.back = np.array([0.0, 0.0, -1.0])
        self.view_matrix = np.identity(4)
        self.projection_matrix = perspective(math.radians(fov), ratio, near, far)

    def __repr__(self) -> str:
        return f"Camera(position={self.position.tolist()}, back={self.back.tolist()})"

    def update(self):
        """Rebuild the view matrix from position, back and up vectors."""
        self.view_matrix = look_at(self.position, self.position - self.back, self.up)
        return self.view_matrix

    def cast(self, u, v):
        """Return the unit world direction through screen point (u, v) in [-1, 1]."""
        screen = np.array([u, v, 0.0, 1.0], dtype=np.float64)
        inverse_projection = np.linalg.inv(self.projection_matrix)
        inverse_view = np.linalg.inv(self.view_matrix)
        plane = inverse_view @ inverse_projection @ screen
        plane = plane / plane[3]
        direction = normalize(plane - np.append(self.position, 1.0))
        return direction[:3]