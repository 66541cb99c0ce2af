"""A scene of objects with a camera, keyboard and cursor state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from ppgfx.camera import Camera


@dataclass
class Cursor:
    """Cursor position in window pixels and mouse button states."""

    x: float = 0.0
    y: float = 0.0
    left: bool = False
    right: bool = False


@dataclass(eq=False)
class Scene:
    """Holds the camera, the objects to animate, input state and the light."""

    camera: Camera | None = None
    objects: list = field(default_factory=list)
    keyboard: dict = field(default_factory=dict)
    light_direction: np.ndarray = field(
        default_factory=lambda: np.array([-1.0, -1.0, -1.0])
    )
    cursor: Cursor = field(default_factory=Cursor)

    def update(self, dt):
        """Update the camera and every object, dropping those that report False.

        Objects added during the pass are updated in the same pass.
        """
        if self.camera is not None:
            self.camera.update()
        index = 0
        while index < len(self.objects):
            if self.objects[index].update(self, dt):
                index += 1
            else:
                del self.objects[index]

    def intersect(self, position, direction):
        """Return the objects whose bounding sphere the ray meets ahead of position."""
        origin = np.asarray(position, dtype=np.float64)
        ray = np.asarray(direction, dtype=np.float64)
        a = float(np.dot(ray, ray))
        picked = []
        for obj in self.objects:
            oc = origin - obj.position
            radius = float(obj.scale[0])
            b = float(np.dot(oc, ray))
            c = float(np.dot(oc, oc)) - radius * radius
            discriminant = b * b - a * c
            if discriminant <= 0:
                continue
            e = math.sqrt(discriminant)
            if (-b - e) / a > 0 or (-b + e) / a > 0:
                picked.append(obj)
        return picked