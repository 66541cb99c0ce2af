"""Animated 2D letter shapes and a 3D origin of axes with an orbiting cube."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from ppgfx import transform

ORBIT_RADIUS = 0.7
SCALE_MIN = 0.03
SCALE_MAX = 10.0

_Z_AXIS = (0.0, 0.0, 1.0)


def _vec3(values) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(3)


@dataclass(eq=False)
class Shape:
    """The letter X built from two parallelograms, placed by a model matrix."""

    VERTICES: ClassVar[tuple] = (
        (-0.5, 0.5, 0.0), (-0.2, 0.5, 0.0), (0.5, -0.5, 0.0), (0.2, -0.5, 0.0),
        (-0.2, -0.5, 0.0), (-0.5, -0.5, 0.0), (0.2, 0.5, 0.0), (0.5, 0.5, 0.0),
    )
    FACES: ClassVar[tuple] = ((0, 1, 2), (2, 3, 0), (4, 5, 6), (6, 7, 4))

    position: np.ndarray = (0.0, 0.0, 0.0)
    rotation: np.ndarray = (0.0, 0.0, 0.0)
    scale: np.ndarray = (1.0, 1.0, 1.0)
    color: np.ndarray = (1.0, 0.0, 0.0)
    model_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)
        self.color = _vec3(self.color)

    def update(self):
        """Rebuild the model matrix: scale, then rotate about Z, then translate."""
        self.model_matrix = (
            transform.translate(self.position)
            @ transform.rotate(self.rotation[2], _Z_AXIS)
            @ transform.scale(self.scale)
        )
        return self.model_matrix


@dataclass(eq=False)
class Cube:
    """A unit cube that orbits the Z axis one unit away from it."""

    VERTICES: ClassVar[tuple] = (
        (-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5),
        (-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5),
    )
    FACES: ClassVar[tuple] = (
        (0, 1, 2), (2, 3, 0),
        (1, 5, 6), (6, 2, 1),
        (5, 4, 7), (7, 6, 5),
        (4, 0, 3), (3, 7, 4),
        (3, 2, 6), (6, 7, 3),
        (4, 5, 1), (1, 0, 4),
    )

    position: np.ndarray = (0.0, 0.0, 0.0)
    rotation: np.ndarray = (0.0, 0.0, 0.0)
    scale: np.ndarray = (1.0, 1.0, 1.0)
    color: np.ndarray = (1.0, 0.0, 0.0)
    model_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    view_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    projection_matrix: np.ndarray = field(
        default_factory=lambda: transform.perspective(math.radians(60.0), 1.0, 0.1, 100.0)
    )

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)
        self.color = _vec3(self.color)

    def update_model_matrix(self):
        """Scale, tilt by X/Y rotation, offset along X, spin about Z, lift along Z."""
        self.model_matrix = (
            transform.translate((0.0, 0.0, self.position[2]))
            @ transform.rotate(self.rotation[2], _Z_AXIS)
            @ transform.translate((1.0, 0.0, 0.0))
            @ transform.yaw_pitch_roll(self.rotation[1], self.rotation[0], 0.0)
            @ transform.scale(self.scale)
        )
        return self.model_matrix

    def update_view_matrix(self, view_rotation):
        """Set the view from the fixed eye point; view_rotation does not move it."""
        self.view_matrix = transform.look_at(
            (5.0, 5.0, 10.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)
        )
        return self.view_matrix


def animate_shapes(first, second, t):
    """Pulse the first shape up and down and orbit the second, spinning, at time t."""
    s = math.sin(t)
    first.position[1] = s
    first.scale = _vec3((0.5 * s, 0.5 * s, 1.0))

    second.position = _vec3(
        (ORBIT_RADIUS * math.cos(t), ORBIT_RADIUS * math.sin(t), 0.0)
    )
    second.rotation[2] = t * 5.0

    first.update()
    second.update()
    return first, second


def origin_cubes():
    """Return the red X, green Y and blue Z axes and the gray orbiting cube."""
    axis_x = Cube(color=(1.0, 0.0, 0.0), scale=(SCALE_MAX, SCALE_MIN, SCALE_MIN))
    axis_y = Cube(color=(0.0, 1.0, 0.0), scale=(SCALE_MIN, SCALE_MAX, SCALE_MIN))
    axis_z = Cube(color=(0.0, 0.0, 1.0), scale=(SCALE_MIN, SCALE_MIN, SCALE_MAX))
    cube = Cube(color=(0.5, 0.5, 0.5), position=(0.0, 0.0, 5.0))
    return axis_x, axis_y, axis_z, cube


def animate_origin(cubes, t):
    """Spin the last cube about Z at time t and refresh every matrix.

    Returns the view rotation for time t.
    """
    *_, cube = cubes
    cube.rotation[2] = t * 2.0
    view_rotation = _vec3((t * 0.1, t * 0.1, t * 0.1))
    for item in cubes:
        item.update_view_matrix(view_rotation)
    for item in cubes:
        item.update_model_matrix()
    return view_rotation