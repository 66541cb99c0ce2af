import math

import numpy as np
import pytest

from ppgfx.camera import Camera
from ppgfx.transform import perspective


def test_projection_uses_field_of_view_in_degrees():
    camera = Camera(60.0, 1.0, 0.1, 100.0)
    expected = perspective(math.radians(60.0), 1.0, 0.1, 100.0)
    assert np.allclose(camera.projection_matrix, expected)


def test_default_vectors():
    camera = Camera()
    assert np.allclose(camera.up, [0, 1, 0])
    assert np.allclose(camera.position, [0, 0, 0])
    assert np.allclose(camera.back, [0, 0, -1])


def test_cast_through_centre_points_opposite_back():
    camera = Camera(60.0, 1.0, 0.1, 100.0)
    camera.position = np.array([0.0, 0.0, -15.0])
    camera.update()
    direction = camera.cast(0.0, 0.0)
    assert np.allclose(direction, -camera.back)


@pytest.mark.parametrize("u,v", [(0.3, 0.2), (-0.9, 0.5), (1.0, -1.0)])
def test_cast_returns_unit_vector(u, v):
    camera = Camera(60.0, 1.0, 0.1, 100.0)
    camera.update()
    assert np.linalg.norm(camera.cast(u, v)) == pytest.approx(1.0)


def test_cast_is_symmetric_in_u():
    camera = Camera(60.0, 1.0, 0.1, 100.0)
    camera.update()
    left = camera.cast(-0.5, 0.0)
    right = camera.cast(0.5, 0.0)
    assert left[0] == pytest.approx(-right[0])
    assert left[2] == pytest.approx(right[2])


def test_update_changes_view_with_position():
    camera = Camera()
    first = camera.update().copy()
    camera.position = np.array([1.0, 2.0, 3.0])
    second = camera.update()
    assert not np.allclose(first, second)
    # The eye maps to the view-space origin.
    eye = second @ np.array([1.0, 2.0, 3.0, 1.0])
    assert np.allclose(eye[:3], 0.0)