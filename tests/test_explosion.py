import math

import numpy as np
import pytest

from ppgfx.explosion import Explosion
from ppgfx.scene import Scene


def test_initial_state():
    explosion = Explosion()
    assert explosion.age == 0.0
    assert explosion.max_age == 0.2
    assert np.allclose(explosion.speed, 0.0)
    assert np.linalg.norm(explosion.rotation) <= math.pi * 3.0
    assert explosion.transparency == pytest.approx(1.0)


def test_update_grows_scale():
    explosion = Explosion()
    dt = 0.05
    assert explosion.update(Scene(), dt) is True
    assert np.allclose(explosion.scale, 1.0 + dt * 5.0)


def test_update_moves_by_speed():
    explosion = Explosion()
    explosion.speed = np.array([1.0, -2.0, 0.5])
    explosion.position = np.array([3.0, 3.0, 3.0])
    explosion.update(Scene(), 0.1)
    assert np.allclose(explosion.position, [3.0, 3.0, 3.0] + explosion.speed * 0.1)


def test_fades_and_expires():
    explosion = Explosion()
    scene = Scene()
    explosion.update(scene, 0.1)
    assert 0.0 < explosion.transparency < 1.0
    assert explosion.update(scene, 0.15) is False


def test_removed_from_scene_after_max_age():
    explosion = Explosion()
    scene = Scene(objects=[explosion])
    scene.update(0.3)
    assert scene.objects == []