import math
import random

import numpy as np
import pytest

from ppgfx.projectile import Projectile
from ppgfx.scene import Scene


def test_initial_state():
    random.seed(1)
    projectile = Projectile()
    assert np.allclose(projectile.speed, [0.0, 3.0, 0.0])
    assert projectile.rot_momentum[0] == 0.0
    assert projectile.rot_momentum[1] == 0.0
    assert -math.pi / 4 <= projectile.rot_momentum[2] <= math.pi / 4


def test_update_accelerates_then_moves():
    projectile = Projectile()
    dt = 0.1
    alive = projectile.update(Scene(), dt)
    assert alive is True
    assert projectile.speed[1] == pytest.approx(3.0 + 20.0 * dt)
    assert np.allclose(projectile.position, projectile.speed * dt)
    assert np.allclose(projectile.model_matrix[:3, 3], projectile.position)


def test_rotation_follows_momentum():
    projectile = Projectile()
    projectile.update(Scene(), 0.5)
    assert np.allclose(projectile.rotation, projectile.rot_momentum * 0.5)


def test_expires_after_lifetime():
    projectile = Projectile()
    scene = Scene()
    assert projectile.update(scene, 4.9) is True
    assert projectile.update(scene, 0.2) is False


def test_destroy_removes_on_next_update():
    projectile = Projectile()
    projectile.destroy()
    scene = Scene(objects=[projectile])
    scene.update(0.01)
    assert scene.objects == []