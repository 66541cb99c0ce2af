import numpy as np
import pytest

from ppgfx.scene import Scene
from ppgfx.space import Space


def test_offset_scrolls_down():
    space = Space()
    dt = 0.5
    assert space.update(Scene(), dt) is True
    assert space.texture_offset[0] == 0.0
    assert space.texture_offset[1] == pytest.approx(-dt / 5)


def test_offset_accumulates():
    space = Space()
    scene = Scene()
    for _ in range(4):
        space.update(scene, 0.25)
    assert space.texture_offset[1] == pytest.approx(-0.2)


def test_never_leaves_scene():
    space = Space()
    scene = Scene(objects=[space])
    for _ in range(10):
        scene.update(10.0)
    assert scene.objects == [space]


def test_model_matrix_is_identity_at_origin():
    space = Space()
    space.update(Scene(), 0.1)
    assert np.allclose(space.model_matrix, np.identity(4))