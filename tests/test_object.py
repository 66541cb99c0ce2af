import numpy as np
import pytest

from ppgfx.object import SceneObject, _ball_rand
from ppgfx.transform import orientate4


class _Still(SceneObject):
    def update(self, scene, dt):
        return True


def test_base_is_abstract():
    with pytest.raises(TypeError):
        SceneObject()


def test_defaults():
    obj = _Still()
    assert np.allclose(obj.position, 0.0)
    assert np.allclose(obj.rotation, 0.0)
    assert np.allclose(obj.scale, 1.0)
    assert np.allclose(obj.model_matrix, np.identity(4))
    matrix = SceneObject.generate_model_matrix(obj)
    np.testing.assert_allclose(matrix, np.identity(4))


def test_model_matrix_translation_and_scale():
    obj = _Still()
    obj.position = np.array([1.0, -2.0, 3.0])
    obj.scale = np.array([2.0, 4.0, 0.5])
    matrix = SceneObject.generate_model_matrix(obj)
    assert np.allclose(matrix[:3, 3], obj.position)
    assert np.allclose(np.diag(matrix)[:3], obj.scale)
    assert matrix is obj.model_matrix


def test_model_matrix_rotation_matches_orientate():
    obj = _Still()
    obj.rotation = np.array([0.3, 0.2, 0.1])
    matrix = obj.generate_model_matrix()
    assert np.allclose(matrix, orientate4(obj.rotation))


def test_ball_rand_stays_inside():
    for _ in range(100):
        assert np.linalg.norm(_ball_rand(2.0)) <= 2.0