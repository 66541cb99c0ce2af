import numpy as np

from ppgfx.camera import Camera
from ppgfx.object import SceneObject
from ppgfx.scene import Cursor, Scene


class _Mortal(SceneObject):
    def __init__(self, keep=True):
        super().__init__()
        self.keep = keep
        self.updates = 0

    def update(self, scene, dt):
        self.updates += 1
        return self.keep


class _Spawner(SceneObject):
    def __init__(self):
        super().__init__()
        self.child = _Mortal()

    def update(self, scene, dt):
        if self.child not in scene.objects:
            scene.objects.append(self.child)
        return True


def test_update_removes_finished_objects():
    keep, drop = _Mortal(True), _Mortal(False)
    scene = Scene(objects=[keep, drop])
    scene.update(0.1)
    assert scene.objects == [keep]
    assert drop.updates == 1


def test_objects_added_during_update_are_updated():
    spawner = _Spawner()
    scene = Scene(objects=[spawner])
    scene.update(0.1)
    assert scene.objects == [spawner, spawner.child]
    assert spawner.child.updates == 1


def test_update_refreshes_camera():
    camera = Camera()
    camera.position = np.array([0.0, 0.0, -15.0])
    scene = Scene(camera=camera)
    scene.update(0.0)
    eye = camera.view_matrix @ np.array([0.0, 0.0, -15.0, 1.0])
    assert np.allclose(eye[:3], 0.0)


def _at(position):
    obj = _Mortal()
    obj.position = np.array(position, dtype=float)
    return obj


def test_intersect_picks_object_ahead():
    ahead = _at((0, 0, 10))
    behind = _at((0, 0, -10))
    aside = _at((5, 0, 10))
    scene = Scene(objects=[ahead, behind, aside])
    assert scene.intersect((0, 0, 0), (0, 0, 1)) == [ahead]


def test_intersect_from_inside_sphere():
    around = _at((0, 0, 0))
    scene = Scene(objects=[around])
    assert scene.intersect((0, 0, 0), (1, 0, 0)) == [around]


def test_intersect_uses_x_scale_as_radius():
    wide = _at((3, 0, 10))
    wide.scale = np.array([4.0, 1.0, 1.0])
    scene = Scene(objects=[wide])
    assert scene.intersect((0, 0, 0), (0, 0, 1)) == [wide]


def test_cursor_defaults():
    cursor = Scene().cursor
    assert cursor == Cursor(0.0, 0.0, False, False)