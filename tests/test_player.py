import math

import numpy as np

from ppgfx.asteroid import Asteroid
from ppgfx.explosion import Explosion
from ppgfx.game import PRESS, RELEASE, Key
from ppgfx.player import Player
from ppgfx.projectile import Projectile
from ppgfx.scene import Scene


def _scene(player, keys=None):
    return Scene(objects=[player], keyboard=dict(keys or {}))


def test_player_is_scaled_up():
    assert np.allclose(Player().scale, (3.0, 3.0, 3.0))


def test_left_key_moves_and_tilts():
    player = Player()
    scene = _scene(player, {Key.LEFT: PRESS})
    assert player.update(scene, 0.1) is True
    assert math.isclose(player.position[0], 1.0)
    assert math.isclose(player.rotation[2], -math.pi / 4)


def test_right_key_moves_the_other_way():
    player = Player()
    scene = _scene(player, {Key.RIGHT: PRESS})
    player.update(scene, 0.1)
    assert math.isclose(player.position[0], -1.0)
    assert math.isclose(player.rotation[2], math.pi / 4)


def test_released_keys_level_the_ship():
    player = Player()
    player.rotation[2] = 1.0
    scene = _scene(player, {Key.LEFT: RELEASE})
    player.update(scene, 0.1)
    assert player.rotation[2] == 0.0
    assert player.position[0] == 0.0


def test_fire_alternates_sides_and_respects_rate():
    player = Player()
    scene = _scene(player, {Key.SPACE: PRESS})

    player.update(scene, 0.2)
    shots = [o for o in scene.objects if isinstance(o, Projectile)]
    assert len(shots) == 1
    assert np.allclose(shots[0].position, (-0.7, 0.0, 0.3))
    assert player.fire_delay == 0.0

    player.update(scene, 0.05)
    assert sum(isinstance(o, Projectile) for o in scene.objects) == 1

    player.update(scene, 0.2)
    shots = [o for o in scene.objects if isinstance(o, Projectile)]
    assert len(shots) == 2
    assert np.allclose(shots[1].position, (0.7, 0.0, 0.3))


def test_no_fire_without_space():
    player = Player()
    scene = _scene(player)
    assert player.update(scene, 1.0) is True
    assert scene.objects == [player]
    assert player.fire_delay == 1.0


def test_collision_with_asteroid_destroys_player():
    player = Player()
    asteroid = Asteroid()
    asteroid.position = player.position + np.array([0.5, 0.0, 0.0])
    asteroid.scale = np.full(3, 1.0)
    scene = Scene(objects=[player, asteroid])
    assert player.update(scene, 0.01) is False
    explosions = [o for o in scene.objects if isinstance(o, Explosion)]
    assert len(explosions) == 1
    assert np.allclose(explosions[0].scale, player.scale * 3.0)
    assert np.allclose(explosions[0].position, player.position)


def test_distant_asteroid_is_harmless():
    player = Player()
    asteroid = Asteroid()
    asteroid.position = np.array([0.0, 20.0, 0.0])
    asteroid.scale = np.full(3, 1.0)
    scene = Scene(objects=[player, asteroid])
    assert player.update(scene, 0.01) is True


def test_on_click_prints(capsys):
    player = Player()
    player.on_click(_scene(player))
    assert capsys.readouterr().out == "Player has been clicked!\n"