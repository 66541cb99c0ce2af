"""Asteroid shooter game logic: scene setup and input handling."""

from __future__ import annotations

from enum import IntEnum

from ppgfx.camera import Camera
from ppgfx.generator import Generator
from ppgfx.player import Player
from ppgfx.scene import Scene
from ppgfx.space import Space

SIZE = 512

RELEASE = 0
PRESS = 1
REPEAT = 2

MOUSE_BUTTON_LEFT = 0
MOUSE_BUTTON_RIGHT = 1


class Key(IntEnum):
    """Keyboard codes the game reacts to."""

    SPACE = 32
    P = 80
    R = 82
    RIGHT = 262
    LEFT = 263


class SceneGame:
    """Owns the scene and turns window input and elapsed time into scene updates."""

    def __init__(self, width=SIZE, height=SIZE):
        self.width = width
        self.height = height
        self.scene = Scene()
        self.animate = True
        self.init_scene()

    def init_scene(self):
        """Reset the scene to a camera, background, asteroid generator and player."""
        self.scene.objects.clear()

        camera = Camera(60.0, 1.0, 0.1, 100.0)
        camera.position[2] = -15.0
        self.scene.camera = camera

        self.scene.objects.append(Space())

        generator = Generator()
        generator.position[1] = 10.0
        self.scene.objects.append(generator)

        player = Player()
        player.position[1] = -6.0
        self.scene.objects.append(player)
        return self.scene

    def on_key(self, key, action):
        """Record the key state; R restarts and P pauses on press."""
        self.scene.keyboard[key] = action
        if key == Key.R and action == PRESS:
            self.init_scene()
        if key == Key.P and action == PRESS:
            self.animate = not self.animate

    def on_cursor_pos(self, x, y):
        """Store the cursor position in window pixels."""
        self.scene.cursor.x = x
        self.scene.cursor.y = y

    def on_mouse_button(self, button, action):
        """Track buttons; a left press clicks every object under the cursor.

        Returns the objects that were clicked.
        """
        picked = []
        cursor = self.scene.cursor
        if button == MOUSE_BUTTON_LEFT:
            cursor.left = action == PRESS
            if cursor.left:
                u = (cursor.x / self.width - 0.5) * 2.0
                v = -(cursor.y / self.height - 0.5) * 2.0
                camera = self.scene.camera
                direction = camera.cast(u, v)
                picked = self.scene.intersect(camera.position.copy(), direction)
                for obj in picked:
                    obj.on_click(self.scene)
        if button == MOUSE_BUTTON_RIGHT:
            cursor.right = action == PRESS
        return picked

    def step(self, dt):
        """Advance the scene by dt seconds, or not at all while paused.

        Returns the time step that was applied.
        """
        applied = dt if self.animate else 0.0
        self.scene.update(applied)
        return applied