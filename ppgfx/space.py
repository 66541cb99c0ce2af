"""Scrolling star background."""

from __future__ import annotations

import numpy as np

from ppgfx.object import SceneObject


class Space(SceneObject):
    """Background quad whose texture offset scrolls to suggest motion."""

    def __init__(self):
        super().__init__()
        self.texture_offset = np.array([0.0, 0.0])

    def update(self, scene, dt):
        """Scroll the texture offset downwards; the background never expires."""
        self.texture_offset = self.texture_offset - np.array([0.0, dt / 5.0])
        self.generate_model_matrix()
        return True