"""Cameras and lights."""

from __future__ import annotations

import math

import numpy as np

from . import linalg
from .moveable import MoveableObject

DEFAULT_NEAR = 0.1
DEFAULT_FAR = 100.0

_WORLD_UP = (0.0, 1.0, 0.0)


class Camera(MoveableObject):
    """A perspective camera; its transformation is the view matrix."""

    def __init__(self, aspect_ratio: float, fovy_deg: float) -> None:
        super().__init__()
        self._fovy = math.radians(fovy_deg)
        self.aspect_ratio = aspect_ratio
        self.near = DEFAULT_NEAR
        self.far = DEFAULT_FAR
        self.projection = linalg.perspective(self._fovy, aspect_ratio, self.near, self.far)

    @property
    def fovy(self) -> float:
        """Vertical field of view in degrees."""
        return math.degrees(self._fovy)


class Light(MoveableObject):
    """A light placed by its transformation."""

    @property
    def position(self) -> np.ndarray:
        """Homogeneous world position of the light."""
        return self._model_matrix @ np.array([0.0, 0.0, 0.0, 1.0])


class DirectionalLight(Light):
    """A light that looks at a center point and casts shadows with a perspective."""

    def __init__(self, center, fovy_deg: float, aspect: float) -> None:
        super().__init__()
        self.center = np.array(center, dtype=float)
        self.perspective = linalg.perspective(math.radians(fovy_deg), aspect, 0.1, 100.0)

    def view(self) -> np.ndarray:
        """View matrix from the light's position towards its center."""
        return linalg.look_at(self.position[:3], self.center, _WORLD_UP)