"""Objects carrying a model transformation, and the renderable base."""

from __future__ import annotations

import abc
from typing import Any, Iterable

import numpy as np

from . import linalg
from .errors import InvalidArgumentException
from .identity import ComparableObject


class MoveableObject(ComparableObject):
    """An identifiable object with a 4x4 model transformation."""

    def __init__(self) -> None:
        super().__init__()
        self._model_matrix = linalg.identity()

    @property
    def transformation(self) -> np.ndarray:
        return self._model_matrix.copy()

    @transformation.setter
    def transformation(self, matrix) -> None:
        arr = np.array(matrix, dtype=float)
        if arr.shape != (4, 4):
            raise InvalidArgumentException(
                f"Transformation must be a 4x4 matrix, got shape {arr.shape}."
            )
        self._model_matrix = arr


class Geometry(abc.ABC):
    """Something that can be drawn."""

    @abc.abstractmethod
    def draw(self) -> None:
        """Draw the geometry."""


class RenderableObject(MoveableObject, abc.ABC):
    """A moveable object rendered with a material and a geometry."""

    def __init__(self, material: Any, geometry: Geometry) -> None:
        super().__init__()
        self.material = material
        self.geometry = geometry

    @abc.abstractmethod
    def render(self, view, view_projection, lights: Iterable[Any], pass_data) -> None:
        """Render the object with the given view and combined view-projection."""