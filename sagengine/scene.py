"""Scene graph nodes and the scene registry."""

from __future__ import annotations

import weakref
from typing import List, Optional

import numpy as np

from . import linalg
from .errors import InvalidArgumentException
from .identity import ComparableObject
from .moveable import MoveableObject


class SceneNode(ComparableObject):
    """A node in the scene graph that owns its children and moves attached objects."""

    def __init__(self, parent: Optional["SceneNode"] = None) -> None:
        super().__init__()
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._children: List[SceneNode] = []
        self._objects: List[MoveableObject] = []
        self._model_matrix = linalg.identity()

    @property
    def parent(self) -> Optional["SceneNode"]:
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, node: Optional["SceneNode"]) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    @property
    def children(self) -> tuple:
        return tuple(self._children)

    @property
    def objects(self) -> tuple:
        return tuple(self._objects)

    def attach_object(self, obj: MoveableObject) -> None:
        self._objects.append(obj)

    def remove_object(self, obj: MoveableObject) -> None:
        self._objects = [o for o in self._objects if o is not obj]

    def create_child(self) -> "SceneNode":
        child = SceneNode(self)
        self._children.append(child)
        return child

    def attach_child(self, node: "SceneNode") -> None:
        """Move ``node`` from its current parent to this node; orphans are ignored."""
        old_parent = node.parent
        if old_parent is None:
            return
        old_parent.detach_child(node)
        self._children.append(node)
        node.parent = self

    def detach_child(self, node: "SceneNode") -> None:
        before = len(self._children)
        self._children = [c for c in self._children if c is not node]
        if len(self._children) != before:
            node.parent = None

    def detach(self) -> None:
        parent = self.parent
        if parent is not None:
            parent.detach_child(self)

    @property
    def local_transformation(self) -> np.ndarray:
        return self._model_matrix.copy()

    @local_transformation.setter
    def local_transformation(self, matrix) -> None:
        arr = np.array(matrix, dtype=float)
        if arr.shape != (4, 4):
            raise InvalidArgumentException(
                f"Transformation must be a 4x4 matrix, got shape {arr.shape}."
            )
        self._model_matrix = arr
        self._update_children()

    def world_transformation(self) -> np.ndarray:
        parent = self.parent
        if parent is None:
            raise InvalidArgumentException("SceneNode has no parent and should not be used!")
        if parent.parent is None:
            return self._model_matrix.copy()
        return parent.world_transformation() @ self._model_matrix

    def _update_children(self) -> None:
        for obj in self._objects:
            obj.transformation = self.world_transformation()
        for child in self._children:
            child._update_children()


class SceneManager:
    """Registry of the scene graph root, main camera, renderables and lights."""

    _instance: Optional["SceneManager"] = None

    def __init__(self) -> None:
        self.root_node = SceneNode()
        self.main_camera = None
        self._renderables: list = []
        self._lights: list = []

    @classmethod
    def instance(cls) -> "SceneManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def renderable_objects(self) -> tuple:
        return tuple(self._renderables)

    @property
    def lights(self) -> tuple:
        return tuple(self._lights)

    def register_renderable(self, obj) -> None:
        self._renderables.append(obj)

    def deregister_renderable(self, obj) -> None:
        self._renderables = [o for o in self._renderables if o is not obj]

    def register_light(self, light) -> None:
        self._lights.append(light)

    def deregister_light(self, light) -> None:
        self._lights = [o for o in self._lights if o is not light]