"""A first-person player steering the main camera with keys and mouse."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from . import linalg
from .camera import Camera
from .events import KeyboardKey, KeyDownEvent, MouseMoveEvent
from .scene import SceneManager

DEFAULT_MOUSE_SENSITIVITY = 110.0
DEFAULT_KEYBOARD_SENSITIVITY = 8.0

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_TIPPING_POINT = math.radians(89.9)


class Player:
    """Owns a camera attached to its own scene node and moves it from input events."""

    def __init__(self, camera: Camera, scene_manager: Optional[SceneManager] = None) -> None:
        manager = scene_manager if scene_manager is not None else SceneManager.instance()
        self.camera = camera
        self.mouse_sensitivity = DEFAULT_MOUSE_SENSITIVITY
        self.key_sensitivity = DEFAULT_KEYBOARD_SENSITIVITY
        self.yaw = 0.0
        self.pitch = 0.0
        self.position = np.zeros(3)
        self.up = _WORLD_UP.copy()
        self._base_target_offset = np.array([0.0, 0.0, -1.0])
        self.target_offset = self._base_target_offset.copy()
        self.left = np.zeros(3)
        self.view = linalg.identity()
        self.camera_node = manager.root_node.create_child()
        self.camera_node.attach_object(camera)
        self._update_view_matrix()

    def handle_key_down(self, event: KeyDownEvent) -> None:
        velocity = self.key_sensitivity * event.delta_time
        front = linalg.normalize(self.target_offset)
        if event.key is KeyboardKey.A:
            self.position = self.position + self.left * velocity
        elif event.key is KeyboardKey.D:
            self.position = self.position - self.left * velocity
        elif event.key is KeyboardKey.W:
            self.position = self.position + front * velocity
        elif event.key is KeyboardKey.S:
            self.position = self.position - front * velocity
        self._update_view_matrix()

    def handle_mouse_move(self, event: MouseMoveEvent) -> None:
        delta_x = math.radians(event.delta_x * event.delta_time * self.mouse_sensitivity)
        delta_y = math.radians(event.delta_y * event.delta_time * self.mouse_sensitivity)
        self.yaw += delta_x
        self.pitch -= delta_y
        self.pitch = max(-_TIPPING_POINT, min(_TIPPING_POINT, self.pitch))
        self._update_view_matrix()

    def set_position(self, position) -> None:
        self.position = np.array(position, dtype=float)
        self._update_view_matrix()

    def _update_view_matrix(self) -> None:
        offset = linalg.angle_axis_rotate(self.yaw, _WORLD_UP, self._base_target_offset)
        forward = linalg.normalize(offset)
        self.left = linalg.normalize(np.cross(_WORLD_UP, forward))
        self.target_offset = linalg.angle_axis_rotate(self.pitch, self.left, offset)
        target = self.position + self.target_offset
        self.view = linalg.look_at(self.position, target, self.up)
        self.camera_node.local_transformation = self.view