"""Small 3D linear-algebra helpers on numpy arrays (column-vector convention)."""

from __future__ import annotations

import math

import numpy as np

from .errors import InvalidArgumentException


def _vec3(vector) -> np.ndarray:
    arr = np.asarray(vector, dtype=float)
    if arr.shape != (3,):
        raise InvalidArgumentException(f"Expected a 3-component vector, got shape {arr.shape}.")
    return arr


def _mat4(matrix) -> np.ndarray:
    arr = np.asarray(matrix, dtype=float)
    if arr.shape != (4, 4):
        raise InvalidArgumentException(f"Expected a 4x4 matrix, got shape {arr.shape}.")
    return arr


def identity() -> np.ndarray:
    """Return a fresh 4x4 identity matrix."""
    return np.eye(4)


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    arr = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise InvalidArgumentException("Cannot normalize a zero-length vector.")
    return arr / length


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1]; ``fovy`` in radians."""
    if aspect == 0.0:
        raise InvalidArgumentException("Aspect ratio must not be zero.")
    if near == far:
        raise InvalidArgumentException("Near and far planes must differ.")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = normalize(_vec3(center) - eye)
    side = normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    result = np.eye(4)
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye)
    result[1, 3] = -np.dot(upward, eye)
    result[2, 3] = np.dot(forward, eye)
    return result


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed (in local space) by a translation."""
    t = np.eye(4)
    t[:3, 3] = _vec3(offset)
    return _mat4(matrix) @ t


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed (in local space) by a non-uniform scale."""
    s = np.diag([*_vec3(factors), 1.0])
    return _mat4(matrix) @ s


def _rotation3(angle: float, axis) -> np.ndarray:
    x, y, z = normalize(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
        ]
    )


def rotate(matrix, angle: float, axis) -> np.ndarray:
    """Return ``matrix`` followed (in local space) by a rotation of ``angle`` radians about ``axis``."""
    r = np.eye(4)
    r[:3, :3] = _rotation3(angle, axis)
    return _mat4(matrix) @ r


def angle_axis_rotate(angle: float, axis, vector) -> np.ndarray:
    """Rotate a 3-vector by ``angle`` radians about ``axis``."""
    return _rotation3(angle, axis) @ _vec3(vector)