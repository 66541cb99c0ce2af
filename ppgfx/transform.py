"""Vector helpers and 4x4 transformation matrices for column vectors."""

from __future__ import annotations

import math

import numpy as np


def _vec(v) -> np.ndarray:
    return np.asarray(v, dtype=np.float64)


def normalize(v):
    """Return v scaled to unit length."""
    vector = _vec(v)
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


def lerp(a, b, t):
    """Linearly interpolate between a and b by t."""
    return _vec(a) * (1.0 - t) + _vec(b) * t


def reflect(incident, normal):
    """Reflect the incident direction about the normal."""
    i = _vec(incident)
    n = _vec(normal)
    return i - 2.0 * float(np.dot(n, i)) * n


def refract(incident, normal, eta):
    """Refract the incident direction through a surface with ratio eta.

    Returns a zero vector on total internal reflection.
    """
    i = _vec(incident)
    n = _vec(normal)
    cos_i = float(np.dot(n, i))
    k = 1.0 - eta * eta * (1.0 - cos_i * cos_i)
    if k < 0.0:
        return np.zeros_like(i)
    return eta * i - (eta * cos_i + math.sqrt(k)) * n


def translate(v):
    """Return a translation matrix."""
    x, y, z = _vec(v)
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def scale(v):
    """Return a non-uniform scaling matrix."""
    x, y, z = _vec(v)
    return np.diag([x, y, z, 1.0])


def rotate(angle, axis):
    """Return a rotation matrix of angle radians about axis."""
    x, y, z = normalize(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy, aspect, near, far):
    """Return a right-handed perspective projection with depth in [-1, 1]."""
    if aspect == 0 or near == far:
        raise ValueError("invalid perspective parameters")
    tan_half = math.tan(fovy / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye, center, up):
    """Return a right-handed view matrix looking from eye towards center."""
    eye_v = _vec(eye)
    forward = normalize(_vec(center) - eye_v)
    side = normalize(np.cross(forward, _vec(up)))
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -float(np.dot(side, eye_v))
    matrix[1, 3] = -float(np.dot(upward, eye_v))
    matrix[2, 3] = float(np.dot(forward, eye_v))
    return matrix


def yaw_pitch_roll(yaw, pitch, roll):
    """Return the rotation about Y by yaw, then X by pitch, then Z by roll."""
    ch, sh = math.cos(yaw), math.sin(yaw)
    cp, sp = math.cos(pitch), math.sin(pitch)
    cb, sb = math.cos(roll), math.sin(roll)
    columns = np.array(
        [
            [ch * cb + sh * sp * sb, sb * cp, -sh * cb + ch * sp * sb, 0.0],
            [-ch * sb + sh * sp * cb, cb * cp, sb * sh + ch * sp * cb, 0.0],
            [sh * cp, -sp, ch * cp, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return columns.T


def orientate4(angles):
    """Return the rotation for Euler angles (x, y, z) as yaw=z, pitch=x, roll=y."""
    x, y, z = _vec(angles)
    return yaw_pitch_roll(z, x, y)