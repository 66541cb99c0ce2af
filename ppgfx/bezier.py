"""Cubic Bezier curves chained through shared end points."""

from __future__ import annotations

import numpy as np

from ppgfx.transform import lerp

# Control points outlining the greek letter q: one cubic curve of four points,
# then curves of three more points each reusing the previous end point.
Q_CONTROL_POINTS = (
    (0.0, 0.0),
    (-0.5, 0.0),
    (-0.5, -0.7),
    (0.0, -0.7),
    (0.5, -0.7),
    (0.5, 0.0),
    (0.0, 0.2),
    (-0.5, 0.3),
    (-0.5, 0.7),
    (0.5, 0.7),
)


def bezier_point(p0, p1, p2, p3, t):
    """Evaluate the cubic Bezier curve of four control points at t."""
    a = lerp(p0, p1, t)
    b = lerp(p1, p2, t)
    c = lerp(p2, p3, t)
    d = lerp(a, b, t)
    e = lerp(b, c, t)
    return lerp(d, e, t)


def bezier_shape(control_points, count):
    """Sample a chain of cubic curves with count + 1 points per curve.

    Returns an array of (x, y, 0) rows.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    points = np.asarray(control_points, dtype=np.float64).reshape(-1, 2)
    rows = [
        (*bezier_point(*points[i : i + 4], j / count), 0.0)
        for i in range(0, len(points) - 3, 3)
        for j in range(count + 1)
    ]
    return np.array(rows, dtype=np.float64).reshape(-1, 3)