"""
Distance primitives.

Scalar versions work on a single point, the vectorised versions
(perpendicular_distances, squared_distances) are what the estimators use
on (N,2) arrays.
"""

from __future__ import annotations

import math

import numpy as np

from .types import FloatArray, Points2D, PointLike, point_xy


def perpendicular_distance(point: PointLike, slope: float, intercept: float) -> float:
    """
    Distance from point to the line y = slope * x + intercept:

        |slope*x - y + intercept| / sqrt(slope^2 + 1)
    """
    x, y = point_xy(point)
    return abs(slope * x - y + intercept) / math.sqrt(slope * slope + 1.0)


def perpendicular_distances(points: Points2D, slope: float, intercept: float) -> FloatArray:
    """Per-point perpendicular distance to the line. Returns shape (N,)."""
    if points.shape[0] == 0:
        return np.zeros((0,), dtype=np.float64)
    num = np.abs(slope * points[:, 0] - points[:, 1] + intercept)
    return (num / np.sqrt(slope * slope + 1.0)).astype(np.float64)


def euclidean_distance(p: PointLike, q: PointLike) -> float:
    """Standard 2-norm between two points."""
    px, py = point_xy(p)
    qx, qy = point_xy(q)
    return math.hypot(px - qx, py - qy)


def squared_distances(points: Points2D, centers: Points2D) -> FloatArray:
    """
    Pairwise squared Euclidean distances.

    points: (N,2)
    centers: (K,2)
    Returns (N,K)
    """
    diff = points[:, None, :] - centers[None, :, :]
    return np.sum(diff * diff, axis=-1)
