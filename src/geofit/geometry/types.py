"""
Shared typed primitives for the estimators.

Defines:
- Typed NumPy aliases for geometry
    - Points are (N,2) float arrays
    - Masks are (N,) bool arrays
- Immutable value types handed back to callers
    - Point2D, LineModel, FitResult
    - Centroid, LabeledPoint
- Input coercion: as_points() turns whatever the caller holds into (N,2) float64
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence, TypeAlias, Union

import numpy as np
import numpy.typing as npt

# ---------- Numpy typing aliases ----------
# - float64 for coordinates (stable sums for least squares)
# - bool_ for masks

FloatArray: TypeAlias = npt.NDArray[np.float64]
BoolArray: TypeAlias = npt.NDArray[np.bool_]
IntArray: TypeAlias = npt.NDArray[np.int64]

# Points in 2D. Stored as float64 for consistency in math.
Points2D: TypeAlias = FloatArray      # shape: (N, 2)

# Boolean inlier mask: True as inlier, False as outlier
Mask: TypeAlias = BoolArray           # shape: (N,)


# ---------- Value types ----------
@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class LineModel:
    """
    Line y = slope * x + intercept.

    The degenerate / "no model" value is slope=0, intercept=0.
    Vertical lines cannot be represented, the fitters never produce them.
    """
    slope: float = 0.0
    intercept: float = 0.0

    @classmethod
    def degenerate(cls) -> "LineModel":
        return cls(0.0, 0.0)

    @property
    def is_degenerate(self) -> bool:
        return self.slope == 0.0 and self.intercept == 0.0

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.slope) and math.isfinite(self.intercept)

    def predict(self, x: float) -> float:
        return self.slope * float(x) + self.intercept


@dataclass(frozen=True)
class FitResult:
    """
    Output of the robust line estimator.

    inliers keep the order of the input points.
    """
    model: LineModel = field(default_factory=LineModel.degenerate)
    inliers: tuple[Point2D, ...] = ()
    iterations: int = 0         # how many RANSAC iterations were actually run
    threshold: float = 0.0      # the inlier distance threshold used
    rms_error: float = 0.0      # RMS perpendicular distance of the inliers to the model

    @property
    def num_inliers(self) -> int:
        return len(self.inliers)


@dataclass(frozen=True)
class Centroid:
    x: float
    y: float


@dataclass(frozen=True)
class LabeledPoint:
    """
    A point with the index of the cluster it belongs to.
    cluster_index == -1 means "not assigned yet".
    """
    x: float
    y: float
    cluster_index: int = -1

    @property
    def is_assigned(self) -> bool:
        return self.cluster_index >= 0


PointLike = Union[Point2D, LabeledPoint, Centroid, Sequence[float]]
PointsLike = Union[Points2D, Iterable[PointLike]]


# ---------- Helper Functions ----------
def as_points(points: PointsLike) -> Points2D:
    """
    Convert caller input into an (N,2) float64 array.

    Accepts:
      - an (N,2) array
      - a sequence of objects with .x / .y (Point2D, LabeledPoint, Centroid)
      - a sequence of (x, y) pairs

    An empty input gives shape (0,2).
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64, copy=False)
        if arr.size == 0:
            return np.zeros((0, 2), dtype=np.float64)
    else:
        rows = [point_xy(p) for p in points]
        if not rows:
            return np.zeros((0, 2), dtype=np.float64)
        arr = np.asarray(rows, dtype=np.float64)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected points shape (N, 2) but got {arr.shape}")
    return arr


def point_xy(p: PointLike) -> tuple[float, float]:
    if hasattr(p, "x") and hasattr(p, "y"):
        return float(p.x), float(p.y)
    x, y = p
    return float(x), float(y)


def to_point_tuple(pts: Points2D) -> tuple[Point2D, ...]:
    """(N,2) array -> tuple of Point2D, same order."""
    return tuple(Point2D(float(x), float(y)) for x, y in pts)


def to_centroid_tuple(pts: Points2D) -> tuple[Centroid, ...]:
    """(K,2) array -> tuple of Centroid, same order."""
    return tuple(Centroid(float(x), float(y)) for x, y in pts)
