"""
Line model utilities.

We estimate a non-vertical line

    y = slope * x + intercept

- Minimal fit: the line through 2 points (used per RANSAC hypothesis)
- Least squares fit: ordinary linear regression over N points
  (used standalone and as the RANSAC refinement step)
- Residuals: perpendicular point-to-line distance

The least squares fit minimises *vertical* squared residuals, while RANSAC
scores inliers with *perpendicular* distance.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..geometry.distance import perpendicular_distances
from ..geometry.types import FloatArray, LineModel, Points2D, PointsLike, as_points

# Tolerance for near-vertical pairs and for the least-squares denominator.
DEFAULT_EPS = 1e-4


# ---------- Minimal Fitting ----------
def fit_line_minimal(sample: Points2D, eps: float = DEFAULT_EPS) -> Optional[LineModel]:
    """
    Line through exactly 2 points.

    sample: (2,2) points

    Returns:
      LineModel, or None if |x2 - x1| < eps (near-vertical pair, slope unstable).
    """
    if sample.shape != (2, 2):
        raise ValueError(f"fit_line_minimal expects a (2,2) sample, got {sample.shape}")

    x1, y1 = float(sample[0, 0]), float(sample[0, 1])
    x2, y2 = float(sample[1, 0]), float(sample[1, 1])

    if abs(x2 - x1) < eps:
        return None

    slope = (y2 - y1) / (x2 - x1)
    intercept = y1 - slope * x1
    model = LineModel(slope, intercept)
    if not model.is_finite:
        return None
    return model


# ---------- Least Squares Fitting ----------
def fit_line_least_squares(points: PointsLike, eps: float = DEFAULT_EPS) -> LineModel:
    """
    Closed-form linear regression.

    Accumulate Sx, Sy, Sxy, Sxx over n points:

        D         = n*Sxx - Sx^2
        slope     = (n*Sxy - Sx*Sy) / D
        intercept = mean(y) - slope * mean(x)

    Fallbacks (no exceptions):
      - n == 0        -> degenerate model (0, 0)
      - |D| < eps     -> x has (near) zero variance: slope 0, intercept mean(y)
    """
    pts = as_points(points)
    n = pts.shape[0]
    if n == 0:
        return LineModel.degenerate()

    x = pts[:, 0]
    y = pts[:, 1]

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))

    mean_x = sum_x / n
    mean_y = sum_y / n

    denominator = n * sum_x2 - sum_x * sum_x
    if abs(denominator) < eps:
        return LineModel(0.0, mean_y)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = mean_y - slope * mean_x
    return LineModel(slope, intercept)


def sum_squared_error(points: PointsLike, model: LineModel) -> float:
    """
    Sum of squared vertical residuals:

        sum_i (y_i - (slope * x_i + intercept))^2
    """
    pts = as_points(points)
    if pts.shape[0] == 0:
        return 0.0
    predicted = model.slope * pts[:, 0] + model.intercept
    diff = pts[:, 1] - predicted
    return float(np.sum(diff * diff))


# ---------- Residuals ----------
def line_residuals(model: LineModel, points: Points2D) -> FloatArray:
    """
    Per-point perpendicular distance to the line:

        e_i = |slope*x_i - y_i + intercept| / sqrt(slope^2 + 1)

    Returns shape (N,)
    """
    return perpendicular_distances(points, model.slope, model.intercept)
