"""
Synthetic 2D data with known ground truth, for demos and tests.

- line_with_outliers: points on y = slope*x + intercept plus uniform outliers
- gaussian_blobs: isotropic Gaussian clusters around given centers
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .geometry.types import BoolArray, IntArray, Points2D
from .rng import RngLike, make_rng


def line_with_outliers(
        slope: float,
        intercept: float,
        n_inliers: int = 200,
        n_outliers: int = 150,
        *,
        x_range: tuple[float, float] = (0.0, 100.0),
        noise: float = 0.0,
        outlier_box: tuple[float, float, float, float] | None = None,
        shuffle: bool = True,
        rng: RngLike = 0,
) -> tuple[Points2D, BoolArray]:
    """
    Generate line points contaminated with outliers.

    Inliers: x uniform in x_range, y = slope*x + intercept + N(0, noise) along y.
    Outliers: uniform in outlier_box = (x_min, y_min, x_max, y_max); by default
      the bounding box of the inliers, padded by 25% in y.

    Returns:
      points: (n_inliers + n_outliers, 2)
      is_inlier: (N,) True for points generated on the line
    """
    gen = make_rng(rng)

    x = gen.uniform(x_range[0], x_range[1], size=n_inliers)
    y = slope * x + intercept
    if noise > 0.0:
        y = y + gen.normal(0.0, noise, size=n_inliers)
    inliers = np.column_stack([x, y]).astype(np.float64)

    if outlier_box is None:
        y_lo = slope * x_range[0] + intercept
        y_hi = slope * x_range[1] + intercept
        y_lo, y_hi = min(y_lo, y_hi), max(y_lo, y_hi)
        pad = 0.25 * max(y_hi - y_lo, 1.0)
        outlier_box = (x_range[0], y_lo - pad, x_range[1], y_hi + pad)

    x_min, y_min, x_max, y_max = outlier_box
    outliers = gen.uniform([x_min, y_min], [x_max, y_max], size=(n_outliers, 2)).astype(np.float64)

    points = np.vstack([inliers, outliers])
    is_inlier = np.concatenate([
        np.ones((n_inliers,), dtype=bool),
        np.zeros((n_outliers,), dtype=bool),
    ])

    if shuffle:
        order = gen.permutation(points.shape[0])
        points = points[order]
        is_inlier = is_inlier[order]

    return points, is_inlier


def gaussian_blobs(
        centers: Sequence[tuple[float, float]],
        n_per_cluster: int = 50,
        *,
        std: float = 1.0,
        rng: RngLike = 0,
) -> tuple[Points2D, IntArray]:
    """
    n_per_cluster points around each center, N(center, std^2 I).

    Returns:
      points: (len(centers) * n_per_cluster, 2), grouped by cluster
      labels: (N,) index of the generating center
    """
    gen = make_rng(rng)
    c = np.asarray(centers, dtype=np.float64)
    if c.ndim != 2 or c.shape[1] != 2:
        raise ValueError(f"Expected centers shape (K,2), got {c.shape}")

    blocks = [
        center + gen.normal(0.0, std, size=(n_per_cluster, 2))
        for center in c
    ]
    points = np.vstack(blocks).astype(np.float64)
    labels = np.repeat(np.arange(c.shape[0], dtype=np.int64), n_per_cluster)
    return points, labels
