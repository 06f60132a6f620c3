"""
k-means++ seeding.

Pure random seeding can put two initial centroids inside the same blob.
k-means++ picks each new centroid with probability proportional to the
squared distance to the nearest centroid chosen so far:

  1) first centroid: a point chosen uniformly
  2) for every point, D(p)^2 = squared distance to the nearest chosen centroid
  3) draw r uniformly in [0, sum D^2)
  4) walk the cumulative sum of D^2, the first point where it exceeds r wins
  5) repeat 2-4 until k centroids
"""
from __future__ import annotations

import numpy as np

from ..geometry.distance import squared_distances
from ..geometry.types import FloatArray, Points2D
from ..rng import RngLike, make_rng


def kmeans_plus_plus(pts: Points2D, k: int, *, rng: RngLike = 0) -> FloatArray:
    """
    Choose k initial centroids from pts.

    pts: (N,2), N >= k >= 1 (checked by the caller)
    Returns (k,2) centroid coordinates, copies of input points.

    If every point already coincides with a chosen centroid (total weight 0),
    the first point is taken.
    """
    gen = make_rng(rng)
    n = pts.shape[0]

    centers = np.empty((k, 2), dtype=np.float64)
    first = int(gen.integers(0, n))
    centers[0] = pts[first]

    for i in range(1, k):
        # Squared distance of every point to its nearest chosen centroid
        d2 = squared_distances(pts, centers[:i]).min(axis=1)
        total_weight = float(np.sum(d2))

        if total_weight <= 0.0:
            centers[i] = pts[0]
            continue

        draw = float(gen.uniform(0.0, total_weight))

        # First index where the running sum exceeds the draw
        cumulative = np.cumsum(d2)
        idx = int(np.searchsorted(cumulative, draw, side="right"))
        idx = min(idx, n - 1)
        centers[i] = pts[idx]

    return centers
