"""
k-means clustering (Lloyd iterations) with k-means++ seeding.

Each iteration:
  1) assignment: every point gets the index of its nearest centroid
  2) update: every centroid moves to the mean of its assigned points
  3) convergence: stop when no centroid coordinate moved by more than tolerance

Every step returns new arrays / tuples, nothing is mutated in place, so a
single iteration can be run and inspected on its own.

Empty cluster: a centroid with no assigned points keeps its coordinates.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

import numpy as np

from ..debug import debug_enabled, trace
from ..errors import InvalidParameterError
from ..geometry.distance import squared_distances
from ..geometry.types import (
    Centroid,
    FloatArray,
    IntArray,
    LabeledPoint,
    Points2D,
    PointsLike,
    as_points,
    to_centroid_tuple,
)
from ..params import KMeansParams
from ..rng import RngLike, make_rng
from .seeding import kmeans_plus_plus

CentroidsLike = Union[FloatArray, Sequence[Centroid]]


# ---------- Result container ----------
@dataclass(frozen=True)
class ClusterResult:
    """
    Output of one k-means run.

    Unpacks like the plain triple:
        points, centroids, iterations = kmeans(data, 3)
    """
    points: tuple[LabeledPoint, ...]
    centroids: tuple[Centroid, ...]
    iterations: int
    converged: bool

    def __iter__(self) -> Iterator:
        return iter((self.points, self.centroids, self.iterations))

    @property
    def k(self) -> int:
        return len(self.centroids)

    @property
    def labels(self) -> IntArray:
        return np.array([p.cluster_index for p in self.points], dtype=np.int64)

    @property
    def wss(self) -> float:
        return within_cluster_sum_of_squares(self.points, self.centroids)


# ---------- Validation ----------
def check_k(k: int, n: int) -> None:
    """1 <= k <= n, otherwise InvalidParameterError."""
    if k <= 0:
        raise InvalidParameterError("k", k, "must be >= 1")
    if k > n:
        raise InvalidParameterError("k", k, f"greater than the number of points ({n})")


def _as_centers(centroids: CentroidsLike) -> FloatArray:
    return as_points(centroids)


# ---------- Array level steps ----------
def assign_labels(pts: Points2D, centers: FloatArray) -> IntArray:
    """
    Index of the nearest centroid for every point. Shape (N,).

    np.argmin keeps the first minimum, so ties go to the lowest index.
    """
    if pts.shape[0] == 0:
        return np.zeros((0,), dtype=np.int64)
    dist = np.sqrt(squared_distances(pts, centers))
    return np.argmin(dist, axis=1).astype(np.int64)


def update_centers(pts: Points2D, labels: IntArray, prev_centers: FloatArray) -> FloatArray:
    """
    Mean of the points assigned to each centroid. Shape (K,2).

    Centroids with no members keep their previous coordinates.
    """
    k = prev_centers.shape[0]
    new_centers = prev_centers.astype(np.float64, copy=True)

    counts = np.bincount(labels, minlength=k)
    sum_x = np.bincount(labels, weights=pts[:, 0], minlength=k)
    sum_y = np.bincount(labels, weights=pts[:, 1], minlength=k)

    nonempty = counts > 0
    new_centers[nonempty, 0] = sum_x[nonempty] / counts[nonempty]
    new_centers[nonempty, 1] = sum_y[nonempty] / counts[nonempty]
    return new_centers


def has_converged(old_centers: CentroidsLike, new_centers: CentroidsLike, tolerance: float = 1e-4) -> bool:
    """True when every |dx| and |dy| is <= tolerance."""
    old = _as_centers(old_centers)
    new = _as_centers(new_centers)
    if old.shape != new.shape:
        return False
    return bool(np.all(np.abs(old - new) <= tolerance))


# ---------- Value level steps ----------
def assign_clusters(points: PointsLike, centroids: CentroidsLike) -> tuple[LabeledPoint, ...]:
    """Assignment step on value types: new LabeledPoint tuple."""
    pts = as_points(points)
    labels = assign_labels(pts, _as_centers(centroids))
    return _labeled(pts, labels)


def update_centroids(points: Sequence[LabeledPoint], centroids: CentroidsLike) -> tuple[Centroid, ...]:
    """
    Update step on value types.

    points carry their cluster_index; unassigned points (-1) are ignored.
    centroids are the previous ones, kept for empty clusters.
    """
    prev = _as_centers(centroids)
    k = prev.shape[0]
    members = [p for p in points if 0 <= p.cluster_index < k]
    if not members:
        return to_centroid_tuple(prev)

    pts = as_points(members)
    labels = np.array([p.cluster_index for p in members], dtype=np.int64)
    return to_centroid_tuple(update_centers(pts, labels, prev))


def within_cluster_sum_of_squares(points: PointsLike, centroids: CentroidsLike) -> float:
    """
    WSS: sum over points of the squared distance to the *nearest* centroid.

    Labels are not used, so the value is valid even when they are stale.
    """
    pts = as_points(points)
    if pts.shape[0] == 0:
        return 0.0
    centers = _as_centers(centroids)
    if centers.shape[0] == 0:
        raise InvalidParameterError("centroids", "()", "at least one centroid is needed")
    return float(np.sum(squared_distances(pts, centers).min(axis=1)))


def _labeled(pts: Points2D, labels: IntArray) -> tuple[LabeledPoint, ...]:
    return tuple(
        LabeledPoint(float(x), float(y), int(c)) for (x, y), c in zip(pts, labels)
    )


# ---------- Main loop ----------
def kmeans(
        points: PointsLike,
        k: int,
        *,
        max_iterations: int = 100,
        tolerance: float = 1e-4,
        rng: RngLike = 0,
        initial_centroids: Optional[CentroidsLike] = None,
) -> ClusterResult:
    """
    Cluster points into k groups.

    Inputs:
    - points: (N,2) array or sequence of points
    - k: number of clusters, 1 <= k <= N
    - max_iterations: hard bound on iterations (hitting it is not an error)
    - tolerance: convergence threshold on centroid movement
    - rng: numpy Generator or int seed (used for k-means++ seeding)
    - initial_centroids: skip seeding and start from these (must have k entries)

    Returns ClusterResult(points, centroids, iterations, converged).
    The labels are those of the last assignment step.
    Empty input gives an empty result (no points, no centroids, 0 iterations).
    """
    params = KMeansParams(k=k, max_iterations=max_iterations, tolerance=tolerance)
    pts = as_points(points)
    return run_kmeans(pts, params, rng, initial_centroids)


def run_kmeans(
        pts: Points2D,
        params: KMeansParams,
        rng: RngLike,
        initial_centroids: Optional[CentroidsLike] = None,
) -> ClusterResult:
    """Lloyd loop on an (N,2) array with validated params."""
    n = pts.shape[0]
    k = params.k

    # Empty input is not an error: nothing to cluster
    if n == 0:
        return ClusterResult(points=(), centroids=(), iterations=0, converged=False)
    check_k(k, n)

    if initial_centroids is not None:
        centers = _as_centers(initial_centroids)
        if centers.shape[0] != k:
            raise InvalidParameterError(
                "initial_centroids", centers.shape[0], f"expected {k} centroids")
    else:
        centers = kmeans_plus_plus(pts, k, rng=make_rng(rng))

    labels = np.full((n,), -1, dtype=np.int64)
    converged = False
    iteration = 0

    while not converged and iteration < params.max_iterations:
        labels = assign_labels(pts, centers)
        new_centers = update_centers(pts, labels, centers)
        converged = has_converged(centers, new_centers, params.tolerance)

        if debug_enabled():
            trace("KMEANS", f"k={k} iter={iteration + 1} "
                            f"max_shift={float(np.max(np.abs(new_centers - centers))):.6g} "
                            f"converged={converged}")

        centers = new_centers
        iteration += 1

    return ClusterResult(
        points=_labeled(pts, labels),
        centroids=to_centroid_tuple(centers),
        iterations=iteration,
        converged=converged,
    )

