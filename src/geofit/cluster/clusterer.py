"""
KMeansClusterer: k-means behind a KMeansParams default set.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..geometry.types import PointsLike, as_points
from ..params import KMeansParams
from ..rng import RngLike
from .elbow import ElbowResult, elbow_curve
from .kmeans import CentroidsLike, ClusterResult, run_kmeans, within_cluster_sum_of_squares


@dataclass(frozen=True)
class KMeansClusterer:
    """
    clusterer = KMeansClusterer(KMeansParams(k=3))
    points, centroids, iterations = clusterer.cluster(data, rng=7)

    Keyword arguments given to a call override the stored params for that call.
    """
    params: KMeansParams = field(default_factory=KMeansParams)

    def cluster(
            self,
            points: PointsLike,
            k: Optional[int] = None,
            *,
            max_iterations: Optional[int] = None,
            tolerance: Optional[float] = None,
            rng: RngLike = 0,
    ) -> ClusterResult:
        params = self.params.override(k=k, max_iterations=max_iterations, tolerance=tolerance)
        return run_kmeans(as_points(points), params, rng)

    def within_cluster_sum_of_squares(self, points: PointsLike, centroids: CentroidsLike) -> float:
        return within_cluster_sum_of_squares(points, centroids)

    def elbow_curve(
            self,
            points: PointsLike,
            min_k: int = 1,
            max_k: int = 10,
            *,
            max_iterations: Optional[int] = None,
            tolerance: Optional[float] = None,
            rng: RngLike = 0,
    ) -> ElbowResult:
        params = self.params.override(max_iterations=max_iterations, tolerance=tolerance)
        return elbow_curve(
            points, min_k, max_k,
            max_iterations=params.max_iterations,
            tolerance=params.tolerance,
            rng=rng,
        )

    def choose_k(
            self,
            points: PointsLike,
            min_k: int = 1,
            max_k: int = 10,
            *,
            max_iterations: Optional[int] = None,
            tolerance: Optional[float] = None,
            rng: RngLike = 0,
    ) -> int:
        return self.elbow_curve(
            points, min_k, max_k,
            max_iterations=max_iterations, tolerance=tolerance, rng=rng,
        ).best_k
