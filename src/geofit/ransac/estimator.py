"""
Robust line estimation: the generic RANSAC loop specialised to lines.

ransac_line() is the functional entry point, RobustLineEstimator holds a
RansacParams default set and accepts per-call overrides.

Failure is soft: if no sample ever produced a qualifying candidate
(too few points, every pair vertical, nothing reached min_inliers) the
result is the degenerate model with no inliers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..geometry.types import FitResult, LineModel, PointsLike, as_points, to_point_tuple
from ..params import RansacParams
from ..rng import RngLike
from .core import ransac
from .line_fitter import LineFitter


def ransac_line(
        points: PointsLike,
        *,
        iterations: int = 1000,
        distance_threshold: float = 100.0,
        min_inliers: int = 0,
        confidence: Optional[float] = None,
        eps: float = 1e-4,
        rng: RngLike = 0,
) -> FitResult:
    """
    Fit y = slope*x + intercept robustly.

    Returns FitResult(model, inliers): the least squares refit over the
    largest consensus set found, inliers in input order.
    """
    params = RansacParams(
        iterations=iterations,
        distance_threshold=distance_threshold,
        min_inliers=min_inliers,
        confidence=confidence,
        eps=eps,
    )
    return _estimate(as_points(points), params, rng)


def _estimate(pts, params: RansacParams, rng: RngLike) -> FitResult:
    res = ransac(
        LineFitter(eps=params.eps),
        pts,
        threshold=params.distance_threshold,
        max_iters=params.iterations,
        min_inliers=params.min_inliers,
        confidence=params.confidence,
        rng=rng,
    )

    if res is None:
        return FitResult(
            model=LineModel.degenerate(),
            inliers=(),
            iterations=params.iterations if pts.shape[0] >= 2 else 0,
            threshold=params.distance_threshold,
        )

    return FitResult(
        model=res.model,
        inliers=to_point_tuple(pts[res.inliers]),
        iterations=res.iterations,
        threshold=res.threshold,
        rms_error=res.rms_error,
    )


@dataclass(frozen=True)
class RobustLineEstimator:
    """
    RANSAC line estimator.

    estimator = RobustLineEstimator(RansacParams(distance_threshold=2.0))
    result = estimator.estimate(points, rng=np.random.default_rng(7))
    """
    params: RansacParams = field(default_factory=RansacParams)

    def estimate(
            self,
            points: PointsLike,
            *,
            iterations: Optional[int] = None,
            distance_threshold: Optional[float] = None,
            min_inliers: Optional[int] = None,
            confidence: Optional[float] = None,
            rng: RngLike = 0,
    ) -> FitResult:
        params = self.params.override(
            iterations=iterations,
            distance_threshold=distance_threshold,
            min_inliers=min_inliers,
            confidence=confidence,
        )
        return _estimate(as_points(points), params, rng)
