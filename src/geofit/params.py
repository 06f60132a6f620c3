"""
Parameter sets for the estimators.

Every value has a default and can be overridden per call; the estimator
classes hold one of these and the call-level keyword arguments win.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidParameterError


@dataclass(frozen=True)
class RansacParams:
    """
    Parameters for the robust line estimator.

    iterations:
      - Number of minimal samples drawn.
      - More iterations => higher chance of hitting an all-inlier pair.

    distance_threshold:
      - A point is an inlier if its perpendicular distance to the candidate
        line is strictly below this value (same units as the data).

    min_inliers:
      - A candidate needs at least this many inliers to become the best model.

    confidence:
      - None: always run all `iterations`.
      - p in (0, 1): stop early once enough samples were drawn to hit an
        all-inlier pair with probability p, for the current best inlier ratio.

    eps:
      - |x2 - x1| below this rejects a sample pair as (near-)vertical.
      - Also the tolerance on the least-squares denominator.
    """
    iterations: int = 1000
    distance_threshold: float = 100.0
    min_inliers: int = 0
    confidence: Optional[float] = None
    eps: float = 1e-4

    def __post_init__(self) -> None:
        if self.iterations < 0:
            raise InvalidParameterError("iterations", self.iterations, "must be >= 0")
        if not self.distance_threshold > 0.0:
            raise InvalidParameterError("distance_threshold", self.distance_threshold, "must be > 0")
        if self.min_inliers < 0:
            raise InvalidParameterError("min_inliers", self.min_inliers, "must be >= 0")
        if self.confidence is not None and not (0.0 < self.confidence < 1.0):
            raise InvalidParameterError("confidence", self.confidence, "must be in (0, 1)")
        if self.eps < 0.0:
            raise InvalidParameterError("eps", self.eps, "must be >= 0")

    def override(self, **changes) -> "RansacParams":
        """Copy with the non-None keyword arguments applied (validated again)."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class KMeansParams:
    """
    Parameters for k-means.

    k:
      - Number of clusters. Must satisfy 1 <= k <= number of points
        (the upper bound is checked when the data is known).

    max_iterations:
      - Hard bound on assignment/update rounds. Reaching it is not an error.

    tolerance:
      - Converged when every centroid coordinate moved by <= tolerance.
    """
    k: int = 3
    max_iterations: int = 100
    tolerance: float = 1e-4

    def __post_init__(self) -> None:
        if self.k <= 0:
            raise InvalidParameterError("k", self.k, "must be >= 1")
        if self.max_iterations < 1:
            raise InvalidParameterError("max_iterations", self.max_iterations, "must be >= 1")
        if self.tolerance < 0.0:
            raise InvalidParameterError("tolerance", self.tolerance, "must be >= 0")

    def override(self, **changes) -> "KMeansParams":
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes) if changes else self
