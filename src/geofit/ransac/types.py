"""
Model interface and result container for the generic RANSAC loop.

Defines:
- ModelFitter protocol: what a model must provide to be estimated by RANSAC
- RansacResult: structured output (model + inlier mask + stats)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Protocol, TypeVar

from ..geometry.types import FloatArray, Mask, Points2D

# For lines this is LineModel.
# Kept generic so the loop in core.py does not know about lines.
M = TypeVar("M")


class ModelFitter(Protocol[M]):
    """
    Interface that a model must implement to be usable by the generic RANSAC implementation.

    RANSAC steps:
    1) Fit a model from a minimal sample
    2) Refit a better model from all inliers (least squares)
    3) Score all points with a per-point residual error
    """

    sample_size: int

    def fit_minimal(self, sample: Points2D) -> Optional[M]:
        """
        Fit from exactly `sample_size` points.
        Return None if the sample is degenerate (e.g. a vertical pair for a line).
        """
        ...

    def fit_least_squares(self, points: Points2D) -> Optional[M]:
        """
        Refit the model using all inliers.
        Return None if the set is degenerate or the solve fails.
        """
        ...

    def residuals(self, model: M, points: Points2D) -> FloatArray:
        """
        Return a vector of residual errors, one per point.
        Shape: (N,). Smaller = better.
        """
        ...


# ---------- RANSAC output container ----------
@dataclass(frozen=True)
class RansacResult(Generic[M]):
    model: M            # refit model on the best inlier set
    inliers: Mask       # boolean mask of inliers of the best candidate
    num_inliers: int    # count of True values in inliers
    rms_error: float    # RMS residual of the inliers under the refit model
    iterations: int     # how many RANSAC iterations were actually run
    threshold: float    # the inlier threshold used
