"""
Adapters: make the line functions conform to the ModelFitter Protocol,
and expose least squares on its own.

This keeps ransac/core.py generic and reusable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..geometry.types import FloatArray, LineModel, Points2D, PointsLike
from .line import (
    DEFAULT_EPS,
    fit_line_least_squares,
    fit_line_minimal,
    line_residuals,
    sum_squared_error,
)
from .types import ModelFitter


@dataclass(frozen=True)
class LineFitter(ModelFitter[LineModel]):
    """
    Line model for RANSAC: 2-point hypotheses, least squares refit,
    perpendicular distance residuals.
    """
    eps: float = DEFAULT_EPS
    sample_size: int = 2

    def fit_minimal(self, sample: Points2D) -> Optional[LineModel]:
        return fit_line_minimal(sample, eps=self.eps)

    def fit_least_squares(self, points: Points2D) -> Optional[LineModel]:
        return fit_line_least_squares(points, eps=self.eps)

    def residuals(self, model: LineModel, points: Points2D) -> FloatArray:
        return line_residuals(model, points)


@dataclass(frozen=True)
class LeastSquaresLineFitter:
    """Ordinary least squares line fit (vertical residuals)."""
    eps: float = DEFAULT_EPS

    def fit(self, points: PointsLike) -> LineModel:
        return fit_line_least_squares(points, eps=self.eps)

    def sum_squared_error(self, points: PointsLike, model: LineModel) -> float:
        return sum_squared_error(points, model)
