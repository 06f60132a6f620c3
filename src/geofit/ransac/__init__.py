"""
RANSAC package

This module provides:
- A reusable generic RANSAC implementation
- Model interface definitions
- The line model: 2-point minimal fit, least squares fit, perpendicular residuals
- The robust line estimator built on top of them
"""

from .types import ModelFitter, RansacResult

from .line import (
    fit_line_minimal, fit_line_least_squares, sum_squared_error, line_residuals,
)

from .line_fitter import LineFitter, LeastSquaresLineFitter

from .core import ransac, required_iterations

from .estimator import ransac_line, RobustLineEstimator

__all__ = [
    "ModelFitter", "RansacResult",
    "fit_line_minimal", "fit_line_least_squares", "sum_squared_error", "line_residuals",
    "LineFitter", "LeastSquaresLineFitter",
    "ransac", "required_iterations",
    "ransac_line", "RobustLineEstimator",
]
