"""
Generic RANSAC loop (model-agnostic).

RANSAC overview:
- Randomly sample a *minimal* subset of points
- Fit a candidate model from that subset
- Score all points by computing residual errors
- Mark inliers where error < threshold
- Keep the candidate with the most inliers
- Refit using all its inliers (least squares) to get the stored model

Uses the ModelFitter Protocol from types.py, so the same loop runs for any
model that can be fitted from a minimal sample.
"""
from __future__ import annotations

import math
from typing import Optional, TypeVar

import numpy as np

from ..debug import debug_enabled, trace
from ..geometry.types import Mask, Points2D
from ..rng import RngLike, make_rng
from .types import ModelFitter, RansacResult

M = TypeVar("M")

# Upper bound returned by required_iterations when no sample can succeed.
MAX_REQUIRED_ITERATIONS = 10 ** 9


def required_iterations(
        confidence: float,
        outlier_ratio: float,
        sample_size: int = 2,
) -> int:
    """
    Number of RANSAC iterations needed so that the probability of having drawn
    at least ONE all-inlier minimal sample is >= confidence.

    outlier ratio e, inlier ratio w = 1 - e, minimal sample s:
    - P(all-inliers) = w^s
    - P(not-all-inlier-for-N-times) = (1 - w^s)^N
    - 1 - (1 - w^s)^N >= p

    Formula:
       N >= log(1 - p) / log(1 - (1 - e)^s)

    Edge cases:
     - e == 0  -> 1 iteration is enough
     - e == 1  -> impossible, return MAX_REQUIRED_ITERATIONS
    """
    s = int(sample_size)
    if s <= 0:
        raise ValueError("sample_size must be >= 1")

    # Clamp inputs to avoid log(0)
    p = float(np.clip(confidence, 1e-12, 1.0 - 1e-12))
    e = float(np.clip(outlier_ratio, 0.0, 1.0))

    if e <= 0.0:
        return 1
    if e >= 1.0:
        return MAX_REQUIRED_ITERATIONS

    w_to_s = (1.0 - e) ** s

    # If w^s is extremely tiny, log(1 - w^s) is close to 0
    w_to_s = float(np.clip(w_to_s, 1e-12, 1.0 - 1e-12))

    n = math.ceil(math.log(1.0 - p) / math.log(1.0 - w_to_s))
    return int(min(max(1, n), MAX_REQUIRED_ITERATIONS))


def ransac(
        model_fitter: ModelFitter[M],
        points: Points2D,
        *,
        threshold: float,
        max_iters: int = 1000,
        min_inliers: int = 0,
        confidence: Optional[float] = None,
        rng: RngLike = 0,
) -> Optional[RansacResult[M]]:
    """
    Run RANSAC to fit a model to points.

    Inputs:
    - model_fitter: provides sample_size, fit_minimal, fit_least_squares, residuals
    - points: (N,2) points
    - threshold: a point is an inlier when its residual is strictly below it
    - max_iters: number of samples drawn (upper bound when confidence is set)
    - min_inliers: a candidate needs at least this many inliers to be kept
    - confidence: if set, stop once enough samples were drawn for this
      success probability at the current best inlier ratio
    - rng: numpy Generator or int seed

    Sampling draws `sample_size` indices independently and uniformly; a draw
    with a repeated index is skipped, as is a degenerate minimal fit.

    Best hypothesis: strictly more inliers than the current best. The first
    candidate reaching a count wins; later ties never replace it.

    Returns:
    - RansacResult with the refit model + inlier mask, or None if no
      candidate ever qualified.
    """
    # ---------- Input validation ----------
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected points shape (N,2), got {points.shape}")

    n = points.shape[0]
    s = int(model_fitter.sample_size)
    if n < s:
        # No usable sample, every iteration would be skipped
        return None

    gen = make_rng(rng)

    # Track the best hypothesis
    best_model: Optional[M] = None
    best_inliers: Optional[Mask] = None
    best_num_inliers = 0

    target_iters = max_iters
    iters_run = 0

    # ---------- Main RANSAC Loop ----------
    i = 0
    while i < max_iters and i < target_iters:
        i += 1
        iters_run = i

        # Independent uniform draws; reject coinciding indices
        sample_idx = np.asarray(gen.integers(0, n, size=s))
        if np.unique(sample_idx).size != s:
            continue

        # Fit model from minimal set, None if degenerate
        model = model_fitter.fit_minimal(points[sample_idx])
        if model is None:
            continue

        # Residuals for all points (shape: (N,))
        err = model_fitter.residuals(model, points)
        inliers: Mask = err < threshold
        num_inliers = int(np.count_nonzero(inliers))

        if num_inliers <= best_num_inliers or num_inliers < min_inliers:
            continue

        # Refit on the consensus set right away, the stored best is always refined
        refit = model_fitter.fit_least_squares(points[inliers])
        best_model = refit if refit is not None else model
        best_inliers = inliers
        best_num_inliers = num_inliers

        if confidence is not None:
            w = best_num_inliers / float(n)
            iter_needed = required_iterations(confidence, 1.0 - w, s)
            target_iters = min(target_iters, max(iter_needed, iters_run))

        if debug_enabled():
            trace("RANSAC", f"better model: inliers={best_num_inliers}/{n}, iter={iters_run}, "
                            f"target_iters={target_iters}, model={best_model}")

    # If valid model not found, return None
    if best_model is None or best_inliers is None:
        return None

    final_err = model_fitter.residuals(best_model, points)[best_inliers]
    final_rms = float(np.sqrt(np.mean(final_err * final_err))) if final_err.size else 0.0

    return RansacResult(
        model=best_model,
        inliers=best_inliers,
        num_inliers=best_num_inliers,
        rms_error=final_rms,
        iterations=iters_run,
        threshold=float(threshold),
    )
