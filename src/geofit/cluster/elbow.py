"""
Model-order selection for k-means (elbow method).

WSS always drops when k grows, so the minimum is useless for choosing k.
The elbow is where adding a cluster stops paying off: the WSS curve bends
from steep to flat.

We run the full clustering for every k in [min_k, max_k] and take the k with
the largest discrete second difference

    wss[k-1] - 2 * wss[k] + wss[k+1]

i.e. the sharpest drop in marginal improvement. A curve without a real
drop (e.g. all points identical) keeps the smallest k.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..debug import trace
from ..errors import InvalidParameterError
from ..geometry.types import PointsLike, as_points
from ..params import KMeansParams
from ..rng import RngLike, make_rng
from .kmeans import run_kmeans

# Fraction of the WSS the elbow step has to remove to count as an elbow.
MIN_RELATIVE_DROP = 0.5


@dataclass(frozen=True)
class ElbowResult:
    ks: tuple[int, ...]         # candidate cluster counts, ascending
    wss: tuple[float, ...]      # WSS of the converged clustering for each k
    best_k: int                 # elbow of the curve

    def as_dict(self) -> dict[int, float]:
        return dict(zip(self.ks, self.wss))


def _sharp_drop(w, i: int) -> bool:
    """True when going from ks[i-1] to ks[i] removes at least MIN_RELATIVE_DROP of the WSS."""
    prev = float(w[i - 1])
    if prev <= 0.0:
        return False
    return (prev - float(w[i])) >= MIN_RELATIVE_DROP * prev


def elbow_k(ks: Sequence[int], wss: Sequence[float]) -> int:
    """
    Pick the elbow of a WSS curve.

    Candidate:
    - 3 or more values: interior k with the maximum second difference
      (first one on ties)
    - 2 values: the larger k
    - 1 value: that k

    The candidate is only accepted if the step into it removes at least
    half of the WSS left at the previous k. Otherwise (flat curve, all-zero
    curve, slow steady decay) the smallest k is returned.
    """
    if len(ks) != len(wss):
        raise ValueError(f"ks and wss must have the same length, got {len(ks)} vs {len(wss)}")
    if len(ks) == 0:
        raise ValueError("empty WSS curve")
    if len(ks) == 1:
        return int(ks[0])

    w = np.asarray(wss, dtype=np.float64)
    if len(ks) == 2:
        idx = 1
    else:
        second_diff = w[:-2] - 2.0 * w[1:-1] + w[2:]
        best = int(np.argmax(second_diff))
        if second_diff[best] <= 0.0:
            return int(ks[0])
        idx = 1 + best

    return int(ks[idx]) if _sharp_drop(w, idx) else int(ks[0])


def elbow_curve(
        points: PointsLike,
        min_k: int = 1,
        max_k: int = 10,
        *,
        max_iterations: int = 100,
        tolerance: float = 1e-4,
        rng: RngLike = 0,
) -> ElbowResult:
    """
    WSS for every k in [min_k, max_k] and the elbow among them.

    max_k is clamped to the number of points. One generator is shared by
    all runs, so the whole curve is reproducible from a single seed.
    Empty input gives an empty curve with best_k = min_k.
    """
    if min_k < 1:
        raise InvalidParameterError("min_k", min_k, "must be >= 1")
    if max_k < min_k:
        raise InvalidParameterError("max_k", max_k, f"must be >= min_k ({min_k})")

    pts = as_points(points)
    n = pts.shape[0]
    if n == 0:
        return ElbowResult(ks=(), wss=(), best_k=min_k)

    upper = min(max_k, n)
    if upper < min_k:
        raise InvalidParameterError("min_k", min_k, f"greater than the number of points ({n})")

    gen = make_rng(rng)
    ks = []
    wss = []
    for k in range(min_k, upper + 1):
        params = KMeansParams(k=k, max_iterations=max_iterations, tolerance=tolerance)
        res = run_kmeans(pts, params, gen)
        ks.append(k)
        wss.append(res.wss)
        trace("ELBOW", f"k={k} wss={res.wss:.6g} iterations={res.iterations}")

    best_k = elbow_k(ks, wss)
    trace("ELBOW", f"best_k={best_k}")
    return ElbowResult(ks=tuple(ks), wss=tuple(wss), best_k=best_k)


def choose_k(
        points: PointsLike,
        min_k: int = 1,
        max_k: int = 10,
        *,
        max_iterations: int = 100,
        tolerance: float = 1e-4,
        rng: RngLike = 0,
) -> int:
    """Elbow k for points. See elbow_curve() for the WSS values themselves."""
    return elbow_curve(
        points, min_k, max_k,
        max_iterations=max_iterations, tolerance=tolerance, rng=rng,
    ).best_k
