"""
Random source handling.

Every estimator takes an explicit `rng`: either a numpy Generator (used as is,
its state advances) or an int seed (a fresh Generator per call). There is no
module level random state.
"""
from __future__ import annotations

from typing import Union

import numpy as np

RngLike = Union[np.random.Generator, int]


def make_rng(rng: RngLike = 0) -> np.random.Generator:
    """
    int seed -> np.random.default_rng(seed)
    Generator (or any object with `integers` and `uniform`) -> returned unchanged

    Anything else (None, bool, float, legacy RandomState) raises TypeError.
    """
    if isinstance(rng, bool):
        raise TypeError(f"rng must be a numpy Generator or an int seed, got {rng!r}")
    if isinstance(rng, (int, np.integer)):
        return np.random.default_rng(int(rng))
    if hasattr(rng, "integers") and hasattr(rng, "uniform"):
        return rng
    raise TypeError(f"rng must be a numpy Generator or an int seed, got {type(rng).__name__}")
