"""
Opt-in debug traces.

Set GEOFIT_DEBUG=1 to print progress lines like

    [RANSAC] better model: inliers=201/350, slope=2.001, intercept=0.98
    [KMEANS] iter=4 max_shift=0.000012 converged=True
"""
from __future__ import annotations

import os

_ENV_FLAG = "GEOFIT_DEBUG"


def debug_enabled() -> bool:
    return os.environ.get(_ENV_FLAG, "0") == "1"


def trace(tag: str, message: str) -> None:
    if debug_enabled():
        print(f"[{tag}] {message}")
