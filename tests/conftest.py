"""Shared fixtures and test doubles."""

import numpy as np
import pytest

from geofit.synthetic import gaussian_blobs, line_with_outliers


class ScriptedRng:
    """
    Stand-in for numpy's Generator that replays fixed draws.

    integers() pops from `ints`, uniform() pops from `floats`.
    """

    def __init__(self, ints=(), floats=()):
        self.ints = list(ints)
        self.floats = list(floats)

    def integers(self, low, high=None, size=None):
        value = self.ints.pop(0)
        return np.asarray(value) if size is not None else value

    def uniform(self, low=0.0, high=1.0, size=None):
        return self.floats.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def line_data():
    """200 exact points on y = 2x + 1 plus 150 uniform outliers."""
    return line_with_outliers(2.0, 1.0, n_inliers=200, n_outliers=150, rng=3)


BLOB_CENTERS = [(0.0, 0.0), (50.0, 0.0), (0.0, 50.0)]


@pytest.fixture
def blob_centers():
    return BLOB_CENTERS


@pytest.fixture
def blobs():
    """Three well separated clusters, 50 points each."""
    return gaussian_blobs(BLOB_CENTERS, n_per_cluster=50, std=1.0, rng=5)
