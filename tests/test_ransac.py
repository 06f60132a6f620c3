"""Tests for the RANSAC loop and the robust line estimator."""

import numpy as np
import pytest

from geofit import (
    FitResult,
    InvalidParameterError,
    LineModel,
    Point2D,
    RansacParams,
    RobustLineEstimator,
    ransac_line,
    required_iterations,
)
from geofit.ransac import LineFitter, fit_line_minimal, ransac
from geofit.ransac.core import MAX_REQUIRED_ITERATIONS
from geofit.synthetic import line_with_outliers


def test_recovers_line_under_outliers(line_data):
    """200 exact points, 150 outliers: slope/intercept recovered, inliers kept."""
    pts, is_inlier = line_data
    res = ransac_line(pts, iterations=500, distance_threshold=1.0, rng=11)

    assert res.model.slope == pytest.approx(2.0, abs=0.05)
    assert res.model.intercept == pytest.approx(1.0, abs=1.0)
    assert res.num_inliers >= 180
    assert res.iterations == 500
    assert res.threshold == 1.0


def test_recovers_line_with_noise():
    pts, _ = line_with_outliers(-1.0, 40.0, n_inliers=150, n_outliers=100, noise=0.5, rng=21)
    res = ransac_line(pts, iterations=800, distance_threshold=1.5, rng=4)
    assert res.model.slope == pytest.approx(-1.0, abs=0.05)
    assert res.model.intercept == pytest.approx(40.0, abs=1.5)
    assert res.num_inliers >= 130


def test_same_seed_same_result(line_data):
    pts, _ = line_data
    a = ransac_line(pts, iterations=200, distance_threshold=1.0, rng=99)
    b = ransac_line(pts, iterations=200, distance_threshold=1.0, rng=99)
    assert a == b

    c = ransac_line(pts, iterations=200, distance_threshold=1.0, rng=np.random.default_rng(99))
    d = ransac_line(pts, iterations=200, distance_threshold=1.0, rng=np.random.default_rng(99))
    assert c == d


def test_vertical_pair_is_skipped(scripted_rng):
    """A pair with x1 == x2 never becomes a candidate."""
    pts = [(1.0, 0.0), (1.0, 5.0), (0.0, 0.0), (2.0, 2.0)]

    only_vertical = ransac_line(pts, iterations=1, distance_threshold=0.5, rng=scripted_rng(ints=[[0, 1]]))
    assert only_vertical.model == LineModel.degenerate()
    assert only_vertical.inliers == ()

    res = ransac_line(pts, iterations=2, distance_threshold=0.5, rng=scripted_rng(ints=[[0, 1], [2, 3]]))
    assert res.model.slope == pytest.approx(1.0)
    assert res.model.intercept == pytest.approx(0.0)
    assert res.inliers == (Point2D(0.0, 0.0), Point2D(2.0, 2.0))


def test_vertical_pairs_never_reach_scoring():
    """Instrumented fitter: every sample with equal x is rejected by fit_minimal."""
    calls = []

    class RecordingFitter(LineFitter):
        def fit_minimal(self, sample):
            model = super().fit_minimal(sample)
            calls.append((sample.copy(), model))
            return model

    xs = np.repeat([0.0, 1.0, 2.0], 5)
    pts = np.column_stack([xs, np.arange(15.0)])
    ransac(RecordingFitter(), pts, threshold=0.5, max_iters=300, rng=2)

    assert calls
    for sample, model in calls:
        if sample[0, 0] == sample[1, 0]:
            assert model is None
        else:
            assert model is not None and model.is_finite


def test_duplicate_index_draw_is_skipped(scripted_rng):
    pts = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)]
    res = ransac_line(pts, iterations=1, distance_threshold=0.5, rng=scripted_rng(ints=[[1, 1]]))
    assert res.model == LineModel.degenerate()
    assert res.num_inliers == 0


def test_first_model_wins_ties(scripted_rng):
    """Two candidates with equal inlier counts: the first one is kept."""
    pts = [(0.0, 0.0), (1.0, 1.0), (0.0, 10.0), (1.0, 11.0)]
    res = ransac_line(pts, iterations=2, distance_threshold=0.5, rng=scripted_rng(ints=[[0, 1], [2, 3]]))
    assert res.model.slope == pytest.approx(1.0)
    assert res.model.intercept == pytest.approx(0.0)
    assert res.inliers == (Point2D(0.0, 0.0), Point2D(1.0, 1.0))


def test_inliers_keep_input_order(scripted_rng):
    pts = [(0.0, 0.0), (5.0, 100.0), (1.0, 1.0), (2.0, 2.0)]
    res = ransac_line(pts, iterations=1, distance_threshold=0.5, rng=scripted_rng(ints=[[3, 0]]))
    assert res.inliers == (Point2D(0.0, 0.0), Point2D(1.0, 1.0), Point2D(2.0, 2.0))


def test_min_inliers_not_reached_gives_degenerate(line_data):
    pts, _ = line_data
    res = ransac_line(pts, iterations=100, distance_threshold=1.0, min_inliers=10_000, rng=0)
    assert res.model == LineModel.degenerate()
    assert res.inliers == ()


def test_candidate_below_min_inliers_is_not_kept(scripted_rng, monkeypatch, capsys):
    """A pair beating the current best but short of min_inliers never becomes the best."""
    pts = [(0.0, 0.0), (1.0, 1.0), (0.0, 10.0), (1.0, 11.0), (2.0, 12.0)]
    monkeypatch.setenv("GEOFIT_DEBUG", "1")

    # y = x has 2 inliers, min_inliers is 3
    short = ransac_line(pts, iterations=1, distance_threshold=0.5, min_inliers=3,
                        rng=scripted_rng(ints=[[0, 1]]))
    assert short.model == LineModel.degenerate()
    assert short.inliers == ()
    assert "[RANSAC]" not in capsys.readouterr().out

    # y = x + 10 has 3 inliers and is the only accepted candidate
    res = ransac_line(pts, iterations=2, distance_threshold=0.5, min_inliers=3,
                      rng=scripted_rng(ints=[[0, 1], [2, 3]]))
    assert res.model.slope == pytest.approx(1.0)
    assert res.model.intercept == pytest.approx(10.0)
    assert res.inliers == (Point2D(0.0, 10.0), Point2D(1.0, 11.0), Point2D(2.0, 12.0))

    out = capsys.readouterr().out
    assert out.count("[RANSAC] better model") == 1
    assert "inliers=3/5" in out


@pytest.mark.parametrize("points", [[], [(1.0, 2.0)]])
def test_too_few_points_gives_degenerate(points):
    res = ransac_line(points, iterations=50, distance_threshold=1.0)
    assert isinstance(res, FitResult)
    assert res.model == LineModel.degenerate()
    assert res.num_inliers == 0


def test_all_vertical_points_give_degenerate():
    pts = [(3.0, float(y)) for y in range(10)]
    res = ransac_line(pts, iterations=100, distance_threshold=1.0, rng=5)
    assert res.model == LineModel.degenerate()


def test_minimal_fit_rejects_near_vertical():
    assert fit_line_minimal(np.array([[1.0, 0.0], [1.00001, 3.0]])) is None
    model = fit_line_minimal(np.array([[0.0, 1.0], [2.0, 5.0]]))
    assert model == LineModel(2.0, 1.0)


def test_required_iterations():
    # log(0.01) / log(1 - 0.5^2) = 16.01 -> 17
    assert required_iterations(0.99, 0.5, 2) == 17
    assert required_iterations(0.99, 0.0, 2) == 1
    assert required_iterations(0.99, 1.0, 2) == MAX_REQUIRED_ITERATIONS
    assert required_iterations(0.99, 0.7, 2) > required_iterations(0.99, 0.3, 2)


def test_confidence_stops_early_on_clean_data():
    pts, _ = line_with_outliers(0.5, 2.0, n_inliers=100, n_outliers=0, rng=8)
    res = ransac_line(pts, iterations=1000, distance_threshold=0.1, confidence=0.99, rng=1)
    assert res.iterations < 1000
    assert res.num_inliers == 100


def test_estimator_uses_params_and_overrides(line_data):
    pts, _ = line_data
    estimator = RobustLineEstimator(RansacParams(iterations=300, distance_threshold=1.0))

    res = estimator.estimate(pts, rng=3)
    assert res.iterations == 300
    assert res.model.slope == pytest.approx(2.0, abs=0.05)

    blocked = estimator.estimate(pts, min_inliers=10_000, rng=3)
    assert blocked.model == LineModel.degenerate()


@pytest.mark.parametrize("kwargs", [
    {"distance_threshold": 0.0},
    {"iterations": -1},
    {"min_inliers": -2},
    {"confidence": 1.5},
])
def test_invalid_parameters_raise(kwargs):
    with pytest.raises(InvalidParameterError):
        ransac_line([(0.0, 0.0), (1.0, 1.0)], **kwargs)


def test_zero_iterations_returns_degenerate():
    res = ransac_line([(0.0, 0.0), (1.0, 1.0)], iterations=0, distance_threshold=1.0)
    assert res.model == LineModel.degenerate()
