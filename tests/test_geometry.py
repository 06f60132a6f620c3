"""Unit tests for value types and distance primitives."""

import math

import numpy as np
import pytest

from geofit.geometry import (
    Centroid,
    LabeledPoint,
    LineModel,
    Point2D,
    as_points,
    euclidean_distance,
    perpendicular_distance,
    perpendicular_distances,
    squared_distances,
)


def test_perpendicular_distance_horizontal_line():
    """Distance to y = 0 is |y|."""
    assert perpendicular_distance(Point2D(3.0, -4.0), 0.0, 0.0) == pytest.approx(4.0)


def test_perpendicular_distance_diagonal_line():
    """(1, 0) lies 1/sqrt(2) from y = x."""
    assert perpendicular_distance((1.0, 0.0), 1.0, 0.0) == pytest.approx(1.0 / math.sqrt(2.0))


def test_perpendicular_distance_point_on_line_is_zero():
    assert perpendicular_distance(Point2D(2.0, 7.0), 3.0, 1.0) == pytest.approx(0.0)


def test_perpendicular_distances_matches_scalar():
    pts = np.array([[0.0, 1.0], [2.0, -3.0], [5.0, 5.0]])
    vec = perpendicular_distances(pts, -0.5, 2.0)
    expected = [perpendicular_distance(p, -0.5, 2.0) for p in pts]
    assert vec.shape == (3,)
    assert np.allclose(vec, expected)
    assert np.all(vec >= 0.0)


def test_perpendicular_distances_empty():
    assert perpendicular_distances(np.zeros((0, 2)), 1.0, 0.0).shape == (0,)


def test_euclidean_distance():
    p = Point2D(0.0, 0.0)
    q = Point2D(3.0, 4.0)
    assert euclidean_distance(p, q) == pytest.approx(5.0)
    assert euclidean_distance(q, p) == pytest.approx(5.0)
    assert euclidean_distance(q, q) == 0.0


def test_euclidean_distance_mixed_types():
    """Centroids, labeled points and plain pairs all work."""
    assert euclidean_distance(Centroid(1.0, 1.0), LabeledPoint(4.0, 5.0, 0)) == pytest.approx(5.0)
    assert euclidean_distance((1.0, 1.0), (1.0, 2.0)) == pytest.approx(1.0)


def test_squared_distances_shape_and_values():
    pts = np.array([[0.0, 0.0], [1.0, 1.0]])
    centers = np.array([[0.0, 0.0], [2.0, 0.0], [0.0, 3.0]])
    d2 = squared_distances(pts, centers)
    assert d2.shape == (2, 3)
    assert d2[0].tolist() == [0.0, 4.0, 9.0]
    assert d2[1].tolist() == [2.0, 2.0, 5.0]


def test_as_points_accepts_value_types_pairs_and_arrays():
    from_objects = as_points([Point2D(1.0, 2.0), LabeledPoint(3.0, 4.0, 1)])
    from_pairs = as_points([(1.0, 2.0), (3.0, 4.0)])
    from_array = as_points(np.array([[1, 2], [3, 4]]))
    for arr in (from_objects, from_pairs, from_array):
        assert arr.dtype == np.float64
        assert arr.tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_as_points_empty():
    assert as_points([]).shape == (0, 2)
    assert as_points(np.array([])).shape == (0, 2)


def test_as_points_rejects_bad_shape():
    with pytest.raises(ValueError):
        as_points(np.zeros((4, 3)))


def test_line_model_helpers():
    model = LineModel(2.0, 1.0)
    assert model.predict(3.0) == pytest.approx(7.0)
    assert not model.is_degenerate
    assert LineModel.degenerate().is_degenerate
    assert LineModel.degenerate() == LineModel(0.0, 0.0)


def test_value_types_are_immutable():
    p = Point2D(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 5.0
    assert Point2D(1.0, 2.0) == p
    assert not LabeledPoint(0.0, 0.0).is_assigned
