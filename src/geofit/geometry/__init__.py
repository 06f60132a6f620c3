"""
Geometry package

Typed value types (Point2D, LineModel, FitResult, Centroid, LabeledPoint)
and the distance primitives shared by the line fitters and k-means.
"""
from .types import (
    FloatArray, BoolArray, IntArray, Points2D, Mask,
    Point2D, LineModel, FitResult, Centroid, LabeledPoint,
    as_points, point_xy, to_point_tuple, to_centroid_tuple,
)
from .distance import (
    perpendicular_distance, perpendicular_distances,
    euclidean_distance, squared_distances,
)

__all__ = [
    "FloatArray", "BoolArray", "IntArray", "Points2D", "Mask",
    "Point2D", "LineModel", "FitResult", "Centroid", "LabeledPoint",
    "as_points", "point_xy", "to_point_tuple", "to_centroid_tuple",
    "perpendicular_distance", "perpendicular_distances",
    "euclidean_distance", "squared_distances",
]
