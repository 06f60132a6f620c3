"""
geofit: robust line fitting and k-means clustering for 2D points.

- geometry: Point2D / LineModel / FitResult / Centroid / LabeledPoint, distances
- ransac:   least squares line fit, generic RANSAC loop, robust line estimator
- cluster:  k-means++ seeding, k-means, WSS, elbow choice of k
"""

from .errors import InvalidParameterError
from .params import RansacParams, KMeansParams

from .geometry import (
    Point2D, LineModel, FitResult, Centroid, LabeledPoint,
    as_points, perpendicular_distance, euclidean_distance,
)

from .ransac import (
    fit_line_least_squares, sum_squared_error, LeastSquaresLineFitter,
    ransac_line, RobustLineEstimator, required_iterations,
)

from .cluster import (
    ClusterResult, ElbowResult, KMeansClusterer,
    kmeans, kmeans_plus_plus, within_cluster_sum_of_squares, elbow_curve, choose_k,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidParameterError", "RansacParams", "KMeansParams",
    "Point2D", "LineModel", "FitResult", "Centroid", "LabeledPoint",
    "as_points", "perpendicular_distance", "euclidean_distance",
    "fit_line_least_squares", "sum_squared_error", "LeastSquaresLineFitter",
    "ransac_line", "RobustLineEstimator", "required_iterations",
    "ClusterResult", "ElbowResult", "KMeansClusterer",
    "kmeans", "kmeans_plus_plus", "within_cluster_sum_of_squares", "elbow_curve", "choose_k",
]
