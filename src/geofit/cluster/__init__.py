"""
Clustering package

k-means with k-means++ seeding, WSS and elbow-based choice of k.
"""
from .seeding import kmeans_plus_plus
from .kmeans import (
    ClusterResult, kmeans, run_kmeans, check_k,
    assign_labels, update_centers, has_converged,
    assign_clusters, update_centroids, within_cluster_sum_of_squares,
)
from .elbow import ElbowResult, elbow_k, elbow_curve, choose_k
from .clusterer import KMeansClusterer

__all__ = [
    "kmeans_plus_plus",
    "ClusterResult", "kmeans", "run_kmeans", "check_k",
    "assign_labels", "update_centers", "has_converged",
    "assign_clusters", "update_centroids", "within_cluster_sum_of_squares",
    "ElbowResult", "elbow_k", "elbow_curve", "choose_k",
    "KMeansClusterer",
]
