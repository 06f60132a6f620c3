from geofit import KMeansClusterer, KMeansParams
from geofit.synthetic import gaussian_blobs


def main() -> None:
    centers = [(-60.0, 40.0), (-20.0, 300.0), (-80.0, 420.0)]
    pts, _ = gaussian_blobs(centers, n_per_cluster=80, std=12.0, rng=1)

    clusterer = KMeansClusterer(KMeansParams(max_iterations=100, tolerance=1e-4))

    # WSS curve and elbow
    curve = clusterer.elbow_curve(pts, 1, 10, rng=7)
    for k, wss in zip(curve.ks, curve.wss):
        print(f"K: {k}  WSS: {wss:.1f}")
    print("Optimal K:", curve.best_k)

    points, centroids, iterations = clusterer.cluster(pts, k=curve.best_k, rng=7)
    print(f"K-means converged after {iterations} iterations")
    for i, c in enumerate(centroids):
        size = sum(1 for p in points if p.cluster_index == i)
        print(f"  cluster {i}: centroid=({c.x:.2f}, {c.y:.2f}) size={size}")


if __name__ == "__main__":
    main()
