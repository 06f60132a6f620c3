import numpy as np

from geofit import fit_line_least_squares, sum_squared_error, ransac_line, required_iterations
from geofit.synthetic import line_with_outliers


def main() -> None:
    rng = np.random.default_rng(0)

    # True line
    slope_true, intercept_true = 16.0, 296.0

    # 200 points near the line + 150 uniform outliers
    pts, is_inlier = line_with_outliers(
        slope_true, intercept_true,
        n_inliers=200,
        n_outliers=150,
        x_range=(0.0, 100.0),
        noise=20.0,
        rng=rng,
    )

    # Plain least squares is pulled away by the outliers
    ls_model = fit_line_least_squares(pts)
    print("[LSQ] slope:", ls_model.slope, "intercept:", ls_model.intercept)
    print("[LSQ] total squared error:", sum_squared_error(pts, ls_model))

    # Iterations for 99% success with 43% outliers, 2-point samples
    n_iters = required_iterations(0.99, 150 / 350, 2)
    print("[RANSAC] iterations needed for p=0.99:", n_iters)

    res = ransac_line(
        pts,
        iterations=1000,
        distance_threshold=100.0,
        min_inliers=10,
        rng=rng,
    )

    print("true:    slope", slope_true, "intercept", intercept_true)
    print("[RANSAC] slope:", res.model.slope, "intercept:", res.model.intercept)
    print("[RANSAC] num_inliers:", res.num_inliers, "/", pts.shape[0],
          "(generated on line:", int(is_inlier.sum()), ")")
    print("[RANSAC] rms_error:", res.rms_error)


if __name__ == "__main__":
    main()
