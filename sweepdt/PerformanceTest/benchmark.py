import math
import time

import numpy as np
import pandas as pd

from sweepdt.RandomPointsInTrian import random_points_in_triangle
from sweepdt.triangulation.sweep import triangulate


def benchmark_triangulate(ns, scale=1.0, csv_filename="benchmark_results.csv", seed=42):
    """
    Time ``triangulate`` on n random points inside an equilateral triangle
    for each n in ``ns``. Results go to ``csv_filename`` (skipped when None)
    and are returned as a DataFrame with columns n, triangles, time_s.
    """
    results = []

    A = np.array([0.1 * scale, 0.1 * scale])
    B = np.array([0.9 * scale, 0.1 * scale])
    C = np.array([0.5 * scale, (math.sqrt(3) / 2 - 0.1) * scale])

    for n in ns:
        points = random_points_in_triangle(n, A, B, C, seed=seed)

        start = time.perf_counter()
        triangles = triangulate(points)
        end = time.perf_counter()

        elapsed = end - start
        print(f"n={n}: {elapsed:.6f} seconds")
        results.append({"n": n, "triangles": len(triangles), "time_s": elapsed})

    df = pd.DataFrame(results, columns=["n", "triangles", "time_s"])
    if csv_filename is not None:
        df.to_csv(csv_filename, index=False)
        print(f"Benchmark results saved to {csv_filename}")
    return df


if __name__ == "__main__":
    ns = [10, 50, 100, 250, 500, 1000, 1500, 2000]
    benchmark_triangulate(ns)
