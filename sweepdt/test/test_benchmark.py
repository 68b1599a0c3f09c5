# tests/test_benchmark.py

import os
import tempfile
import unittest

import pandas as pd

from ..PerformanceTest.benchmark import benchmark_triangulate


class TestBenchmark(unittest.TestCase):

    def test_writes_results(self):
        with tempfile.TemporaryDirectory() as tmp:
            csv_filename = os.path.join(tmp, "bench.csv")
            df = benchmark_triangulate([10, 30], csv_filename=csv_filename)
            self.assertEqual(list(df.columns), ["n", "triangles", "time_s"])
            self.assertEqual(df["n"].tolist(), [10, 30])
            self.assertTrue((df["triangles"] > 0).all())

            saved = pd.read_csv(csv_filename)
            self.assertEqual(saved["n"].tolist(), [10, 30])

    def test_without_csv(self):
        df = benchmark_triangulate([5], csv_filename=None)
        self.assertEqual(len(df), 1)


if __name__ == "__main__":
    unittest.main()
