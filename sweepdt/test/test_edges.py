# tests/test_edges.py

import unittest

from ..triangulation.edges import dedup_edges, edge_key, triangle_edges


class TestDedupEdges(unittest.TestCase):

    def test_two_adjacent_triangles(self):
        # (0,1,2) 与 (2,1,3) 共享边 1-2
        edges = triangle_edges(0, 1, 2) + triangle_edges(2, 1, 3)
        self.assertEqual(dedup_edges(edges), [(0, 1), (2, 0), (1, 3), (3, 2)])

    def test_no_shared_edges(self):
        edges = triangle_edges(0, 1, 2)
        self.assertEqual(dedup_edges(edges), edges)

    def test_everything_paired(self):
        self.assertEqual(dedup_edges([(4, 5), (1, 2), (5, 4), (2, 1)]), [])

    def test_odd_copies_keep_earliest(self):
        self.assertEqual(dedup_edges([(1, 2), (7, 8), (2, 1), (1, 2)]), [(1, 2), (7, 8)])

    def test_input_untouched(self):
        edges = [(0, 1), (1, 0), (2, 3)]
        dedup_edges(edges)
        self.assertEqual(edges, [(0, 1), (1, 0), (2, 3)])

    def test_empty(self):
        self.assertEqual(dedup_edges([]), [])

    def test_edge_key(self):
        self.assertEqual(edge_key(3, 1), edge_key(1, 3))


if __name__ == "__main__":
    unittest.main()
