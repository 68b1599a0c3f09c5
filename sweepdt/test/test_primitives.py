# tests/test_primitives.py

import unittest

from ..primitives.vertex import Vertex
from ..primitives.triangle import Triangle
from ..primitives.geometry import orientation, in_circle_test


class TestVertex(unittest.TestCase):

    def test_value_semantics(self):
        a = Vertex(0.5, 0.3)
        b = Vertex(0.5, 0.3)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(a, (0.5, 0.3))
        x, y = a
        self.assertEqual((x, y), (0.5, 0.3))

    def test_immutable(self):
        v = Vertex(1, 2)
        with self.assertRaises(AttributeError):
            v.x = 3.0

    def test_coordinates_are_floats(self):
        v = Vertex(1, 2)
        self.assertIsInstance(v.x, float)
        self.assertIsInstance(v.y, float)

    def test_isclose(self):
        self.assertTrue(Vertex(1.0, 1.0).isclose(Vertex(1.0 + 1e-12, 1.0)))
        self.assertFalse(Vertex(1.0, 1.0).isclose(Vertex(1.1, 1.0)))

    def test_repr_keeps_small_coordinates(self):
        self.assertEqual(repr(Vertex(3e-10, 1.5)), "Vertex(3e-10, 1.5)")


class TestGeometry(unittest.TestCase):

    def setUp(self):
        self.a = Vertex(0.0, 0.0)
        self.b = Vertex(1.0, 0.0)
        self.c = Vertex(0.0, 1.0)

    def test_orientation(self):
        self.assertGreater(orientation(self.a, self.b, self.c), 0)
        self.assertLess(orientation(self.a, self.c, self.b), 0)
        self.assertEqual(orientation(self.a, self.b, Vertex(2.0, 0.0)), 0)

    def test_in_circle(self):
        self.assertGreater(in_circle_test(self.a, self.b, self.c, Vertex(0.4, 0.4)), 0)
        self.assertLess(in_circle_test(self.a, self.b, self.c, Vertex(2.0, 2.0)), 0)


class TestTriangle(unittest.TestCase):

    def setUp(self):
        self.t = Triangle(Vertex(0, 0), Vertex(0, 1), Vertex(1, 0))

    def test_area_and_orientation(self):
        self.assertAlmostEqual(self.t.area(), -0.5)
        ccw = self.t.ccw()
        self.assertGreater(ccw.area(), 0)
        self.assertEqual(set(ccw.vertices), set(self.t.vertices))

    def test_edges(self):
        edges = self.t.edges()
        self.assertEqual(len(edges), 3)
        self.assertIn(frozenset((Vertex(0, 1), Vertex(0, 0))), edges)

    def test_has_vertex(self):
        self.assertTrue(self.t.has_vertex(Vertex(1, 0)))
        self.assertFalse(self.t.has_vertex(Vertex(1, 1)))


if __name__ == "__main__":
    unittest.main()
