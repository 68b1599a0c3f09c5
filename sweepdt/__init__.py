"""
sweepdt - Delaunay triangulation of 2D point sets by an x-sorted
Bowyer-Watson sweep.
"""
import logging

from sweepdt.primitives.vertex import Vertex
from sweepdt.primitives.triangle import Triangle
from sweepdt.triangulation.errors import (
    TriangulationError,
    DegenerateTripleError,
    CoincidentPointsError,
)
from sweepdt.triangulation.sweep import SweepTriangulator, triangulate, triangulate_indices

__version__ = "0.1.0"
__all__ = (
    "Vertex",
    "Triangle",
    "TriangulationError",
    "DegenerateTripleError",
    "CoincidentPointsError",
    "SweepTriangulator",
    "triangulate",
    "triangulate_indices",
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
