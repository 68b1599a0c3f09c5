from collections import namedtuple

from sweepdt.primitives.geometry import orientation


class Triangle(namedtuple("Triangle", ["vertex1", "vertex2", "vertex3"])):
    """
    One face of the output mesh: three Vertex values copied from the input.
    """
    __slots__ = ()

    def __repr__(self):
        return f"Triangle({self.vertex1}, {self.vertex2}, {self.vertex3})"

    @property
    def vertices(self):
        return [self.vertex1, self.vertex2, self.vertex3]

    def edges(self):
        """Undirected edges as frozensets of two vertices."""
        a, b, c = self
        return [frozenset((a, b)), frozenset((b, c)), frozenset((c, a))]

    def has_vertex(self, vertex) -> bool:
        return vertex in self

    def area(self) -> float:
        # 带符号面积：逆时针为正
        return orientation(self.vertex1, self.vertex2, self.vertex3) / 2.0

    def ccw(self):
        """Same triangle with its vertices in counter-clockwise order."""
        if self.area() < 0:
            return Triangle(self.vertex1, self.vertex3, self.vertex2)
        return self
