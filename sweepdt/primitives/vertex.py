import math
from collections import namedtuple


class Vertex(namedtuple("Vertex", ["x", "y"])):
    """
    不可变的二维点。相等与哈希都是精确比较；需要容差时使用 isclose。
    """
    __slots__ = ()

    def __new__(cls, x: float, y: float):
        return super().__new__(cls, float(x), float(y))

    def __repr__(self):
        return f"Vertex({self.x:g}, {self.y:g})"

    def isclose(self, other, rel_tol=1e-9, abs_tol=0.0) -> bool:
        # 对于浮点数的比较，使用 math.isclose 来处理精度问题
        return (math.isclose(self.x, other[0], rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self.y, other[1], rel_tol=rel_tol, abs_tol=abs_tol))
