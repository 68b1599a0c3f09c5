import logging

import numpy as np
from scipy.spatial import ConvexHull

from sweepdt.primitives.geometry import in_circle_test
from sweepdt.primitives.triangle import Triangle
from sweepdt.primitives.vertex import Vertex

logger = logging.getLogger(__name__)


def _scale(points):
    arr = np.asarray(points, dtype=float)
    return max(float(np.abs(arr).max()), 1.0)


def find_violations(triangles, points, tol=1e-9):
    """
    检查每个三角形的外接圆内是否包含其它输入点。

    tol 是相对容差：in_circle_test 的行列式是坐标的四次式，因此按坐标尺度
    的四次方放大。圆上的点不算违例。

    返回 (三角形下标, 违例点) 列表，空列表表示满足 Delaunay 性质。
    """
    points = [Vertex(*p) for p in points]
    if not points:
        return []
    threshold = tol * _scale(points) ** 4
    violations = []
    for idx, triangle in enumerate(triangles):
        A, B, C = Triangle(*triangle).ccw()
        for point in points:
            if point in (A, B, C):
                continue
            if in_circle_test(A, B, C, point) > threshold:
                logger.debug("triangle %d (%s, %s, %s) contains point %s", idx, A, B, C, point)
                violations.append((idx, point))
    return violations


def GlobalTestDelaunay(triangles, points, tol=1e-9):
    return not find_violations(triangles, points, tol)


def euler_characteristic(triangles):
    """
    V - E + F，只统计三角形用到的顶点和边。三角剖分覆盖一个单连通区域时为 1。
    """
    vertices = set()
    edges = set()
    for triangle in triangles:
        triangle = Triangle(*triangle)
        vertices.update(triangle)
        edges.update(triangle.edges())
    return len(vertices) - len(edges) + len(triangles)


def expected_triangle_count(points):
    """
    一般位置点集的 Delaunay 三角形个数：2n - h - 2，h 为凸包顶点数。
    """
    arr = np.unique(np.asarray(points, dtype=float), axis=0)
    hull = ConvexHull(arr)
    return 2 * len(arr) - len(hull.vertices) - 2
