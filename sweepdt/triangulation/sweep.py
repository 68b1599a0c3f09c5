import logging

import numpy as np

from sweepdt.config import EPSILON, SUPERTRIANGLE_MARGIN, MIN_SPAN
from sweepdt.primitives.vertex import Vertex
from sweepdt.primitives.triangle import Triangle
from sweepdt.triangulation.circumcircle import circumcircle
from sweepdt.triangulation.edges import dedup_edges, triangle_edges
from sweepdt.triangulation.errors import CoincidentPointsError
from sweepdt.triangulation.supertriangle import build_supertriangle, normalize_to_unit_box

logger = logging.getLogger(__name__)


def as_vertices(points):
    """
    把输入统一转换为 Vertex 列表。

    接受 Vertex 序列、(x, y) 序列或形状为 (n, 2) 的 numpy 数组。
    """
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected a sequence of (x, y) pairs, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("point coordinates must be finite")
    return [Vertex(x, y) for x, y in arr]


class SweepTriangulator:
    """
    Delaunay triangulation by an x-sorted Bowyer-Watson sweep.

    Points are inserted from the largest x to the smallest. Every triangle
    is tracked by its circumcircle; once the sweep has moved past the right
    edge of a circle nothing can invalidate that triangle any more, so it is
    moved from the open list to the completed list and never tested again.

    The instance only holds options, so one triangulator can be shared and
    called concurrently on different inputs.
    """

    def __init__(self, epsilon=EPSILON, margin=SUPERTRIANGLE_MARGIN,
                 min_span=MIN_SPAN, drop_duplicates=False):
        self.epsilon = epsilon
        self.margin = margin
        self.min_span = min_span
        self.drop_duplicates = drop_duplicates

    def triangulate(self, points):
        """Return the Delaunay triangles of ``points`` as a list of Triangle."""
        vertices = as_vertices(points)
        return [Triangle(vertices[i], vertices[j], vertices[k])
                for i, j, k in self._triangulate(vertices)]

    def triangulate_indices(self, points):
        """Same as triangulate, but each triangle is an (i, j, k) index triple into ``points``."""
        return self._triangulate(as_vertices(points))

    def _unique_indices(self, vertices):
        """
        Positions of the first occurrence of every distinct point, in input
        order. Raises CoincidentPointsError on duplicates unless they are dropped.
        """
        _, first = np.unique(np.asarray(vertices, dtype=float), axis=0, return_index=True)
        if len(first) == len(vertices):
            return list(range(len(vertices)))
        if not self.drop_duplicates:
            seen = {}
            for idx, v in enumerate(vertices):
                if v in seen:
                    raise CoincidentPointsError(
                        f"points {seen[v]} and {idx} coincide at {v}", indices=(seen[v], idx))
                seen[v] = idx
        keep = sorted(first.tolist())
        logger.debug("dropping %d duplicated points", len(vertices) - len(keep))
        return keep

    def _triangulate(self, vertices):
        if len(vertices) < 3:
            return []

        keep = self._unique_indices(vertices)
        if len(keep) < 3:
            return []
        points = [vertices[idx] for idx in keep]

        coords = np.asarray(points, dtype=float)
        if np.linalg.matrix_rank(coords - coords[0]) < 2:
            logger.debug("all %d points are collinear, no triangle can be formed", len(points))
            return []

        triangles = self.sweep(points)
        if len(keep) == len(vertices):
            return triangles
        return [(keep[i], keep[j], keep[k]) for i, j, k in triangles]

    def sweep(self, points):
        """
        对一组互不相同、不全共线的点执行扫描，返回索引三元组列表。

        扫描在缩放到单位包围盒的坐标上进行，epsilon 因此与输入尺度无关。
        DegenerateTripleError 不在这里捕获：遇到无法构成三角形的三点时，
        整个三角剖分失败，由调用者处理。
        """
        n = len(points)
        points = normalize_to_unit_box(points, self.min_span)
        # 按 x 坐标升序的稳定排序
        indices = np.argsort([p.x for p in points], kind="stable")

        working = list(points) + build_supertriangle(points, self.margin, self.min_span)

        # 外接圆记录存放在 arena 中，open / completed 只保存句柄
        arena = [circumcircle(working, n, n + 1, n + 2, self.epsilon)]
        open_handles = [0]
        completed = []

        for c in reversed(indices.tolist()):
            cx, cy = working[c]
            edges = []
            still_open = []

            for handle in reversed(open_handles):
                circle = arena[handle]
                dx = cx - circle.cx

                # 点在外接圆右侧：之后的点只会更靠左，这个三角形不会再变化
                if dx > 0 and dx * dx > circle.r_sqr:
                    completed.append(handle)
                    continue

                dy = cy - circle.cy
                if dx * dx + dy * dy - circle.r_sqr > self.epsilon:
                    still_open.append(handle)
                    continue

                # 点在外接圆内（或圆上）：删除三角形，记录它的三条边
                edges.extend(triangle_edges(circle.i, circle.j, circle.k))

            still_open.reverse()
            open_handles = still_open

            for a, b in reversed(dedup_edges(edges)):
                arena.append(circumcircle(working, a, b, c, self.epsilon))
                open_handles.append(len(arena) - 1)

        completed.extend(open_handles)
        logger.debug("swept %d points, %d circumcircles tracked, %d completed",
                     n, len(arena), len(completed))

        triangles = []
        for handle in completed:
            circle = arena[handle]
            if circle.i < n and circle.j < n and circle.k < n:
                triangles.append((circle.i, circle.j, circle.k))
        return triangles


def triangulate(points, **options):
    """
    Delaunay triangulation of ``points``.

    Fewer than three points, or points that are all collinear, give an
    empty list. Duplicated points raise CoincidentPointsError unless
    ``drop_duplicates=True``. See SweepTriangulator for the other options.
    """
    return SweepTriangulator(**options).triangulate(points)


def triangulate_indices(points, **options):
    return SweepTriangulator(**options).triangulate_indices(points)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    vertexs = [Vertex(0.5, 0.3),
               Vertex(0.3, 0.4),
               Vertex(0.4, 0.1),
               Vertex(0.6, 0.4),
               Vertex(0.3, 0.2),
               Vertex(0.5, 0.45),
               Vertex(0.6, 0.2),
               Vertex(0.7, 0.35),
               Vertex(0.7, 0.1), ]

    for triangle in triangulate(vertexs):
        print(triangle)
