import math
from collections import namedtuple

from sweepdt.config import EPSILON
from sweepdt.triangulation.errors import DegenerateTripleError

IndexedCircumcircle = namedtuple("IndexedCircumcircle", ["i", "j", "k", "cx", "cy", "r_sqr"])


def circumcircle(points, i, j, k, epsilon=EPSILON) -> IndexedCircumcircle:
    """
    计算由 points[i], points[j], points[k] 三点确定的外接圆。

    圆心取线段 (p_i, p_j) 与 (p_j, p_k) 的中垂线交点。中垂线斜率的公式要除以
    (y_i - y_j) 和 (y_j - y_k)，因此按两者是否接近 0 分三种情况处理。
    半径只保留平方，足够做 "是否在圆内" 的判断。

    抛出
    ----
    DegenerateTripleError
        三点重合或共线，外接圆不存在。
    """
    x1, y1 = points[i][0], points[i][1]
    x2, y2 = points[j][0], points[j][1]
    x3, y3 = points[k][0], points[k][1]

    fabs_y1y2 = abs(y1 - y2)
    fabs_y2y3 = abs(y2 - y3)

    if fabs_y1y2 < epsilon and fabs_y2y3 < epsilon:
        raise DegenerateTripleError(
            f"coincident or collinear points {i}, {j}, {k}", indices=(i, j, k))

    if fabs_y1y2 < epsilon:
        m2 = -((x3 - x2) / (y3 - y2))
        mx2 = (x2 + x3) / 2.0
        my2 = (y2 + y3) / 2.0
        xc = (x2 + x1) / 2.0
        yc = m2 * (xc - mx2) + my2
    elif fabs_y2y3 < epsilon:
        m1 = -((x2 - x1) / (y2 - y1))
        mx1 = (x1 + x2) / 2.0
        my1 = (y1 + y2) / 2.0
        xc = (x3 + x2) / 2.0
        yc = m1 * (xc - mx1) + my1
    else:
        m1 = -((x2 - x1) / (y2 - y1))
        m2 = -((x3 - x2) / (y3 - y2))
        # 两条中垂线平行：三点共线
        if abs(m1 - m2) <= epsilon:
            raise DegenerateTripleError(
                f"collinear points {i}, {j}, {k}", indices=(i, j, k))
        mx1 = (x1 + x2) / 2.0
        mx2 = (x2 + x3) / 2.0
        my1 = (y1 + y2) / 2.0
        my2 = (y2 + y3) / 2.0
        xc = (m1 * mx1 - m2 * mx2 + my2 - my1) / (m1 - m2)

        # 取 |Δy| 较大的那条中垂线求 y，数值上更稳定
        if fabs_y1y2 > fabs_y2y3:
            yc = m1 * (xc - mx1) + my1
        else:
            yc = m2 * (xc - mx2) + my2

    if not (math.isfinite(xc) and math.isfinite(yc)):
        raise DegenerateTripleError(
            f"circumcircle of points {i}, {j}, {k} is not finite", indices=(i, j, k))

    dx = x2 - xc
    dy = y2 - yc
    return IndexedCircumcircle(i, j, k, xc, yc, dx * dx + dy * dy)
