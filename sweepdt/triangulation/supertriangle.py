import warnings

from sweepdt.config import SUPERTRIANGLE_MARGIN, MIN_SPAN
from sweepdt.primitives.vertex import Vertex


def bounding_box(points):
    """Return ``(xmin, xmax, ymin, ymax)`` of a non-empty point sequence."""
    if len(points) == 0:
        raise ValueError("bounding box of an empty point set is undefined")
    x_min = y_min = float("inf")
    x_max = y_max = float("-inf")
    for p in points:
        x, y = p[0], p[1]
        if x < x_min:
            x_min = x
        if x > x_max:
            x_max = x
        if y < y_min:
            y_min = y
        if y > y_max:
            y_max = y
    return x_min, x_max, y_min, y_max


def build_supertriangle(points, margin=SUPERTRIANGLE_MARGIN, min_span=MIN_SPAN):
    """
    生成一个包含所有输入点的超级三角形（三个 Vertex）。

    margin 是相对包围盒最大边长的放大倍数，保证超级三角形的外接圆严格包含
    整个包围盒。所有点重合时边长为 0，改用 min_span 以免外接圆半径为 0。
    """
    x_min, x_max, y_min, y_max = bounding_box(points)

    dx = x_max - x_min
    dy = y_max - y_min
    d_max = max(dx, dy)
    x_mid = x_min + dx * 0.5
    y_mid = y_min + dy * 0.5

    if d_max <= 0:
        warnings.warn(f"point set has zero extent, using span {min_span} for the supertriangle",
                      RuntimeWarning, stacklevel=2)
        d_max = min_span

    return [
        Vertex(x_mid - margin * d_max, y_mid - d_max),
        Vertex(x_mid, y_mid + margin * d_max),
        Vertex(x_mid + margin * d_max, y_mid - d_max),
    ]


def normalize_to_unit_box(points, min_span=MIN_SPAN):
    """
    平移并等比缩放到 [0, 1] 包围盒（最长边为 1）。

    EPSILON 是绝对容差，只有在坐标尺度接近 1 时才有意义；缩放保持 x 的顺序
    与外接圆的包含关系不变。
    """
    x_min, x_max, y_min, y_max = bounding_box(points)
    d_max = max(x_max - x_min, y_max - y_min)
    if d_max <= 0:
        d_max = min_span
    return [Vertex((p[0] - x_min) / d_max, (p[1] - y_min) / d_max) for p in points]
