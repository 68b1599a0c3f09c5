import numpy as np


def orientation(p, q, r):
    """
    计算向量 (q - p) 与 (r - p) 的叉积；
    若结果 > 0，则 r 在有向线段 p->q 的左侧，
    若结果 < 0，则 r 在其右侧；
    若结果 = 0，则三点共线。
          ToLeft(p, q, r) = | p.x p.y 1 |
                            | q.x q.y 1 | = (q.x - p.x)*(r.y - p.y) - (q.y - p.y)*(r.x - p.x)
                            | r.x r.y 1 |
    """
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def in_circle_test(p, q, r, d):
    """
    计算 4x4 行列式（InCircle 测试）
    对于逆时针顺序的 p, q, r 来说：
      如果结果 > 0，则 d 落在由 p, q, r 构成的圆内。
    """
    M = np.array([
        [p.x, p.y, p.x**2 + p.y**2, 1],
        [q.x, q.y, q.x**2 + q.y**2, 1],
        [r.x, r.y, r.x**2 + r.y**2, 1],
        [d.x, d.y, d.x**2 + d.y**2, 1]
    ])
    return np.linalg.det(M)
