import numpy as np


def random_points_in_triangle(n, A, B, C, seed=42):
    """
    在 △ABC 内均匀生成 n 个随机点
    """
    rng = np.random.RandomState(seed)
    A, B, C = (np.asarray(v, dtype=float) for v in (A, B, C))
    u = rng.rand(n)
    v = rng.rand(n)
    # 反射法把 (u,v) 保持在 u+v<=1 的区域
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    # 仿射组合
    return A + u[:, None] * (B - A) + v[:, None] * (C - A)


def random_points_in_box(n, xmin=0.0, xmax=1.0, ymin=0.0, ymax=1.0, seed=42):
    rng = np.random.RandomState(seed)
    xs = rng.uniform(xmin, xmax, n)
    ys = rng.uniform(ymin, ymax, n)
    return np.column_stack([xs, ys])
