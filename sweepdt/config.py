"""
Tunable numeric constants of the sweep triangulation.

All arithmetic is double precision. Every value here can be overridden per
call through ``SweepTriangulator`` keyword arguments.
"""
import numpy as np

# 用于 "y 几乎相等" 的判断，以及外接圆内外测试的容差
EPSILON = float(np.finfo(float).eps)

# 超级三角形相对包围盒的放大倍数
SUPERTRIANGLE_MARGIN = 20.0

# 所有点重合时包围盒边长的回退值
MIN_SPAN = 1.0
