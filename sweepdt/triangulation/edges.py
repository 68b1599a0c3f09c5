def edge_key(a, b):
    """Order-independent key of the undirected edge (a, b)."""
    return (a, b) if a <= b else (b, a)


def dedup_edges(edges):
    """
    删除成对出现的边（被两个三角形共享的边），只保留边界边。

    edges 是 (a, b) 索引对的序列，(a, b) 与 (b, a) 视为同一条边。
    从后往前扫描，每条边与它之前最近的一条未配对的相同边配对，两者都被
    标记删除；最后按原顺序收集未标记的边。扫描过程中不修改列表。
    """
    edges = list(edges)
    removed = [False] * len(edges)
    # key -> 尚未配对的位置（扫描从后往前，所以这里存的是更靠后的位置）
    pending = {}

    for pos in range(len(edges) - 1, -1, -1):
        key = edge_key(*edges[pos])
        later = pending.pop(key, None)
        if later is None:
            pending[key] = pos
        else:
            removed[pos] = True
            removed[later] = True

    return [edge for edge, gone in zip(edges, removed) if not gone]


def triangle_edges(i, j, k):
    return [(i, j), (j, k), (k, i)]
