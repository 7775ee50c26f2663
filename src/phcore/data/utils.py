# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
import numpy as np
from numba import jit


@jit(nopython=True)
def column_symmetric_difference(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Mod-2 sum of two boundary columns given as ascending int64 row indices.
    The result is again sorted ascending.
    """
    n_a = a.shape[0]
    n_b = b.shape[0]
    out = np.empty(n_a + n_b, dtype=np.int64)
    i = 0
    j = 0
    k = 0
    while i < n_a and j < n_b:
        if a[i] < b[j]:
            out[k] = a[i]
            i += 1
            k += 1
        elif a[i] > b[j]:
            out[k] = b[j]
            j += 1
            k += 1
        else:
            # 1 + 1 = 0 over Z/2
            i += 1
            j += 1
    while i < n_a:
        out[k] = a[i]
        i += 1
        k += 1
    while j < n_b:
        out[k] = b[j]
        j += 1
        k += 1
    return out[:k]


@jit(nopython=True)
def find_root(parent: np.ndarray, x: int) -> int:
    root = x
    while parent[root] != root:
        root = parent[root]
    # path compression
    while parent[x] != root:
        nxt = parent[x]
        parent[x] = root
        x = nxt
    return root


@jit(nopython=True)
def union_find_pairs(
    vertex_positions: np.ndarray,
    edge_u: np.ndarray,
    edge_v: np.ndarray,
    edge_positions: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Elder-rule union-find over vertices and edges already in filtration order.

    vertex_positions holds the filtration position of every vertex slot,
    edge_u/edge_v hold the slots of each edge's endpoints and edge_positions
    the filtration position of each edge. Returns (creators, destroyers) as
    filtration positions, one entry per merge.
    """
    n_vertices = vertex_positions.shape[0]
    parent = np.arange(n_vertices)
    size = np.ones(n_vertices, dtype=np.int64)
    elder = vertex_positions.copy()

    n_edges = edge_positions.shape[0]
    creators = np.empty(n_edges, dtype=np.int64)
    destroyers = np.empty(n_edges, dtype=np.int64)
    count = 0

    for k in range(n_edges):
        ru = find_root(parent, edge_u[k])
        rv = find_root(parent, edge_v[k])
        if ru == rv:
            continue

        # the component created later in the filtration dies
        if elder[ru] < elder[rv]:
            older = elder[ru]
            younger = elder[rv]
        else:
            older = elder[rv]
            younger = elder[ru]
        creators[count] = younger
        destroyers[count] = edge_positions[k]
        count += 1

        if size[ru] < size[rv]:
            ru, rv = rv, ru
        parent[rv] = ru
        size[ru] += size[rv]
        elder[ru] = older

    return creators[:count], destroyers[:count]
