# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numpy as np
from loguru import logger

from ..data.complex import SimplicialComplex
from ..data.exceptions import InvalidComplexError
from ..data.pairing import PersistencePairing
from ..data.utils import union_find_pairs


def compute_connected_components(complex_: SimplicialComplex) -> PersistencePairing:
    """
    Zero-dimensional pairing of a sorted complex by union-find.

    Only vertices and edges are looked at. When an edge joins two components,
    the one created later in the filtration dies at that edge (elder rule).
    Edges closing a cycle are not part of the result; the unpaired positions
    are the vertices whose component survives.
    """
    vertex_positions = []
    slot_of_vertex: dict[int, int] = {}
    edge_positions, edge_u, edge_v = [], [], []

    for position, simplex in enumerate(complex_):
        if simplex.dimension == 0:
            slot_of_vertex[simplex.vertices[0]] = len(vertex_positions)
            vertex_positions.append(position)
        elif simplex.dimension == 1:
            u, v = simplex.vertices
            if u not in slot_of_vertex or v not in slot_of_vertex:
                raise InvalidComplexError(
                    f"edge {[u, v]} at position {position} precedes one of its vertices"
                )
            edge_u.append(slot_of_vertex[u])
            edge_v.append(slot_of_vertex[v])
            edge_positions.append(position)

    if not vertex_positions:
        return PersistencePairing(size=len(complex_))

    creators, destroyers = union_find_pairs(
        np.asarray(vertex_positions, dtype=np.int64),
        np.asarray(edge_u, dtype=np.int64),
        np.asarray(edge_v, dtype=np.int64),
        np.asarray(edge_positions, dtype=np.int64),
    )
    pairs = list(zip(creators.tolist(), destroyers.tolist()))
    dead = set(creators.tolist())
    unpaired = [p for p in vertex_positions if p not in dead]

    logger.debug(
        f"Union-find over {len(vertex_positions)} vertices and "
        f"{len(edge_positions)} edges: {len(pairs)} merges, {len(unpaired)} components"
    )
    return PersistencePairing(pairs=pairs, unpaired=unpaired, size=len(complex_))
