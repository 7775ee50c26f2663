# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import math

import numpy as np

from ..data.complex import SimplicialComplex
from ..data.constants import DEFAULT_UNPAIRED_VALUE, DEFAULT_VERTEX_WEIGHT
from ..data.diagram import PersistenceDiagram
from ..data.exceptions import FormatError
from ..data.pairing import PersistencePairing
from ..data.simplex import Simplex
from ..data.types import ReductionAlgorithm
from .components import compute_connected_components
from .reduction import reduce_boundary_matrix


def pairing_to_diagrams(
    pairing: PersistencePairing, complex_: SimplicialComplex
) -> list[PersistenceDiagram]:
    """
    One diagram per dimension of the complex, indexed by dimension.

    A pair contributes (value of creator, value of destroyer) to the diagram
    of the creator's dimension; an unpaired position contributes
    (value, inf) and counts towards that dimension's Betti number.
    """
    values = complex_.filtration_values
    dims = complex_.dimensions
    n_dims = complex_.dimension + 1

    births: list[list[float]] = [[] for _ in range(n_dims)]
    deaths: list[list[float]] = [[] for _ in range(n_dims)]
    unpaired: list[list[bool]] = [[] for _ in range(n_dims)]

    for creator, destroyer in pairing:
        d = dims[creator]
        births[d].append(values[creator])
        deaths[d].append(values[destroyer])
        unpaired[d].append(False)
    for creator in pairing.unpaired:
        d = dims[creator]
        births[d].append(values[creator])
        deaths[d].append(math.inf)
        unpaired[d].append(True)

    return [
        PersistenceDiagram(
            dimension=d,
            points=np.column_stack([births[d], deaths[d]]) if births[d] else [],
            unpaired_mask=np.asarray(unpaired[d], dtype=bool),
        )
        for d in range(n_dims)
    ]


def compute_persistence_diagrams(
    complex_: SimplicialComplex,
    algorithm: ReductionAlgorithm = "standard",
    max_dimension: int | None = None,
) -> tuple[list[PersistenceDiagram], PersistencePairing]:
    pairing = reduce_boundary_matrix(
        complex_, algorithm=algorithm, max_dimension=max_dimension
    )
    diagrams = pairing_to_diagrams(pairing, complex_)
    if max_dimension is not None:
        diagrams = diagrams[: max_dimension + 1]
    return diagrams, pairing


def compute_zero_dimensional_persistence(
    complex_: SimplicialComplex,
    unpaired_value: float = DEFAULT_UNPAIRED_VALUE,
) -> tuple[PersistenceDiagram, PersistencePairing]:
    """
    Zero-dimensional diagram and pairing by union-find.

    `unpaired_value` replaces the infinite death of surviving components in
    the diagram only; the pairing is left as computed.
    """
    pairing = compute_connected_components(complex_)
    values = complex_.filtration_values
    points = [(values[c], values[d]) for c, d in pairing]
    points += [(values[c], math.inf) for c in pairing.unpaired]
    mask = np.zeros(len(points), dtype=bool)
    mask[len(pairing) :] = True

    diagram = PersistenceDiagram(dimension=0, points=points, unpaired_mask=mask)
    if unpaired_value != math.inf:
        diagram = diagram.with_unpaired_value(unpaired_value)
    return diagram, pairing


def bipartite_matrix_complex(
    matrix: np.ndarray,
    vertex_weight: float = DEFAULT_VERTEX_WEIGHT,
) -> SimplicialComplex:
    """
    Vertices 0..n-1 for the rows and n..n+m-1 for the columns of an n x m
    matrix, all weighted `vertex_weight`, plus one edge per entry weighted by
    that entry. The complex is returned unsorted.
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise FormatError(f"expected a two-dimensional matrix, got {matrix.ndim} dimensions")
    if not np.issubdtype(matrix.dtype, np.number):
        raise FormatError(f"expected a real-valued numeric matrix, got dtype {matrix.dtype}")
    if np.iscomplexobj(matrix):
        raise FormatError("complex-valued matrices are not supported")
    if np.isnan(matrix).any():
        raise FormatError("matrix contains NaN entries")

    n, m = matrix.shape
    complex_ = SimplicialComplex(Simplex(v, vertex_weight) for v in range(n + m))
    for u in range(n):
        for v in range(m):
            complex_.append(Simplex((u, v + n), float(matrix[u, v])))
    return complex_


def compute_bipartite_persistence(
    matrix: np.ndarray,
    reverse: bool = True,
    vertex_weight: float = DEFAULT_VERTEX_WEIGHT,
    unpaired_value: float = DEFAULT_UNPAIRED_VALUE,
) -> PersistenceDiagram:
    complex_ = bipartite_matrix_complex(matrix, vertex_weight=vertex_weight)
    complex_.sort(reverse=reverse)
    diagram, _ = compute_zero_dimensional_persistence(
        complex_, unpaired_value=unpaired_value
    )
    return diagram
