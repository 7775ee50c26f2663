# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numpy as np
from loguru import logger
from scipy.sparse import csc_matrix

from ..data.complex import SimplicialComplex


def boundary_column(complex_: SimplicialComplex, position: int) -> np.ndarray:
    """Facet positions of one simplex as an ascending int64 column."""
    return np.asarray(complex_.boundary(position), dtype=np.int64)


def compute_boundary_matrix(
    complex_: SimplicialComplex,
    dimension: int | None = None,
    verbose: bool = False,
) -> csc_matrix:
    """
    Mod-2 boundary matrix of a sorted, closed complex.

    Without `dimension` rows and columns cover every position in filtration
    order. With `dimension` d the block (d-1)-simplices x d-simplices is
    returned, rows and columns still in filtration order.
    """
    n = len(complex_)
    if dimension is None:
        row_positions = np.arange(n)
        col_positions = np.arange(n)
    else:
        complex_.check_dimension(dimension)
        dims = complex_.dimensions
        row_positions = np.flatnonzero(dims == dimension - 1)
        col_positions = np.flatnonzero(dims == dimension)

    row_lookup = np.full(n, -1, dtype=np.int64)
    row_lookup[row_positions] = np.arange(len(row_positions))

    rows, cols = [], []
    for col_idx, j in enumerate(col_positions):
        column = row_lookup[boundary_column(complex_, int(j))]
        rows.extend(column.tolist())
        cols.extend([col_idx] * len(column))

    bm = csc_matrix(
        (np.ones(len(rows), dtype=np.int8), (rows, cols)),
        shape=(len(row_positions), len(col_positions)),
    )

    if verbose:
        logger.info(
            f"Boundary matrix built: {bm.shape[0]} x {bm.shape[1]}, "
            f"{bm.nnz} non-zero entries"
        )
    return bm
