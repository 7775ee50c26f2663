# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numpy as np
from loguru import logger

from ..data.complex import SimplicialComplex
from ..data.exceptions import DimensionMismatchError
from ..data.pairing import PersistencePairing
from ..data.types import ReductionAlgorithm
from ..data.utils import column_symmetric_difference
from .boundary import boundary_column


def _column_order(
    dims: np.ndarray, positions: np.ndarray, algorithm: ReductionAlgorithm
) -> list[int]:
    if algorithm == "standard":
        return positions.tolist()
    if algorithm == "twist":
        # highest dimension first so that cleared columns are known in time
        order = np.lexsort((positions, -dims[positions]))
        return positions[order].tolist()
    raise ValueError(f"unknown reduction algorithm {algorithm!r}")


def reduce_boundary_matrix(
    complex_: SimplicialComplex,
    algorithm: ReductionAlgorithm = "standard",
    max_dimension: int | None = None,
) -> PersistencePairing:
    """
    Pair the simplices of a sorted, closed complex over Z/2.

    Columns are reduced left to right; the lowest entry of a column is looked
    up in the pivot table and, if taken, the owning column is added to it.
    A column that ends with an unclaimed lowest entry r destroys the class
    created by r. The twist variant processes dimensions top-down and zeroes
    any column whose position was already claimed as a pivot row.

    With `max_dimension` only simplices up to that dimension take part; the
    others appear neither in pairs nor among the unpaired positions. A
    `max_dimension` at or above the dimension of the complex is no cut-off;
    only negative values raise `DimensionMismatchError`.
    """
    n = len(complex_)
    dims = complex_.dimensions
    if max_dimension is not None and max_dimension < 0:
        raise DimensionMismatchError(f"max_dimension must be >= 0, got {max_dimension}")

    if max_dimension is None:
        positions = np.arange(n)
    else:
        positions = np.flatnonzero(dims <= max_dimension)

    pivots: dict[int, int] = {}
    reduced: dict[int, np.ndarray] = {}
    cleared: set[int] = set()
    n_additions = 0

    for j in _column_order(dims, positions, algorithm):
        if j in cleared:
            continue
        column = boundary_column(complex_, j)
        while column.shape[0] > 0:
            low = int(column[-1])
            k = pivots.get(low)
            if k is None:
                pivots[low] = j
                reduced[j] = column
                cleared.add(low)
                break
            column = column_symmetric_difference(column, reduced[k])
            n_additions += 1

    pairs = sorted(pivots.items(), key=lambda p: p[1])
    paired = set(pivots) | set(pivots.values())
    unpaired = [int(i) for i in positions if int(i) not in paired]

    logger.debug(
        f"Reduced {len(positions)} columns ({algorithm}): {len(pairs)} pairs, "
        f"{len(unpaired)} unpaired, {n_additions} column additions"
    )
    return PersistencePairing(pairs=pairs, unpaired=unpaired, size=n)
