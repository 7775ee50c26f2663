# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

from typing import Sequence

import numpy as np
from loguru import logger
from pydantic import ConfigDict, validate_call

from ..computing.homology import (
    compute_bipartite_persistence,
    compute_persistence_diagrams,
    compute_zero_dimensional_persistence,
)
from ..data.complex import SimplicialComplex
from ..data.constants import DEFAULT_UNPAIRED_VALUE, DEFAULT_VERTEX_WEIGHT
from ..data.diagram import PersistenceDiagram
from ..data.exceptions import DimensionMismatchError
from ..data.metadata import ReductionConfig
from ..data.pairing import PersistencePairing

__all__ = [
    "betti_number",
    "betti_numbers",
    "reduce",
    "reduce_bipartite_matrix",
    "reduce_zero_dimensional",
]


def _prepare_complex(complex_: SimplicialComplex, config: ReductionConfig) -> None:
    if config.close_faces:
        complex_.close_faces()
    # appended faces have to be moved into place
    if config.sort or config.close_faces:
        complex_.sort(reverse=config.reverse)


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def reduce(
    complex_: SimplicialComplex,
    config: ReductionConfig | None = None,
    *,
    return_pairing: bool = False,
    verbose: bool = False,
    **kwargs,
) -> list[PersistenceDiagram] | tuple[list[PersistenceDiagram], PersistencePairing]:
    """
    Persistence diagrams of all dimensions of a filtered complex.

    Args:
        complex_: filtered complex; sorted and closed unless `config` asks
            for it to be prepared here
        config: reduction options, individual fields may also be passed as
            keyword arguments
        return_pairing: also return the index-level pairing
        verbose: log sizes and Betti numbers

    Returns:
        list of diagrams where entry d is the diagram of dimension d
    """
    if config is None:
        config = ReductionConfig(**kwargs)
    elif kwargs:
        config = ReductionConfig(**{**config.model_dump(), **kwargs})

    _prepare_complex(complex_, config)
    diagrams, pairing = compute_persistence_diagrams(
        complex_, algorithm=config.algorithm, max_dimension=config.max_dimension
    )

    if verbose:
        logger.info(
            f"Reduced complex with {len(complex_)} simplices "
            f"(dimension {complex_.dimension}): {len(pairing)} pairs, "
            f"Betti numbers {betti_numbers(diagrams)}"
        )
    if return_pairing:
        return diagrams, pairing
    return diagrams


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def reduce_zero_dimensional(
    complex_: SimplicialComplex,
    unpaired_value: float = DEFAULT_UNPAIRED_VALUE,
    *,
    verbose: bool = False,
) -> tuple[PersistenceDiagram, PersistencePairing]:
    """Connected components of a sorted complex by union-find."""
    diagram, pairing = compute_zero_dimensional_persistence(
        complex_, unpaired_value=unpaired_value
    )
    if verbose:
        logger.info(
            f"Connected components: {len(pairing)} merges, "
            f"{diagram.betti} surviving components"
        )
    return diagram, pairing


def reduce_bipartite_matrix(
    matrix: np.ndarray,
    reverse: bool = True,
    vertex_weight: float = DEFAULT_VERTEX_WEIGHT,
    unpaired_value: float = DEFAULT_UNPAIRED_VALUE,
    *,
    verbose: bool = False,
) -> PersistenceDiagram:
    """
    Zero-dimensional diagram of the bipartite graph whose edge weights are the
    entries of `matrix`.

    Args:
        matrix: n x m real matrix, entry (i, j) weights the edge between row
            vertex i and column vertex n + j
        reverse: filter from large weights to small ones
        vertex_weight: filtration value shared by all vertices; it has to
            come before every entry in the chosen order (at least the
            maximum entry when `reverse`, at most the minimum otherwise),
            else `InvalidComplexError` is raised
        unpaired_value: death value reported for surviving components

    Returns:
        dimension-0 persistence diagram
    """
    diagram = compute_bipartite_persistence(
        matrix,
        reverse=reverse,
        vertex_weight=vertex_weight,
        unpaired_value=unpaired_value,
    )
    if verbose:
        logger.info(
            f"Bipartite matrix {np.shape(matrix)}: {len(diagram)} points, "
            f"{diagram.betti} surviving components"
        )
    return diagram


def betti_numbers(diagrams: Sequence[PersistenceDiagram]) -> list[int]:
    return [d.betti for d in diagrams]


def betti_number(diagrams: Sequence[PersistenceDiagram], dimension: int) -> int:
    if dimension < 0 or dimension >= len(diagrams):
        raise DimensionMismatchError(
            f"dimension {dimension} outside [0, {len(diagrams) - 1}]"
        )
    return diagrams[dimension].betti
