# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from ._persistence import (
    betti_number,
    betti_numbers,
    reduce,
    reduce_bipartite_matrix,
    reduce_zero_dimensional,
)

__all__ = [
    "betti_number",
    "betti_numbers",
    "reduce",
    "reduce_bipartite_matrix",
    "reduce_zero_dimensional",
]
