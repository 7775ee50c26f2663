"""Lightweight compute helpers used by the public API layer."""
# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)

from .boundary import compute_boundary_matrix
from .components import compute_connected_components
from .homology import (
    bipartite_matrix_complex,
    compute_bipartite_persistence,
    compute_persistence_diagrams,
    compute_zero_dimensional_persistence,
    pairing_to_diagrams,
)
from .reduction import reduce_boundary_matrix
