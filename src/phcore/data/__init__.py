# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from .complex import SimplicialComplex
from .diagram import PersistenceDiagram, Point, diagrams_to_frame
from .exceptions import (
    DimensionMismatchError,
    FormatError,
    InvalidComplexError,
    PersistenceError,
)
from .metadata import ReductionConfig
from .pairing import PersistencePairing
from .simplex import Simplex

__all__ = [
    "DimensionMismatchError",
    "FormatError",
    "InvalidComplexError",
    "PersistenceDiagram",
    "PersistenceError",
    "PersistencePairing",
    "Point",
    "ReductionConfig",
    "Simplex",
    "SimplicialComplex",
    "diagrams_to_frame",
]
