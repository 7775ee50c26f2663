# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from . import computing, data
from . import plotting as pl
from . import tools as tl
from .data import (
    DimensionMismatchError,
    FormatError,
    InvalidComplexError,
    PersistenceDiagram,
    PersistencePairing,
    ReductionConfig,
    Simplex,
    SimplicialComplex,
)

__version__ = "0.1.0"
