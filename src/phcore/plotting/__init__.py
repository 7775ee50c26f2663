# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from ._homology import (
    bar_lifetimes,
    hist_lifetimes,
    persistence_diagram,
)

__all__ = [
    "bar_lifetimes",
    "hist_lifetimes",
    "persistence_diagram",
]
