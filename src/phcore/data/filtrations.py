# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

from collections.abc import Callable
from functools import cmp_to_key
from typing import Any

from .simplex import Simplex

__all__ = ["data_key", "filtration_key", "key_from_less", "reversed_data_key"]


def data_key(simplex: Simplex) -> tuple:
    """Filtration value ascending, then dimension, then vertices."""
    return (simplex.data, simplex.dimension, simplex.vertices)


def reversed_data_key(simplex: Simplex) -> tuple:
    # only the value comparison flips; ties still resolve faces first
    return (-simplex.data, simplex.dimension, simplex.vertices)


def filtration_key(reverse: bool = False) -> Callable[[Simplex], tuple]:
    return reversed_data_key if reverse else data_key


def key_from_less(less: Callable[[Simplex, Simplex], Any]) -> Callable[[Simplex], Any]:
    """
    Turn a strict "less than" predicate into a sort key.

    The predicate is treated as an opaque total order. Nothing checks that it
    keeps faces before their cofaces.
    """

    def compare(s: Simplex, t: Simplex) -> int:
        if less(s, t):
            return -1
        if less(t, s):
            return 1
        return 0

    return cmp_to_key(compare)
