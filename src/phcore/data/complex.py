# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from numbers import Integral
from typing import Any

import numpy as np
from loguru import logger

from .exceptions import DimensionMismatchError, InvalidComplexError
from .filtrations import filtration_key, key_from_less
from .simplex import Simplex, facet_keys


def _as_simplex(item: Any) -> Simplex:
    if isinstance(item, Simplex):
        return item
    # (vertices, data) pairs; a plain tuple of ints is a vertex list
    if (
        isinstance(item, tuple)
        and len(item) == 2
        and not isinstance(item[0], Integral)
    ):
        vertices, data = item
        return Simplex(vertices, data)
    return Simplex(item)


class SimplicialComplex:
    """
    Filtered simplicial complex: a sequence of distinct simplices.

    After `close_faces()` and `sort()` every facet of the simplex at position
    i sits at some position j < i, which is what the reductions rely on. A
    custom order passed to `sort()` has to keep that property by itself.
    """

    def __init__(self, simplices: Iterable[Any] = ()):
        self._simplices: list[Simplex] = []
        self._index: dict[tuple[int, ...], int] = {}
        for s in simplices:
            self.append(s)

    def append(self, simplex: Any) -> None:
        s = _as_simplex(simplex)
        if s.vertices in self._index:
            raise InvalidComplexError(
                f"duplicate simplex {list(s.vertices)} "
                f"(already at position {self._index[s.vertices]})"
            )
        self._index[s.vertices] = len(self._simplices)
        self._simplices.append(s)

    def _reindex(self) -> None:
        self._index = {s.vertices: i for i, s in enumerate(self._simplices)}

    @property
    def dimension(self) -> int:
        if not self._simplices:
            return -1
        return max(s.dimension for s in self._simplices)

    def check_dimension(self, dimension: int) -> None:
        if dimension < 0 or dimension > self.dimension:
            raise DimensionMismatchError(
                f"dimension {dimension} outside [0, {self.dimension}]"
            )

    def index(self, simplex: Any) -> int:
        key = _as_simplex(simplex).vertices
        if key not in self._index:
            raise ValueError(f"simplex {list(key)} is not in the complex")
        return self._index[key]

    def close_faces(self) -> SimplicialComplex:
        """
        Insert every missing face so that the complex is closed.

        A new face receives the smallest filtration value among the simplices
        that require it. New faces are appended, so sort afterwards.
        """
        missing: dict[tuple[int, ...], float] = {}
        for d in range(self.dimension, 0, -1):
            # missing faces of dimension d are complete once d + 1 is done
            current = [(s.vertices, s.data) for s in self._simplices if s.dimension == d]
            current += [(f, v) for f, v in missing.items() if len(f) == d + 1]
            for vertices, data in current:
                for face in facet_keys(vertices):
                    if face in self._index:
                        continue
                    if face not in missing or data < missing[face]:
                        missing[face] = data

        for face, data in sorted(missing.items(), key=lambda kv: (len(kv[0]), kv[0])):
            self.append(Simplex(face, data))

        logger.debug(f"Closed complex: added {len(missing)} missing faces")
        return self

    def sort(
        self,
        key: Callable[[Simplex], Any] | None = None,
        *,
        less: Callable[[Simplex, Simplex], Any] | None = None,
        reverse: bool = False,
    ) -> SimplicialComplex:
        """
        Establish the filtration order.

        By default simplices are ordered by filtration value, then dimension,
        then vertices; `reverse` flips only the filtration value comparison.
        Either a key function or a `less(s, t)` predicate may replace the
        default order.
        """
        if key is not None and less is not None:
            raise ValueError("pass either key or less, not both")
        if any(math.isnan(s.data) for s in self._simplices):
            raise InvalidComplexError("filtration values must not be NaN")
        if less is not None:
            key = key_from_less(less)
        elif key is None:
            key = filtration_key(reverse)
        self._simplices.sort(key=key)
        self._reindex()
        return self

    def boundary(self, position: int) -> list[int]:
        """Positions of the facets of the simplex at `position`, ascending."""
        if position < 0:
            position += len(self._simplices)
        simplex = self._simplices[position]
        rows = []
        for face in facet_keys(simplex.vertices):
            row = self._index.get(face)
            if row is None:
                raise InvalidComplexError(
                    f"facet {list(face)} of simplex at position {position} is missing"
                )
            if row >= position:
                raise InvalidComplexError(
                    f"facet {list(face)} at position {row} does not precede "
                    f"its coface at position {position}"
                )
            rows.append(row)
        rows.sort()
        return rows

    def check_closure(self) -> None:
        for position in range(len(self._simplices)):
            self.boundary(position)

    def boundary_matrix(self, dimension: int | None = None):
        """Sparse mod-2 boundary matrix, see `compute_boundary_matrix`."""
        from ..computing.boundary import compute_boundary_matrix

        return compute_boundary_matrix(self, dimension=dimension)

    def skeleton(self, k: int) -> SimplicialComplex:
        """Simplices of dimension at most k, in the current order."""
        return SimplicialComplex(
            s.model_copy() for s in self._simplices if s.dimension <= k
        )

    @property
    def filtration_values(self) -> np.ndarray:
        return np.array([s.data for s in self._simplices], dtype=float)

    @property
    def dimensions(self) -> np.ndarray:
        return np.array([s.dimension for s in self._simplices], dtype=np.int64)

    def __getitem__(self, position: int) -> Simplex:
        return self._simplices[position]

    def __len__(self) -> int:
        return len(self._simplices)

    def __iter__(self) -> Iterator[Simplex]:
        return iter(self._simplices)

    def __bool__(self) -> bool:
        return len(self._simplices) > 0

    def __contains__(self, simplex: Any) -> bool:
        return _as_simplex(simplex).vertices in self._index

    def __repr__(self) -> str:
        body = "\n".join(f"  {s!r}" for s in self._simplices)
        return f"SimplicialComplex(n={len(self)}, dimension={self.dimension})" + (
            f"\n{body}" if body else ""
        )
