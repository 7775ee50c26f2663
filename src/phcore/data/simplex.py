# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from numbers import Integral

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import FiltrationValue_t, Index_t


def facet_keys(vertices: tuple[int, ...]) -> list[tuple[int, ...]]:
    """Vertex tuples of all codimension-1 faces, dropping one vertex at a time."""
    if len(vertices) < 2:
        return []
    return [vertices[:i] + vertices[i + 1 :] for i in range(len(vertices))]


class Simplex(BaseModel):
    """
    Finite vertex set with a filtration value.

    Vertices are stored sorted ascending and cannot be changed after
    construction; the filtration value (`data`, or its alias `weight`) can.
    Equality and hashing only look at the vertex set.
    """

    vertices: tuple[Index_t, ...] = Field(frozen=True)
    data: FiltrationValue_t = 0.0

    model_config = ConfigDict(validate_assignment=True)

    def __init__(
        self,
        vertices: int | Iterable[int] | None = None,
        data: FiltrationValue_t = 0.0,
        **kwargs,
    ):
        if vertices is not None:
            kwargs["vertices"] = vertices
        super().__init__(data=data, **kwargs)

    @field_validator("vertices", mode="before")
    @classmethod
    def validate_vertices(cls, v):
        if isinstance(v, Simplex):
            v = v.vertices
        elif isinstance(v, Integral):
            v = (v,)
        try:
            v = tuple(sorted(operator.index(x) for x in v))
        except TypeError as e:
            raise ValueError(f"vertices must be integers, got {v!r}") from e
        if len(v) == 0:
            raise ValueError("a simplex needs at least one vertex")
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate vertices in simplex {v}")
        return v

    @property
    def dimension(self) -> int:
        return len(self.vertices) - 1

    @property
    def weight(self) -> FiltrationValue_t:
        return self.data

    @weight.setter
    def weight(self, value: FiltrationValue_t) -> None:
        self.data = value

    @property
    def boundary(self) -> Iterator[Simplex]:
        """Facets of the simplex, each carrying this simplex's filtration value."""
        for face in facet_keys(self.vertices):
            yield Simplex(face, self.data)

    def sort_key(self) -> tuple[int, tuple[int, ...]]:
        return (self.dimension, self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __getitem__(self, i: int) -> int:
        return self.vertices[i]

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter(self.vertices)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self.vertices)

    def __contains__(self, vertex: int) -> bool:
        return vertex in self.vertices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simplex):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __lt__(self, other: Simplex) -> bool:
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"Simplex({list(self.vertices)}, data={self.data})"

    __str__ = __repr__
