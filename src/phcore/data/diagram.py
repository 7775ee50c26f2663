# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import copy
from collections.abc import Iterator
from typing import NamedTuple

import numpy as np
import pandas as pd
from pydantic import ConfigDict, Field, field_validator, model_validator
from pydantic.dataclasses import dataclass
from typing_extensions import Self

from .types import Dimension_t, FiltrationValue_t


class Point(NamedTuple):
    x: float
    y: float
    unpaired: bool = False

    @property
    def persistence(self) -> float:
        return self.y - self.x


@dataclass(eq=False, config=ConfigDict(arbitrary_types_allowed=True))
class PersistenceDiagram:
    """
    Multiset of (birth, death) points for one homological dimension.

    Unpaired points are tracked by a mask rather than by an infinite death, so
    a sentinel death value does not change the Betti number.
    """

    dimension: Dimension_t
    points: np.ndarray = Field(default_factory=lambda: np.empty((0, 2)))
    unpaired_mask: np.ndarray | None = None

    @field_validator("points", mode="before")
    @classmethod
    def validate_points(cls, v):
        return np.asarray(v, dtype=float).reshape(-1, 2)

    @field_validator("unpaired_mask", mode="before")
    @classmethod
    def validate_unpaired_mask(cls, v):
        if v is None:
            return v
        return np.asarray(v, dtype=bool).reshape(-1)

    @model_validator(mode="after")
    def check_mask(self) -> Self:
        if self.unpaired_mask is None:
            self.unpaired_mask = np.isposinf(self.points[:, 1])
        if self.unpaired_mask.shape[0] != self.points.shape[0]:
            raise ValueError("unpaired mask does not match the number of points")
        return self

    @property
    def births(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def deaths(self) -> np.ndarray:
        return self.points[:, 1]

    @property
    def persistence(self) -> np.ndarray:
        return self.deaths - self.births

    @property
    def betti(self) -> int:
        return int(self.unpaired_mask.sum())

    def _keep(self, keep: np.ndarray) -> Self:
        self.points = self.points[keep]
        self.unpaired_mask = self.unpaired_mask[keep]
        return self

    def remove_diagonal(self) -> Self:
        """Drop paired points with birth == death. Unpaired points always stay."""
        return self._keep(~((self.births == self.deaths) & ~self.unpaired_mask))

    def remove_unpaired(self) -> Self:
        return self._keep(~self.unpaired_mask)

    def with_unpaired_value(self, value: FiltrationValue_t) -> PersistenceDiagram:
        """Copy in which every unpaired point dies at `value` instead of infinity."""
        out = copy.deepcopy(self)
        out.points[out.unpaired_mask, 1] = value
        return out

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "dimension": self.dimension,
                "birth": self.births,
                "death": self.deaths,
                "persistence": self.persistence,
                "unpaired": self.unpaired_mask,
            }
        )

    def _canonical(self) -> np.ndarray:
        rows = np.column_stack([self.points, self.unpaired_mask.astype(float)])
        order = np.lexsort(rows.T[::-1])
        return rows[order]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistenceDiagram):
            return NotImplemented
        return (
            self.dimension == other.dimension
            and len(self) == len(other)
            and np.array_equal(self._canonical(), other._canonical())
        )

    def __len__(self) -> int:
        return self.points.shape[0]

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[Point]:
        for (x, y), unpaired in zip(self.points, self.unpaired_mask):
            yield Point(float(x), float(y), bool(unpaired))

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return self.points if dtype is None else self.points.astype(dtype)

    def __repr__(self) -> str:
        return (
            f"PersistenceDiagram(dimension={self.dimension}, points={len(self)}, "
            f"betti={self.betti})"
        )


def diagrams_to_frame(diagrams: list[PersistenceDiagram]) -> pd.DataFrame:
    frames = [d.to_frame() for d in diagrams]
    if not frames:
        return pd.DataFrame(
            columns=["dimension", "birth", "death", "persistence", "unpaired"]
        )
    return pd.concat(frames, ignore_index=True)
