# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

from collections.abc import Iterator

import numpy as np
from pydantic import Field, model_validator
from pydantic.dataclasses import dataclass
from typing_extensions import Self

from .types import Index_t, Size_t


@dataclass
class PersistencePairing:
    """
    Index-level result of a reduction.

    `pairs` holds (creator, destroyer) positions in the filtered complex,
    `unpaired` the positions of essential classes. `size` is the number of
    positions of the complex the pairing refers to, if known.
    """

    pairs: list[tuple[Index_t, Index_t]] = Field(default_factory=list)
    unpaired: list[Index_t] = Field(default_factory=list)
    size: Size_t | None = None

    @model_validator(mode="after")
    def check_matching(self) -> Self:
        seen: set[int] = set()
        for creator, destroyer in self.pairs:
            if creator >= destroyer:
                raise ValueError(
                    f"creator {creator} does not precede destroyer {destroyer}"
                )
            for i in (creator, destroyer):
                if i in seen:
                    raise ValueError(f"position {i} appears more than once")
                seen.add(i)
        for i in self.unpaired:
            if i in seen:
                raise ValueError(f"unpaired position {i} is also paired")
            seen.add(i)
        if self.size is not None and seen and max(seen) >= self.size:
            raise ValueError(
                f"position {max(seen)} out of range for {self.size} simplices"
            )
        return self

    @property
    def creators(self) -> list[int]:
        return [c for c, _ in self.pairs]

    @property
    def destroyers(self) -> list[int]:
        return [d for _, d in self.pairs]

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __bool__(self) -> bool:
        return len(self.pairs) > 0 or len(self.unpaired) > 0

    def __contains__(self, pair: tuple[int, int]) -> bool:
        return tuple(pair) in self.pairs

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        arr = np.array(self.pairs, dtype=np.int64).reshape(-1, 2)
        return arr if dtype is None else arr.astype(dtype)
