# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from pydantic import BaseModel, ConfigDict

from .constants import DEFAULT_ALGORITHM
from .types import Dimension_t, ReductionAlgorithm


class ReductionConfig(BaseModel):
    """Options of one reduction call."""

    algorithm: ReductionAlgorithm = DEFAULT_ALGORITHM
    max_dimension: Dimension_t | None = None
    # prepare the complex before reducing
    close_faces: bool = False
    sort: bool = False
    reverse: bool = False

    model_config = ConfigDict(extra="forbid")
