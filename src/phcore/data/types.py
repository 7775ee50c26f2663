# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from typing import Annotated, Literal

from pydantic import Field

Index_t = Annotated[int, Field(ge=0)]
Size_t = Annotated[int, Field(ge=0)]
Dimension_t = Annotated[int, Field(ge=0)]
FiltrationValue_t = float
PositiveFloat = Annotated[float, Field(gt=0)]

ReductionAlgorithm = Literal["standard", "twist"]
