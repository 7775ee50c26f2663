# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
import math

DEFAULT_UNPAIRED_VALUE = math.inf
DEFAULT_VERTEX_WEIGHT = 1.0
DEFAULT_ALGORITHM = "standard"

DEFAULT_FIGSIZE = (5, 5)
DEFAULT_DPI = 300
