# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from ..data.diagram import PersistenceDiagram


def _create_figure_standard(
    figsize: tuple[float, float],
    dpi: float,
    kwargs_figure: dict | None = None,
    kwargs_axes: dict | None = None,
    kwargs_layout: dict | None = None,
) -> Axes:
    fig = plt.figure(figsize=figsize, dpi=dpi, **(kwargs_figure or {}))
    kwargs_axes = dict(kwargs_axes or {})
    rect = kwargs_axes.pop("rect", (0.15, 0.15, 0.75, 0.75))
    ax = fig.add_axes(rect, **kwargs_axes)
    if kwargs_layout:
        fig.set_layout_engine(**kwargs_layout)
    return ax


def _as_diagram_list(
    diagrams: PersistenceDiagram | list[PersistenceDiagram],
) -> list[PersistenceDiagram]:
    if isinstance(diagrams, PersistenceDiagram):
        return [diagrams]
    return list(diagrams)


def _value_range(diagrams: list[PersistenceDiagram]) -> tuple[float, float]:
    values = [
        v
        for d in diagrams
        for v in np.concatenate([d.births, d.deaths[~d.unpaired_mask]])
        if np.isfinite(v)
    ]
    if not values:
        return 0.0, 1.0
    lo, hi = float(min(values)), float(max(values))
    if lo == hi:
        hi = lo + 1.0
    return lo, hi
