# Copyright 2025 Zhiyuan Yu (Heemskerk's lab, University of Michigan)
from __future__ import annotations

import numpy as np
from matplotlib.axes import Axes
from pydantic import ConfigDict, validate_call

from ..data.constants import DEFAULT_DPI, DEFAULT_FIGSIZE
from ..data.diagram import PersistenceDiagram
from ..data.types import PositiveFloat
from ._utils import _as_diagram_list, _create_figure_standard, _value_range

__all__ = ["bar_lifetimes", "hist_lifetimes", "persistence_diagram"]


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def persistence_diagram(
    diagrams: PersistenceDiagram | list[PersistenceDiagram],
    ax: Axes | None = None,
    *,
    pointsize: PositiveFloat = 10,
    figsize: tuple[PositiveFloat, PositiveFloat] = DEFAULT_FIGSIZE,
    dpi: PositiveFloat = DEFAULT_DPI,
    kwargs_figure: dict | None = None,
    kwargs_axes: dict | None = None,
    kwargs_layout: dict | None = None,
    kwargs_scatter: dict | None = None,
) -> Axes:
    diagrams = _as_diagram_list(diagrams)
    ax = (
        _create_figure_standard(
            figsize=figsize,
            dpi=dpi,
            kwargs_figure=kwargs_figure,
            kwargs_axes=kwargs_axes,
            kwargs_layout=kwargs_layout,
        )
        if ax is None
        else ax
    )

    lo, hi = _value_range(diagrams)
    pad = 0.05 * (hi - lo)
    # unpaired points are drawn on a line above every finite value
    y_inf = hi + 2 * pad

    ax.plot([lo - pad, y_inf], [lo - pad, y_inf], color="lightgray", zorder=0)
    ax.axhline(y_inf, color="gray", linestyle="--", linewidth=0.8, zorder=0)

    for diagram in diagrams:
        deaths = np.where(diagram.unpaired_mask, y_inf, diagram.deaths)
        ax.scatter(
            diagram.births,
            deaths,
            s=pointsize,
            label=f"H{diagram.dimension}",
            **(kwargs_scatter or {}),
        )

    ax.set_xlabel("birth")
    ax.set_ylabel("death")
    if diagrams:
        ax.legend(loc="lower right")
    return ax


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def bar_lifetimes(
    diagram: PersistenceDiagram,
    ax: Axes | None = None,
    *,
    color: str = "tab:blue",
    figsize: tuple[PositiveFloat, PositiveFloat] = DEFAULT_FIGSIZE,
    dpi: PositiveFloat = DEFAULT_DPI,
    kwargs_figure: dict | None = None,
    kwargs_axes: dict | None = None,
    kwargs_layout: dict | None = None,
    kwargs_hlines: dict | None = None,
) -> Axes:
    ax = (
        _create_figure_standard(
            figsize=figsize,
            dpi=dpi,
            kwargs_figure=kwargs_figure,
            kwargs_axes=kwargs_axes,
            kwargs_layout=kwargs_layout,
        )
        if ax is None
        else ax
    )

    lo, hi = _value_range([diagram])
    x_inf = hi + 0.1 * (hi - lo)
    deaths = np.where(diagram.unpaired_mask, x_inf, diagram.deaths)
    # longest bars at the bottom
    order = np.argsort(-(deaths - diagram.births), kind="stable")

    ax.hlines(
        np.arange(len(diagram)),
        diagram.births[order],
        deaths[order],
        color=color,
        **(kwargs_hlines or {}),
    )
    ax.set_yticks([])
    ax.set_xlabel("filtration value")
    ax.set_title(f"H{diagram.dimension}")
    return ax


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def hist_lifetimes(
    diagram: PersistenceDiagram,
    ax: Axes | None = None,
    *,
    bins: int = 20,
    figsize: tuple[PositiveFloat, PositiveFloat] = DEFAULT_FIGSIZE,
    dpi: PositiveFloat = DEFAULT_DPI,
    kwargs_figure: dict | None = None,
    kwargs_axes: dict | None = None,
    kwargs_layout: dict | None = None,
    kwargs_hist: dict | None = None,
) -> Axes:
    ax = (
        _create_figure_standard(
            figsize=figsize,
            dpi=dpi,
            kwargs_figure=kwargs_figure,
            kwargs_axes=kwargs_axes,
            kwargs_layout=kwargs_layout,
        )
        if ax is None
        else ax
    )

    lifetimes = np.abs(diagram.persistence[~diagram.unpaired_mask])
    ax.hist(lifetimes, bins=bins, **(kwargs_hist or {}))
    ax.set_xlabel("lifetime")
    ax.set_ylabel("count")
    ax.set_title(f"H{diagram.dimension}")
    return ax
