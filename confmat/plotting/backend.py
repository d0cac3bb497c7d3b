"""Matplotlib surface for :class:`~confmat.plotting.primitives.Drawing` objects."""

from __future__ import annotations

from typing import Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from confmat.constants import MARGIN_LINE_HEIGHT_IN, MAX_MARGIN_FRACTION, TEXT_ANCHORS
from confmat.plotting.primitives import Drawing, FillRect, Segment, Text
from confmat.plotting.style import RenderStyle

# Margin kept on the sides that carry no labels, in text lines
OUTER_MARGIN_LINES = 0.1


def configure_axes(ax: Axes, n_classes: int) -> None:
    """Grid coordinates ``[0, n] x [0, n]`` without ticks or spines."""
    ax.set_xlim(0, n_classes)
    ax.set_ylim(0, n_classes)
    ax.set_axis_off()


def _margin_fraction(lines: float, size_in: float) -> float:
    return min(lines * MARGIN_LINE_HEIGHT_IN / size_in, MAX_MARGIN_FRACTION)


def create_figure(
    n_classes: int,
    style: RenderStyle,
    figsize: Tuple[float, float] = (6, 6),
) -> Tuple[Figure, Axes]:
    """
    Create a figure whose left and top margins leave room for the labels.

    Parameters
    ----------
    n_classes : int
        Matrix dimension, sets the axes limits.
    style : RenderStyle
        Supplies ``left_margin``, ``top_margin`` and the title offset.
    figsize : Tuple[float, float], optional
        Figure size in inches, by default (6, 6)

    Returns
    -------
    Tuple[Figure, Axes]
        The new figure and its single axes.
    """
    fig, ax = plt.subplots(figsize=figsize)
    width, height = fig.get_size_inches()

    left_lines = style.left_margin + OUTER_MARGIN_LINES + style.label_offset
    top_lines = style.top_margin + OUTER_MARGIN_LINES + style.label_offset
    fig.subplots_adjust(
        left=_margin_fraction(left_lines, width),
        right=1.0 - _margin_fraction(OUTER_MARGIN_LINES, width),
        bottom=_margin_fraction(OUTER_MARGIN_LINES, height),
        top=1.0 - _margin_fraction(top_lines, height),
    )
    configure_axes(ax, n_classes)
    return fig, ax


def draw_on_axes(
    drawing: Drawing, ax: Axes, fontsize: Optional[float] = None
) -> Axes:
    """Paint every primitive of ``drawing`` onto ``ax`` in order.

    Text and frame lines are not clipped, so labels outside the grid remain
    visible inside the figure margins.
    """
    base_size = fontsize if fontsize is not None else plt.rcParams["font.size"]

    for primitive in drawing:
        if isinstance(primitive, FillRect):
            ax.add_patch(
                Rectangle(
                    (primitive.x0, primitive.y0),
                    primitive.x1 - primitive.x0,
                    primitive.y1 - primitive.y0,
                    facecolor=primitive.color,
                    edgecolor="none",
                    linewidth=0,
                )
            )
        elif isinstance(primitive, Text):
            ha, va = TEXT_ANCHORS[primitive.anchor]
            ax.text(
                primitive.x,
                primitive.y,
                primitive.text,
                rotation=primitive.rotation,
                fontsize=base_size * primitive.scale,
                ha=ha,
                va=va,
                clip_on=False,
            )
        elif isinstance(primitive, Segment):
            ax.plot(
                [primitive.x0, primitive.x1],
                [primitive.y0, primitive.y1],
                color=primitive.color,
                linewidth=primitive.width,
                solid_capstyle="projecting",
                clip_on=False,
            )
        else:
            raise TypeError(f"Unknown drawing primitive: {primitive!r}")
    return ax


__all__ = ["configure_axes", "create_figure", "draw_on_axes"]
