"""Cell fills and cell texts of the heat-grid."""

from __future__ import annotations

import numpy as np

from confmat.constants import PERCENT_SUFFIX
from confmat.matrix import ConfusionMatrix
from confmat.plotting.colors import ColorSpec, color_for
from confmat.plotting.primitives import Drawing, FillRect, Text
from confmat.plotting.style import RenderStyle
from confmat.statistics import band_mask


def format_percentage(count: int, total: int, digits: int) -> str:
    """``100 * count / total`` with exactly ``digits`` decimals and a percent sign.

    Rounding follows numpy (half to even on the decimal representation).
    """
    value = np.round(100.0 * count / total, digits)
    return f"{value:.{digits}f}{PERCENT_SUFFIX}"


def render_grid(
    matrix: ConfusionMatrix, color_spec: ColorSpec, style: RenderStyle
) -> Drawing:
    """One filled unit square and one centred label per cell, row by row."""
    n = matrix.n_classes
    total = matrix.total
    if style.highlighting.colors_cells:
        highlighted = band_mask(n, style.band_half_width)
    else:
        highlighted = np.zeros((n, n), dtype=bool)

    drawing = Drawing()
    for i in range(n):
        for j in range(n):
            count = int(matrix.counts[i, j])
            drawing.add(
                FillRect(
                    x0=j,
                    y0=n - i - 1,
                    x1=j + 1,
                    y1=n - i,
                    color=color_for(count, total, color_spec, bool(highlighted[i, j])),
                )
            )
            if style.percentage_display:
                label = format_percentage(count, total, style.percentage_round_digits)
            else:
                label = str(count)
            drawing.add(Text(x=j + 0.5, y=n - i - 0.5, text=label))
    return drawing


__all__ = ["format_percentage", "render_grid"]
