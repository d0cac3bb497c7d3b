"""Class labels and axis titles around the grid."""

from __future__ import annotations

from typing import Sequence

from confmat.plotting.primitives import Drawing, Text
from confmat.plotting.style import RenderStyle

# Offsets within a unit cell so that labels sit just above their anchor
ROW_LABEL_RAISE = 0.35
COLUMN_LABEL_SHIFT = 0.55
VERTICAL_TITLE_DROP = 0.15


def render_axis_labels(labels: Sequence[str], style: RenderStyle) -> Drawing:
    """Row labels on the left, column labels on top, titles further out."""
    n = len(labels)
    h = style.label_half_width
    drawing = Drawing()

    # vertical_label titles the row axis (left), horizontal_label the column axis (top)
    drawing.add(
        Text(
            x=-style.label_offset,
            y=n / 2 - VERTICAL_TITLE_DROP,
            text=style.vertical_label,
            rotation=90.0,
            anchor="bottom",
        )
    )
    for row, label in enumerate(labels):
        drawing.add(
            Text(
                x=-h,
                y=n - row - 1 + ROW_LABEL_RAISE,
                text=label,
                rotation=style.row_label_rotation,
                scale=style.row_label_scale,
                anchor="bottom",
            )
        )

    drawing.add(
        Text(
            x=n / 2,
            y=n + style.label_offset,
            text=style.horizontal_label,
            anchor="bottom",
        )
    )
    for column, label in enumerate(labels):
        drawing.add(
            Text(
                x=column + COLUMN_LABEL_SHIFT,
                y=n + h,
                text=label,
                rotation=style.column_label_rotation,
                scale=style.column_label_scale,
                anchor="bottom",
            )
        )
    return drawing


__all__ = ["render_axis_labels"]
