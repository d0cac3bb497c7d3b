"""Per-render style options."""

from __future__ import annotations

from dataclasses import dataclass

from confmat.constants import (
    DEFAULT_BAND_HALF_WIDTH,
    DEFAULT_COLUMN_LABEL_ROTATION,
    DEFAULT_FRAMEBOX_LWD,
    DEFAULT_HORIZONTAL_LABEL,
    DEFAULT_LABEL_HALF_WIDTH,
    DEFAULT_LABEL_OFFSET_FACTOR,
    DEFAULT_LABEL_SCALE,
    DEFAULT_LEFT_MARGIN,
    DEFAULT_PERCENTAGE_ROUND_DIGITS,
    DEFAULT_ROW_LABEL_ROTATION,
    DEFAULT_TOP_MARGIN,
    DEFAULT_VERTICAL_LABEL,
)
from confmat.options import HighlightMode


@dataclass(frozen=True)
class RenderStyle:
    """Label texts, label placement, margins, highlighting and cell text format.

    ``horizontal_label`` titles the column (predicted) axis above the grid and
    ``vertical_label`` titles the row (observed) axis on the left. Margins
    are in text lines; rotations in degrees; scales multiply the font size.
    ``band_half_width`` is the number of diagonals highlighted on each side
    of the main diagonal.
    """

    horizontal_label: str = DEFAULT_HORIZONTAL_LABEL
    vertical_label: str = DEFAULT_VERTICAL_LABEL
    label_half_width: float = DEFAULT_LABEL_HALF_WIDTH
    label_offset_factor: float = DEFAULT_LABEL_OFFSET_FACTOR
    row_label_rotation: float = DEFAULT_ROW_LABEL_ROTATION
    row_label_scale: float = DEFAULT_LABEL_SCALE
    column_label_rotation: float = DEFAULT_COLUMN_LABEL_ROTATION
    column_label_scale: float = DEFAULT_LABEL_SCALE
    left_margin: float = DEFAULT_LEFT_MARGIN
    top_margin: float = DEFAULT_TOP_MARGIN
    highlighting: HighlightMode = HighlightMode.FRAMEBOX
    band_half_width: int = DEFAULT_BAND_HALF_WIDTH
    frame_width: float = DEFAULT_FRAMEBOX_LWD
    percentage_display: bool = False
    percentage_round_digits: int = DEFAULT_PERCENTAGE_ROUND_DIGITS

    @property
    def label_offset(self) -> float:
        """Distance of the axis titles from the grid."""
        return self.label_offset_factor * self.label_half_width


__all__ = ["HighlightMode", "RenderStyle"]
