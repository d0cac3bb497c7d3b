"""
Confusion Matrix Chart Module

This module assembles the heat-grid of a square confusion matrix: coloured
cells with counts or percentages, an optional outline and/or recolouring of
the band of diagonals ``|i - j| <= k``, and class labels with axis titles.

Typical workflow:
1. Build a ConfusionChart (or call plot_confusion_matrix); all arguments are
   validated up front.
2. Call draw() for the backend-independent Drawing, or render() for a
   matplotlib Figure.
3. Use accuracy() for the banded accuracy of the highlighted band.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from confmat.constants import (
    DEFAULT_BAND_HALF_WIDTH,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_COLUMN_LABEL_ROTATION,
    DEFAULT_FRAMEBOX_LWD,
    DEFAULT_HIGHLIGHTING,
    DEFAULT_HORIZONTAL_LABEL,
    DEFAULT_LABEL_HALF_WIDTH,
    DEFAULT_LABEL_OFFSET_FACTOR,
    DEFAULT_LABEL_SCALE,
    DEFAULT_LEFT_MARGIN,
    DEFAULT_PERCENTAGE_ROUND_DIGITS,
    DEFAULT_RGB_CODE,
    DEFAULT_RGB_CODE_FRAMEBOX,
    DEFAULT_RGB_CODE_HIGHLIGHTING,
    DEFAULT_ROW_LABEL_ROTATION,
    DEFAULT_TOP_MARGIN,
    DEFAULT_VERTICAL_LABEL,
)
from confmat.matrix import ConfusionMatrix, as_confusion_matrix
from confmat.plotting.axes import render_axis_labels
from confmat.plotting.backend import configure_axes, create_figure, draw_on_axes
from confmat.plotting.colors import ColorSpec
from confmat.plotting.grid import render_grid
from confmat.plotting.highlight import render_highlight
from confmat.plotting.primitives import Drawing
from confmat.plotting.style import RenderStyle
from confmat.statistics import BandedAccuracy, compute_banded_accuracy
from confmat.validation import (
    validate_color_spec,
    validate_render_style,
    warn_on_inert_options,
)


class ConfusionChart:
    """
    Validated confusion matrix plus the options needed to draw it.

    Every argument is checked in the constructor, so ``draw`` and ``render``
    never fail half-way through on bad input.

    Example usage:
        >>> chart = ConfusionChart(
        ...     [[10, 2, 1], [2, 15, 3], [4, 0, 18]],
        ...     color_spec=ColorSpec.rgb((1, 0.5, 0)),
        ...     style=RenderStyle(highlighting="both", band_half_width=1),
        ... )
        >>> fig = chart.render()
        >>> chart.accuracy().accuracy
        0.9090909090909091
    """

    def __init__(
        self,
        table: Any,
        *,
        labels: Optional[Sequence[Any]] = None,
        color_spec: Optional[ColorSpec] = None,
        style: Optional[RenderStyle] = None,
        verbose: bool = False,
    ):
        self.verbose = verbose
        self.matrix: ConfusionMatrix = as_confusion_matrix(table, labels=labels)
        self.color_spec: ColorSpec = validate_color_spec(color_spec or ColorSpec())
        self.style: RenderStyle = validate_render_style(
            style or RenderStyle(), self.matrix.n_classes
        )
        warn_on_inert_options(self.color_spec, self.style)

        if verbose:
            print(
                f"  [INFO] Validated {self.n_classes}x{self.n_classes} confusion "
                f"matrix (total={self.matrix.total})."
            )

    @property
    def n_classes(self) -> int:
        return self.matrix.n_classes

    def draw(self) -> Drawing:
        """Cells first, then the band frame, then labels and titles."""
        drawing = Drawing()
        drawing.extend(render_grid(self.matrix, self.color_spec, self.style))
        drawing.extend(
            render_highlight(
                self.n_classes,
                self.style.band_half_width,
                self.style.highlighting,
                self.color_spec.frame,
                self.style.frame_width,
            )
        )
        drawing.extend(render_axis_labels(self.matrix.labels, self.style))

        if self.verbose:
            print(
                f"  [INFO] Drawing has {len(drawing.rects)} cells, "
                f"{len(drawing.segments)} frame segments and "
                f"{len(drawing.texts)} texts."
            )
        return drawing

    def accuracy(self) -> BandedAccuracy:
        """Banded accuracy for the highlighted half-width."""
        return compute_banded_accuracy(self.matrix, self.style.band_half_width)

    def render(
        self,
        ax: Optional[Axes] = None,
        *,
        figsize: Tuple[float, float] = (6, 6),
        fontsize: Optional[float] = None,
    ) -> Figure:
        """Paint the chart onto ``ax`` or onto a new figure and return the figure."""
        if ax is None:
            fig, ax = create_figure(self.n_classes, self.style, figsize)
        else:
            fig = ax.figure
            configure_axes(ax, self.n_classes)

        draw_on_axes(self.draw(), ax, fontsize=fontsize)
        return fig


def plot_confusion_matrix(
    table: Any,
    *,
    color: str = DEFAULT_COLOR_SCHEME,
    rgb_code: Sequence[float] = DEFAULT_RGB_CODE,
    horizontal_label: str = DEFAULT_HORIZONTAL_LABEL,
    vertical_label: str = DEFAULT_VERTICAL_LABEL,
    class_labels: Optional[Sequence[Any]] = None,
    label_half_width: float = DEFAULT_LABEL_HALF_WIDTH,
    label_offset_factor: float = DEFAULT_LABEL_OFFSET_FACTOR,
    row_label_rotation: float = DEFAULT_ROW_LABEL_ROTATION,
    row_label_scale: float = DEFAULT_LABEL_SCALE,
    column_label_rotation: float = DEFAULT_COLUMN_LABEL_ROTATION,
    column_label_scale: float = DEFAULT_LABEL_SCALE,
    left_margin: float = DEFAULT_LEFT_MARGIN,
    top_margin: float = DEFAULT_TOP_MARGIN,
    main_diagonal_highlighting: str = DEFAULT_HIGHLIGHTING,
    rgb_code_highlighting: Sequence[float] = DEFAULT_RGB_CODE_HIGHLIGHTING,
    rgb_code_highlighting_framebox: Sequence[float] = DEFAULT_RGB_CODE_FRAMEBOX,
    highlighting_framebox_lwd: float = DEFAULT_FRAMEBOX_LWD,
    n_of_parallel_diagonals_to_highlight: int = DEFAULT_BAND_HALF_WIDTH,
    percentage_display: bool = False,
    percentage_round_digits: int = DEFAULT_PERCENTAGE_ROUND_DIGITS,
    ax: Optional[Axes] = None,
    figsize: Tuple[float, float] = (6, 6),
    verbose: bool = False,
) -> Figure:
    """Plot a confusion matrix as a heat-grid with a highlighted diagonal band.

    Parameters
    ----------
    table : array-like, pd.DataFrame or ConfusionMatrix
        Square matrix of non-negative integer counts, rows observed and
        columns predicted. A DataFrame index provides the class labels.
    color : {"grey_scaled", "rgb_scaled"}, optional
        Grey levels, or ``rgb_code`` with count-dependent opacity.
    rgb_code : sequence of 3 floats, optional
        Cell colour for "rgb_scaled", channels in [0, 1].
    horizontal_label, vertical_label : str, optional
        Titles of the column axis (top) and the row axis (left).
    class_labels : sequence, optional
        Class names for rows and columns, ``class_1..class_n`` by default.
    label_half_width, label_offset_factor : float, optional
        Class labels sit ``label_half_width`` outside the grid, axis titles
        ``label_offset_factor * label_half_width`` outside it.
    row_label_rotation, row_label_scale : float, optional
        Rotation (degrees) and font scale of the row labels.
    column_label_rotation, column_label_scale : float, optional
        Rotation (degrees) and font scale of the column labels.
    left_margin, top_margin : float, optional
        Figure margins in text lines.
    main_diagonal_highlighting : {"framebox", "color", "both", "none"}, optional
        Outline the band, recolour it with ``rgb_code_highlighting``, both,
        or neither. Recolouring needs the "rgb_scaled" scheme.
    rgb_code_highlighting, rgb_code_highlighting_framebox : sequence of 3 floats
        Band cell colour and band outline colour.
    highlighting_framebox_lwd : float, optional
        Line width of the band outline.
    n_of_parallel_diagonals_to_highlight : int, optional
        Band half-width ``k``, ``0 <= k <= n - 1``.
    percentage_display : bool, optional
        Show percentages of the total instead of counts.
    percentage_round_digits : int, optional
        Decimal places of the percentages.
    ax : Axes, optional
        Axes to draw on; a new figure is created when omitted.
    figsize : Tuple[float, float], optional
        Size of the new figure, by default (6, 6)

    Returns
    -------
    Figure
        Matplotlib figure containing the chart.
    """
    chart = ConfusionChart(
        table,
        labels=class_labels,
        color_spec=ColorSpec(
            scheme=color,
            base=rgb_code,
            highlight=rgb_code_highlighting,
            frame=rgb_code_highlighting_framebox,
        ),
        style=RenderStyle(
            horizontal_label=horizontal_label,
            vertical_label=vertical_label,
            label_half_width=label_half_width,
            label_offset_factor=label_offset_factor,
            row_label_rotation=row_label_rotation,
            row_label_scale=row_label_scale,
            column_label_rotation=column_label_rotation,
            column_label_scale=column_label_scale,
            left_margin=left_margin,
            top_margin=top_margin,
            highlighting=main_diagonal_highlighting,
            band_half_width=n_of_parallel_diagonals_to_highlight,
            frame_width=highlighting_framebox_lwd,
            percentage_display=percentage_display,
            percentage_round_digits=percentage_round_digits,
        ),
        verbose=verbose,
    )
    return chart.render(ax, figsize=figsize)


__all__ = ["ConfusionChart", "plot_confusion_matrix"]
