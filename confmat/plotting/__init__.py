"""
Plotting Package

This package renders square confusion matrices as heat-grids: square-root
scaled cell colours, counts or percentages in the cells, and an outline
and/or recolouring of the band of diagonals around the main diagonal.
Renderers emit backend-independent drawing primitives; the backend module
paints them with matplotlib.
"""

from .chart import ConfusionChart, plot_confusion_matrix
from .colors import ColorScheme, ColorSpec, RGBAColor, color_for
from .geometry import boundary_segments
from .primitives import Drawing, FillRect, Segment, Text
from .style import HighlightMode, RenderStyle

__all__ = [
    "ConfusionChart",
    "plot_confusion_matrix",
    "ColorScheme",
    "ColorSpec",
    "RGBAColor",
    "color_for",
    "boundary_segments",
    "Drawing",
    "FillRect",
    "Segment",
    "Text",
    "HighlightMode",
    "RenderStyle",
]
