"""Frame around the highlighted diagonal band."""

from __future__ import annotations

from typing import Sequence

from confmat.options import HighlightMode
from confmat.plotting.geometry import boundary_segments
from confmat.plotting.primitives import Drawing, Segment


def render_highlight(
    n_classes: int,
    k: int,
    mode: HighlightMode,
    frame_color: Sequence[float],
    frame_width: float,
) -> Drawing:
    """Outline the band ``|i - j| <= k`` when ``mode`` asks for a frame.

    Colour highlighting is applied by the grid renderer, so the ``color``
    and ``none`` modes produce an empty drawing.
    """
    drawing = Drawing()
    if not mode.draws_frame:
        return drawing

    color = tuple(frame_color)
    for (x0, y0), (x1, y1) in boundary_segments(n_classes, k):
        drawing.add(
            Segment(x0=x0, y0=y0, x1=x1, y1=y1, width=frame_width, color=color)
        )
    return drawing


__all__ = ["render_highlight"]
