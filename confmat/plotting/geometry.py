"""
Staircase outline of a diagonal band.

The band ``{(i, j): |i - j| <= k}`` on an ``n x n`` grid is bounded by a
closed staircase polygon. In plot coordinates cell ``(i, j)`` covers
``[j, j + 1] x [n - i - 1, n - i]``, so matrix row 0 sits at the top.

The outline consists of

- four pieces of the outer frame: the top edge over columns ``0..k``, the
  left edge beside rows ``0..k``, and their mirror images along the bottom
  and right edges;
- for every step ``s = k + 1 .. n - 1`` two unit edges on the upper-right
  side (cell ``(s - k - 1, s)`` is the first one outside the band in its row)
  and their mirror images on the lower-left side (cell ``(s, s - k - 1)``
  is the last one outside the band in its row).

For ``k = n - 1`` there are no steps and the outline is the outer frame.
"""

from __future__ import annotations

from typing import List, Tuple

from confmat.errors import InvalidMatrix
from confmat.validation import validate_band_width

Point = Tuple[float, float]
LineSegment = Tuple[Point, Point]


def boundary_segments(n_classes: int, k: int) -> List[LineSegment]:
    """Return the band outline as ``((x0, y0), (x1, y1))`` unit-step segments.

    Parameters
    ----------
    n_classes : int
        Matrix dimension ``n >= 1``.
    k : int
        Band half-width, ``0 <= k <= n - 1``.

    Returns
    -------
    list of tuple
        ``4 + 4 * (n - k - 1)`` segments: the frame pieces (top, left,
        bottom, right) followed by four segments per staircase step.
    """
    if n_classes < 1:
        raise InvalidMatrix(f"Matrix dimension must be positive, got {n_classes}.")
    k = validate_band_width(k, n_classes)
    n = n_classes
    reach = k + 1

    segments: List[LineSegment] = [
        ((0, n), (reach, n)),
        ((0, n), (0, n - reach)),
        ((n - reach, 0), (n, 0)),
        ((n, reach), (n, 0)),
    ]

    for s in range(k + 1, n):
        # Upper-right edge: right side of cell (s - k - 1, s - 1), then the
        # top of cell (s - k, s).
        segments.append(((s, n - (s - k - 1)), (s, n - (s - k))))
        segments.append(((s, n - (s - k)), (s + 1, n - (s - k))))
        # Lower-left mirror: bottom of cell (s - 1, s - k - 1), then the left
        # side of cell (s, s - k).
        segments.append(((s - k - 1, n - s), (s - k, n - s)))
        segments.append(((s - k, n - s), (s - k, n - s - 1)))

    return segments


__all__ = ["Point", "LineSegment", "boundary_segments"]
