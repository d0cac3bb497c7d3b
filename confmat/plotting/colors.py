"""Colour encoding of cell counts.

Both schemes compress the range with a square root so that sparse cells
stay distinguishable from empty ones:

- ``grey_scaled``: grey level ``0.9 - 0.8 * sqrt(count / total)``, opaque.
- ``rgb_scaled``: a fixed RGB colour with alpha ``0.1 + 0.8 * sqrt(count / total)``;
  cells inside a colour-highlighted band use the highlight colour instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

from confmat.constants import (
    DEFAULT_RGB_CODE,
    DEFAULT_RGB_CODE_FRAMEBOX,
    DEFAULT_RGB_CODE_HIGHLIGHTING,
)
from confmat.errors import InvalidMatrix
from confmat.options import ColorScheme

RGBTriple = Tuple[float, float, float]


class RGBAColor(NamedTuple):
    r: float
    g: float
    b: float
    a: float


@dataclass(frozen=True)
class ColorSpec:
    """Colour scheme plus the base, highlight and frame colours."""

    scheme: ColorScheme = ColorScheme.GREY_SCALED
    base: RGBTriple = DEFAULT_RGB_CODE
    highlight: RGBTriple = DEFAULT_RGB_CODE_HIGHLIGHTING
    frame: RGBTriple = DEFAULT_RGB_CODE_FRAMEBOX

    @classmethod
    def grayscale(cls, frame: Sequence[float] = DEFAULT_RGB_CODE_FRAMEBOX) -> "ColorSpec":
        return cls(scheme=ColorScheme.GREY_SCALED, frame=tuple(frame))

    @classmethod
    def rgb(
        cls,
        base: Sequence[float] = DEFAULT_RGB_CODE,
        highlight: Sequence[float] = DEFAULT_RGB_CODE_HIGHLIGHTING,
        frame: Sequence[float] = DEFAULT_RGB_CODE_FRAMEBOX,
    ) -> "ColorSpec":
        return cls(
            scheme=ColorScheme.RGB_SCALED,
            base=tuple(base),
            highlight=tuple(highlight),
            frame=tuple(frame),
        )


def color_for(
    count: float,
    total: float,
    color_spec: ColorSpec,
    is_highlighted: bool = False,
) -> RGBAColor:
    """Map a cell count to its fill colour."""
    if total <= 0:
        raise InvalidMatrix("Cell colours are undefined for a matrix summing to zero.")
    strength = math.sqrt(count / total)

    if color_spec.scheme is ColorScheme.GREY_SCALED:
        level = 0.9 - 0.8 * strength
        return RGBAColor(level, level, level, 1.0)

    r, g, b = color_spec.highlight if is_highlighted else color_spec.base
    return RGBAColor(r, g, b, 0.1 + 0.8 * strength)


__all__ = ["ColorScheme", "ColorSpec", "RGBAColor", "color_for"]
