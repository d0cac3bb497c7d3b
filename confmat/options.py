"""Closed option sets resolved once during validation."""

from __future__ import annotations

from enum import Enum

from confmat.errors import InvalidMode


class ColorScheme(str, Enum):
    """How cell counts are encoded as colours."""

    GREY_SCALED = "grey_scaled"
    RGB_SCALED = "rgb_scaled"

    @classmethod
    def parse(cls, value: "ColorScheme | str") -> "ColorScheme":
        try:
            return cls(value)
        except ValueError:
            raise InvalidMode(
                "Argument 'color' must equal either to 'grey_scaled' "
                f"or 'rgb_scaled', got {value!r}."
            ) from None


class HighlightMode(str, Enum):
    """How the diagonal band is emphasised."""

    FRAMEBOX = "framebox"
    COLOR = "color"
    BOTH = "both"
    NONE = "none"

    @classmethod
    def parse(cls, value: "HighlightMode | str") -> "HighlightMode":
        try:
            return cls(value)
        except ValueError:
            raise InvalidMode(
                "Argument 'main_diagonal_highlighting' must equal either to "
                f"'framebox', 'color', 'both' or 'none', got {value!r}."
            ) from None

    @property
    def colors_cells(self) -> bool:
        return self in (HighlightMode.COLOR, HighlightMode.BOTH)

    @property
    def draws_frame(self) -> bool:
        return self in (HighlightMode.FRAMEBOX, HighlightMode.BOTH)


__all__ = ["ColorScheme", "HighlightMode"]
