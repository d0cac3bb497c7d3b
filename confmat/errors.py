"""Exceptions raised by the validation stage.

All of them derive from :class:`ValueError`, so callers that only care about
"bad input" can keep catching that.
"""

from __future__ import annotations


class ConfusionMatrixError(ValueError):
    """Base class for invalid input handed to confmat."""


class InvalidMatrix(ConfusionMatrixError):
    """Matrix is empty, non-square, non-integer, negative or sums to zero."""


class InvalidColor(ConfusionMatrixError):
    """Colour triple has the wrong length or a channel outside [0, 1]."""


class InvalidBandWidth(ConfusionMatrixError):
    """Band half-width is not an integer in ``[0, n - 1]``."""


class InvalidLabels(ConfusionMatrixError):
    """Class labels do not match the matrix dimension."""


class InvalidMode(ConfusionMatrixError):
    """Unknown highlighting mode or colour scheme."""


class InvalidStyle(ConfusionMatrixError):
    """A numeric or boolean style option has an unusable value."""


__all__ = [
    "ConfusionMatrixError",
    "InvalidMatrix",
    "InvalidColor",
    "InvalidBandWidth",
    "InvalidLabels",
    "InvalidMode",
    "InvalidStyle",
]
