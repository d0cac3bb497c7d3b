"""Validation stage run before any statistic or drawing is produced.

Every public entry point of confmat funnels its raw arguments through the
functions below, so bad input is reported before the first primitive is
emitted. Each check raises one of the exceptions in :mod:`confmat.errors`
with a message naming the offending argument.
"""

from __future__ import annotations

import numbers
import warnings
from dataclasses import replace
from typing import Any, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from confmat.constants import CLASS_LABEL_PREFIX
from confmat.errors import (
    InvalidBandWidth,
    InvalidColor,
    InvalidLabels,
    InvalidMatrix,
    InvalidStyle,
)
from confmat.options import ColorScheme, HighlightMode

RGBTriple = Tuple[float, float, float]


# -----------------------------
# Matrix & labels
# -----------------------------
def validate_matrix(table: Any, name: str = "table") -> np.ndarray:
    """Return ``table`` as a square int64 array or raise :class:`InvalidMatrix`."""
    values = table.to_numpy() if isinstance(table, pd.DataFrame) else table
    try:
        arr = np.asarray(values)
    except (TypeError, ValueError) as error:
        raise InvalidMatrix(f"Confusion matrix '{name}' is not an array.") from error

    if arr.ndim != 2 or arr.size == 0:
        raise InvalidMatrix(
            f"Confusion matrix '{name}' must be a non-empty two-dimensional matrix!"
        )
    if arr.dtype == bool or not np.issubdtype(arr.dtype, np.number):
        if arr.dtype == bool:
            raise InvalidMatrix(
                f"Confusion matrix '{name}' must contain integer numbers!"
            )
        try:
            arr = arr.astype(float)
        except (TypeError, ValueError) as error:
            raise InvalidMatrix(
                f"Confusion matrix '{name}' must contain integer numbers!"
            ) from error
    if np.iscomplexobj(arr):
        raise InvalidMatrix(f"Confusion matrix '{name}' must contain integer numbers!")

    as_float = arr.astype(float)
    if not np.all(np.isfinite(as_float)) or np.any(np.round(as_float) != as_float):
        raise InvalidMatrix(f"Confusion matrix '{name}' must contain integer numbers!")
    if arr.shape[0] != arr.shape[1]:
        raise InvalidMatrix(
            f"Confusion matrix '{name}' must be a square matrix, got shape {arr.shape}!"
        )
    if np.any(as_float < 0):
        raise InvalidMatrix(
            f"Confusion matrix '{name}' must contain non-negative counts!"
        )

    counts = as_float.astype(np.int64)
    if counts.sum() <= 0:
        raise InvalidMatrix(
            f"Confusion matrix '{name}' must contain at least one observation!"
        )
    return counts


def default_class_labels(n_classes: int) -> Tuple[str, ...]:
    """``class_1 .. class_n``."""
    return tuple(f"{CLASS_LABEL_PREFIX}_{i}" for i in range(1, n_classes + 1))


def validate_labels(
    labels: Optional[Sequence[Any]], n_classes: int
) -> Tuple[str, ...]:
    if labels is None:
        return default_class_labels(n_classes)
    if isinstance(labels, str):
        labels = [labels]
    try:
        resolved = tuple(str(label) for label in labels)
    except TypeError as error:
        raise InvalidLabels("Argument 'class_labels' must be a sequence.") from error
    if len(resolved) != n_classes:
        raise InvalidLabels(
            "Argument 'class_labels' must have the same length as the dimension "
            f"of confusion matrix 'table' ({len(resolved)} != {n_classes})!"
        )
    return resolved


# -----------------------------
# Scalars
# -----------------------------
def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def validate_band_width(
    k: Any, n_classes: int, name: str = "n_of_parallel_diagonals_to_highlight"
) -> int:
    """Return ``k`` as int, checking ``0 <= k <= n_classes - 1``."""
    if not _is_real(k) or not float(k).is_integer():
        raise InvalidBandWidth(f"Argument '{name}' must be an integer, got {k!r}!")
    k = int(k)
    if k < 0 or k > n_classes - 1:
        raise InvalidBandWidth(
            f"Argument '{name}' must be a non-negative integer lower than the "
            f"dimension of confusion matrix 'table' (got {k}, dimension {n_classes})!"
        )
    return k


def validate_number(value: Any, name: str, *, minimum: Optional[float] = None) -> float:
    if not _is_real(value) or not np.isfinite(float(value)):
        raise InvalidStyle(f"Argument '{name}' must be a number, got {value!r}!")
    if minimum is not None and float(value) < minimum:
        raise InvalidStyle(f"Argument '{name}' must be at least {minimum}, got {value}!")
    return float(value)


def validate_flag(value: Any, name: str) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidStyle(
            f"Argument '{name}' must equal either to 'True' or 'False', got {value!r}!"
        )
    return bool(value)


def validate_color(value: Any, name: str = "rgb_code") -> RGBTriple:
    """Return ``value`` as an RGB triple with every channel in [0, 1]."""
    try:
        channels = list(value)
    except TypeError as error:
        raise InvalidColor(f"Length of argument '{name}' must be 3!") from error
    if len(channels) != 3:
        raise InvalidColor(f"Length of argument '{name}' must be 3, got {len(channels)}!")
    for channel in channels:
        if not _is_real(channel) or not 0.0 <= float(channel) <= 1.0:
            raise InvalidColor(
                f"Argument '{name}' must contain three numbers each from the "
                f"interval [0, 1], got {tuple(channels)}!"
            )
    r, g, b = (float(channel) for channel in channels)
    return (r, g, b)


# -----------------------------
# Option bundles
# -----------------------------
def validate_color_spec(spec):
    """Return a copy of a ``ColorSpec`` with parsed scheme and checked triples."""
    return replace(
        spec,
        scheme=ColorScheme.parse(spec.scheme),
        base=validate_color(spec.base, "rgb_code"),
        highlight=validate_color(spec.highlight, "rgb_code_highlighting"),
        frame=validate_color(spec.frame, "rgb_code_highlighting_framebox"),
    )


def validate_render_style(style, n_classes: int):
    """Return a copy of a ``RenderStyle`` checked against an n×n matrix."""
    digits = style.percentage_round_digits
    if not _is_real(digits) or not float(digits).is_integer() or digits < 0:
        raise InvalidStyle(
            "Argument 'percentage_round_digits' must be a non-negative integer, "
            f"got {digits!r}!"
        )

    return replace(
        style,
        horizontal_label=str(style.horizontal_label),
        vertical_label=str(style.vertical_label),
        label_half_width=validate_number(style.label_half_width, "label_half_width"),
        label_offset_factor=validate_number(
            style.label_offset_factor, "label_offset_factor"
        ),
        row_label_rotation=validate_number(
            style.row_label_rotation, "row_label_rotation"
        ),
        row_label_scale=validate_number(
            style.row_label_scale, "row_label_scale", minimum=0.0
        ),
        column_label_rotation=validate_number(
            style.column_label_rotation, "column_label_rotation"
        ),
        column_label_scale=validate_number(
            style.column_label_scale, "column_label_scale", minimum=0.0
        ),
        left_margin=validate_number(style.left_margin, "left_margin", minimum=0.0),
        top_margin=validate_number(style.top_margin, "top_margin", minimum=0.0),
        highlighting=HighlightMode.parse(style.highlighting),
        band_half_width=validate_band_width(style.band_half_width, n_classes),
        frame_width=validate_number(
            style.frame_width, "highlighting_framebox_lwd", minimum=0.0
        ),
        percentage_display=validate_flag(
            style.percentage_display, "percentage_display"
        ),
        percentage_round_digits=int(digits),
    )


def warn_on_inert_options(color_spec, style) -> None:
    """Warn about option combinations that have no visible effect."""
    if color_spec.scheme is ColorScheme.GREY_SCALED and style.highlighting.colors_cells:
        warnings.warn(
            "Colour highlighting has no effect with the 'grey_scaled' scheme; "
            "use 'rgb_scaled' or the 'framebox' highlighting mode.",
            UserWarning,
            stacklevel=3,
        )


__all__ = [
    "validate_matrix",
    "default_class_labels",
    "validate_labels",
    "validate_band_width",
    "validate_number",
    "validate_flag",
    "validate_color",
    "validate_color_spec",
    "validate_render_style",
    "warn_on_inert_options",
]
