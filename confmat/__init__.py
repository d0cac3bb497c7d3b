"""Banded confusion-matrix heat-grids and banded accuracy statistics."""

from confmat.errors import (
    ConfusionMatrixError,
    InvalidBandWidth,
    InvalidColor,
    InvalidLabels,
    InvalidMatrix,
    InvalidMode,
    InvalidStyle,
)
from confmat.matrix import ConfusionMatrix
from confmat.statistics import (
    BandedAccuracy,
    ChanceTest,
    accuracy_profile,
    compare_with_chance,
    compute_banded_accuracy,
    expected_banded_accuracy,
)

__all__ = [
    "ConfusionMatrixError",
    "InvalidBandWidth",
    "InvalidColor",
    "InvalidLabels",
    "InvalidMatrix",
    "InvalidMode",
    "InvalidStyle",
    "ConfusionMatrix",
    "BandedAccuracy",
    "ChanceTest",
    "accuracy_profile",
    "compare_with_chance",
    "compute_banded_accuracy",
    "expected_banded_accuracy",
]
