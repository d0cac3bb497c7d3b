"""Helper functions for the confusion plot script."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from confmat.matrix import ConfusionMatrix
from confmat.statistics import BandedAccuracy, ChanceTest


def print_matrix_overview(matrix: ConfusionMatrix) -> None:
    """Print basic confusion matrix statistics."""
    print(f"Loaded {matrix.n_classes}x{matrix.n_classes} confusion matrix")
    print(f"Classes: {', '.join(matrix.labels)}")
    print(f"Observations: {matrix.total}")
    print(matrix.to_frame().to_string())


def print_accuracy_summary(
    result: BandedAccuracy, chance: Optional[ChanceTest] = None
) -> None:
    """Print banded accuracy, its chance level and the optional binomial test."""
    print(f"\nBanded accuracy (k={result.band_half_width}):")
    print(f"  Accuracy: {result.accuracy * 100:.2f}% ({result.n_in_band}/{result.total})")
    print(f"  Expected under random classification: {result.expected_accuracy * 100:.2f}%")
    print(f"  Excess over chance: {result.excess_accuracy * 100:+.2f} pp")

    if chance is not None:
        print(
            f"  {chance.ci_level * 100:.0f}% CI: "
            f"[{chance.ci_lower * 100:.2f}%, {chance.ci_upper * 100:.2f}%]"
        )
        print(f"  Binomial test ({chance.alternative}): p = {chance.p_value:.3g}")


def print_accuracy_profile(profile: pd.DataFrame) -> None:
    """Print accuracy and expected accuracy for every band half-width."""
    print("\nAccuracy by band half-width:")
    print(profile.to_string(index=False, float_format=lambda v: f"{v:.4f}"))


def ensure_output_directory(path: Path) -> None:
    """Create output directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)
