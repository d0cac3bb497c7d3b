"""
Banded Accuracy Statistics Module

Accuracy of a classifier over ordered classes, where a prediction counts as
correct when it lands within ``k`` classes of the observed one:

1. **Banded accuracy**:
   The share of observations in cells with ``|i - j| <= k``. For ``k = 0``
   this is the usual trace-over-total accuracy.
   (See: compute_banded_accuracy)

2. **Expected accuracy**:
   The banded accuracy of a classifier assigning rows and columns uniformly
   at random, ``1 - (n - k - 1)(n - k) / n**2``. The band leaves
   ``(n - k - 1)(n - k)`` of the ``n**2`` cells outside.
   (See: expected_banded_accuracy)

3. **Chance test**:
   An exact binomial test of the in-band count against the expected
   accuracy, with a confidence interval for the banded accuracy.
   (See: compare_with_chance)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Sequence

import numpy as np
import pandas as pd
from scipy.stats import binomtest

from confmat.matrix import as_confusion_matrix
from confmat.validation import validate_band_width

BAND_ARG = "n_of_parallel_diagonals_to_consider"


# -----------------------------
# Band helpers
# -----------------------------
def band_mask(n_classes: int, k: int) -> np.ndarray:
    """Boolean ``n x n`` array, True where ``|i - j| <= k``."""
    idx = np.arange(n_classes)
    return np.abs(np.subtract.outer(idx, idx)) <= k


def expected_banded_accuracy(n_classes: int, k: int) -> float:
    """Band mass under uniform-random row/column assignment."""
    k = validate_band_width(k, n_classes, BAND_ARG)
    return 1.0 - ((n_classes - k - 1) * (n_classes - k)) / n_classes**2


# -----------------------------
# Results
# -----------------------------
@dataclass(frozen=True)
class BandedAccuracy:
    """Observed and chance-level accuracy for one band half-width."""

    accuracy: float
    expected_accuracy: float
    band_half_width: int
    n_classes: int
    total: int
    n_in_band: int

    @property
    def excess_accuracy(self) -> float:
        return self.accuracy - self.expected_accuracy

    def as_dict(self) -> Dict[str, float]:
        return {
            "accuracy": self.accuracy,
            "expected_accuracy": self.expected_accuracy,
        }


@dataclass(frozen=True)
class ChanceTest:
    """Binomial test of banded accuracy against its chance level."""

    accuracy: float
    expected_accuracy: float
    p_value: float
    ci_lower: float
    ci_upper: float
    ci_level: float
    alternative: str


# -----------------------------
# Statistics
# -----------------------------
def compute_banded_accuracy(
    table: Any,
    k: int = 0,
    labels: Optional[Sequence[Any]] = None,
) -> BandedAccuracy:
    """
    Accuracy counting predictions within ``k`` classes of the truth as correct.

    Parameters
    ----------
    table : array-like, pd.DataFrame or ConfusionMatrix
        Square matrix of non-negative integer counts.
    k : int, optional
        Number of diagonals on each side of the main diagonal that count as
        correct, ``0 <= k <= n - 1`` (default: 0).
    labels : sequence, optional
        Class labels, only used for validation.

    Returns
    -------
    BandedAccuracy
        Observed accuracy, its expectation under random classification and
        the counts behind them.
    """
    matrix = as_confusion_matrix(table, labels=labels)
    n = matrix.n_classes
    k = validate_band_width(k, n, BAND_ARG)

    in_band = int(matrix.counts[band_mask(n, k)].sum())
    total = matrix.total
    return BandedAccuracy(
        accuracy=in_band / total,
        expected_accuracy=expected_banded_accuracy(n, k),
        band_half_width=k,
        n_classes=n,
        total=total,
        n_in_band=in_band,
    )


def accuracy_profile(table: Any) -> pd.DataFrame:
    """Banded accuracy for every admissible half-width ``k = 0 .. n - 1``."""
    matrix = as_confusion_matrix(table)
    rows = []
    for k in range(matrix.n_classes):
        result = compute_banded_accuracy(matrix, k)
        rows.append(
            {
                "band_half_width": k,
                "accuracy": result.accuracy,
                "expected_accuracy": result.expected_accuracy,
                "excess_accuracy": result.excess_accuracy,
            }
        )
    return pd.DataFrame(rows)


def compare_with_chance(
    table: Any,
    k: int = 0,
    alternative: Literal["greater", "two-sided", "less"] = "greater",
    ci_level: float = 0.95,
) -> ChanceTest:
    """
    Exact binomial test of the in-band count against the expected accuracy.

    H0: each observation falls into the band with probability
    ``expected_accuracy``. The confidence interval is the Wilson score
    interval for the banded accuracy.
    """
    if alternative not in ("greater", "two-sided", "less"):
        raise ValueError(f"Invalid alternative: {alternative}")
    if not 0.0 < ci_level < 1.0:
        raise ValueError(f"ci_level must lie in (0, 1), got {ci_level}")

    result = compute_banded_accuracy(table, k)
    test = binomtest(
        result.n_in_band,
        n=result.total,
        p=result.expected_accuracy,
        alternative=alternative,
    )
    ci = test.proportion_ci(confidence_level=ci_level, method="wilson")
    return ChanceTest(
        accuracy=result.accuracy,
        expected_accuracy=result.expected_accuracy,
        p_value=float(test.pvalue),
        ci_lower=float(ci.low),
        ci_upper=float(ci.high),
        ci_level=ci_level,
        alternative=alternative,
    )


__all__ = [
    "BandedAccuracy",
    "ChanceTest",
    "band_mask",
    "expected_banded_accuracy",
    "compute_banded_accuracy",
    "accuracy_profile",
    "compare_with_chance",
]
