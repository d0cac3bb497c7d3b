"""Loaders turning CSV files into validated confusion matrices."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

import pandas as pd

from confmat.matrix import ConfusionMatrix


def _require_file(path: str | Path, what: str) -> Path:
    source_path = Path(path)
    if not source_path.exists():
        raise FileNotFoundError(f"{what} file not found: {source_path}")
    return source_path


def load_confusion_matrix(
    path: str | Path,
    *,
    sep: str = ",",
    has_labels: bool = True,
) -> ConfusionMatrix:
    """Load a square count table from a delimited text file.

    Parameters
    ----------
    path:
        Location of the table.
    sep:
        Field delimiter (defaults to ``","``).
    has_labels:
        Whether the first row and first column hold class labels, as written
        by :meth:`pandas.DataFrame.to_csv`. When ``False`` the file contains
        only counts and the classes are named ``class_1..class_n``.

    Returns
    -------
    ConfusionMatrix
        The validated matrix; rows are observed and columns predicted classes.
    """

    source_path = _require_file(path, "Confusion matrix")
    if has_labels:
        df = pd.read_csv(source_path, sep=sep, index_col=0)
        return ConfusionMatrix.from_frame(df)

    df = pd.read_csv(source_path, sep=sep, header=None)
    return ConfusionMatrix.from_array(df.to_numpy())


def load_predictions(
    path: str | Path,
    *,
    observed_col: str = "observed",
    predicted_col: str = "predicted",
    labels: Optional[Sequence[Any]] = None,
    sep: str = ",",
) -> ConfusionMatrix:
    """Cross-tabulate a file of per-observation (observed, predicted) labels.

    Rows with a missing observed or predicted label are dropped.
    """

    source_path = _require_file(path, "Predictions")
    df = pd.read_csv(source_path, sep=sep)
    missing_cols = {observed_col, predicted_col}.difference(df.columns)
    if missing_cols:
        raise ValueError(
            "Predictions file missing required columns: "
            + ", ".join(sorted(missing_cols))
        )

    pairs = df[[observed_col, predicted_col]].dropna()
    return ConfusionMatrix.from_predictions(
        pairs[observed_col], pairs[predicted_col], labels=labels
    )


__all__ = ["load_confusion_matrix", "load_predictions"]
