"""Validated confusion-matrix value type."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from confmat.errors import InvalidLabels, InvalidMatrix
from confmat.validation import validate_labels, validate_matrix


@dataclass(frozen=True, eq=False)
class ConfusionMatrix:
    """Square table of counts; rows are observed classes, columns predicted.

    Instances are immutable: ``counts`` is a write-protected int64 array and
    ``labels`` names both the rows and the columns. Build them through the
    ``from_*`` constructors, which run the validation stage.
    """

    counts: np.ndarray
    labels: Tuple[str, ...]

    @property
    def n_classes(self) -> int:
        return int(self.counts.shape[0])

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    @property
    def fractions(self) -> np.ndarray:
        return self.counts / self.total

    # -----------------------------
    # Constructors
    # -----------------------------
    @classmethod
    def from_array(
        cls, table: Any, labels: Optional[Sequence[Any]] = None
    ) -> "ConfusionMatrix":
        """Validate ``table`` and attach ``labels`` (``class_1..class_n`` if omitted)."""
        if isinstance(table, ConfusionMatrix):
            if labels is None:
                return table
            table = table.counts
        counts = validate_matrix(table)
        resolved = validate_labels(labels, counts.shape[0])
        counts = counts.copy()
        counts.setflags(write=False)
        return cls(counts=counts, labels=resolved)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "ConfusionMatrix":
        """Build from a labeled DataFrame; the index provides the class labels."""
        index_labels = [str(label) for label in df.index]
        column_labels = [str(label) for label in df.columns]
        same_classes = (
            len(set(index_labels)) == len(index_labels)
            and sorted(index_labels) == sorted(column_labels)
        )
        if same_classes:
            # Pair column j with row j so the diagonal holds the correct counts
            df = df.set_axis(index_labels, axis=0).set_axis(column_labels, axis=1)
            df = df.reindex(columns=index_labels)
        else:
            warnings.warn(
                "Row and column labels of the confusion matrix differ; "
                "using the row labels for both axes.",
                UserWarning,
                stacklevel=2,
            )
        return cls.from_array(df.to_numpy(), labels=index_labels)

    @classmethod
    def from_predictions(
        cls,
        observed: Iterable[Any],
        predicted: Iterable[Any],
        labels: Optional[Sequence[Any]] = None,
    ) -> "ConfusionMatrix":
        """Cross-tabulate observed vs predicted class labels.

        Parameters
        ----------
        observed, predicted:
            Equally long sequences of class labels.
        labels:
            Ordered class labels. Defaults to the sorted union of the labels
            found in both sequences. Values outside ``labels`` are rejected.
        """
        observed = pd.Series(list(observed), name="observed")
        predicted = pd.Series(list(predicted), name="predicted")
        if len(observed) != len(predicted):
            raise InvalidMatrix(
                "Observed and predicted labels must have the same length "
                f"({len(observed)} != {len(predicted)})."
            )
        if observed.empty:
            raise InvalidMatrix("No observations to cross-tabulate.")

        found = pd.unique(pd.concat([observed, predicted], ignore_index=True))
        if labels is None:
            try:
                order = sorted(found)
            except TypeError:
                # Mixed label types have no natural order
                order = sorted(found, key=str)
        else:
            order = list(labels)
            unknown = set(found).difference(order)
            if unknown:
                raise InvalidLabels(
                    "Labels not listed in 'labels': "
                    + ", ".join(sorted(str(label) for label in unknown))
                )

        table = pd.crosstab(observed, predicted, dropna=False)
        table = table.reindex(index=order, columns=order, fill_value=0)
        return cls.from_array(table.to_numpy(), labels=order)

    def to_frame(self) -> pd.DataFrame:
        index = pd.Index(self.labels, name="observed")
        columns = pd.Index(self.labels, name="predicted")
        return pd.DataFrame(np.array(self.counts), index=index, columns=columns)


def as_confusion_matrix(
    table: Any, labels: Optional[Sequence[Any]] = None
) -> ConfusionMatrix:
    """Accept a ConfusionMatrix, DataFrame or array-like and validate it."""
    if isinstance(table, pd.DataFrame) and labels is None:
        return ConfusionMatrix.from_frame(table)
    return ConfusionMatrix.from_array(table, labels=labels)


__all__ = ["ConfusionMatrix", "as_confusion_matrix"]
