"""
Confusion Plot Example

This script demonstrates how to plot a confusion matrix with a highlighted
diagonal band and how to compute the banded accuracy together with its
value under random classification.
"""

import sys
import os

# Add parent directory to path to import confmat modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import pandas as pd

from confmat.statistics import accuracy_profile, compare_with_chance, compute_banded_accuracy
from confmat.plotting import plot_confusion_matrix

# -----------------------------
# Create example data
# -----------------------------
# Rows are observed classes, columns predicted classes. The classes are
# ordered, so predictions one class off are "near misses".

table = pd.DataFrame(
    [[10, 2, 1],
     [2, 15, 3],
     [4, 0, 18]],
    index=["low", "medium", "high"],
    columns=["low", "medium", "high"],
)

print("=" * 80)
print("EXAMPLE: Banded accuracy")
print("=" * 80)
print("\nInput table:")
print(table)

# -----------------------------
# Accuracy for the main diagonal and for a band of half-width 1
# -----------------------------
for k in (0, 1):
    result = compute_banded_accuracy(table, k)
    print(f"\nk = {k}")
    print(f"  accuracy:          {result.accuracy:.4f}")
    print(f"  expected accuracy: {result.expected_accuracy:.4f}")

chance = compare_with_chance(table, k=0)
print(f"\nBinomial test against chance (k = 0): p = {chance.p_value:.3g}")

print("\nAccuracy profile:")
print(accuracy_profile(table))

# -----------------------------
# Plot
# -----------------------------
fig = plot_confusion_matrix(
    table,
    color="rgb_scaled",
    rgb_code=(1, 0.5, 0),
    horizontal_label="Predicted Class",
    vertical_label="Actual Class",
    main_diagonal_highlighting="both",
    rgb_code_highlighting=(0.5, 0.5, 0.5),
    n_of_parallel_diagonals_to_highlight=1,
    percentage_display=True,
)
fig.savefig("confusion_plot_example.png", dpi=150)
plt.close(fig)
print("\nSaved confusion_plot_example.png")
