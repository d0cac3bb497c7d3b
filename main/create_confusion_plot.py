"""Script to plot a confusion matrix with a highlighted diagonal band.

Reads either a labeled count table or a file of (observed, predicted) label
pairs, saves the heat-grid to an image file and prints the banded accuracy
with its chance level.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from confmat.constants import (
    COLOR_SCHEMES,
    DEFAULT_BAND_HALF_WIDTH,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_COLUMN_LABEL_ROTATION,
    DEFAULT_FRAMEBOX_LWD,
    DEFAULT_HIGHLIGHTING,
    DEFAULT_HORIZONTAL_LABEL,
    DEFAULT_LABEL_HALF_WIDTH,
    DEFAULT_LABEL_OFFSET_FACTOR,
    DEFAULT_LABEL_SCALE,
    DEFAULT_LEFT_MARGIN,
    DEFAULT_PERCENTAGE_ROUND_DIGITS,
    DEFAULT_RGB_CODE,
    DEFAULT_RGB_CODE_FRAMEBOX,
    DEFAULT_RGB_CODE_HIGHLIGHTING,
    DEFAULT_ROW_LABEL_ROTATION,
    DEFAULT_TOP_MARGIN,
    DEFAULT_VERTICAL_LABEL,
    HIGHLIGHTING_MODES,
)
from confmat.io import load_confusion_matrix, load_predictions
from confmat.plotting.chart import ConfusionChart
from confmat.plotting.colors import ColorSpec
from confmat.plotting.style import RenderStyle
from confmat.statistics import accuracy_profile, compare_with_chance
from main.helpers import (
    ensure_output_directory,
    print_accuracy_profile,
    print_accuracy_summary,
    print_matrix_overview,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot a confusion matrix and report its banded accuracy",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Input / output
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="CSV file with a count table or with observed/predicted columns",
    )
    parser.add_argument(
        "--input-format",
        choices=["table", "predictions"],
        default="table",
        help="'table': square count table; 'predictions': one row per observation",
    )
    parser.add_argument(
        "--has-labels",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Whether a count table carries class labels in its first row and column",
    )
    parser.add_argument("--sep", default=",", help="Field delimiter of the input file")
    parser.add_argument("--observed-col", default="observed", help="Observed label column")
    parser.add_argument("--predicted-col", default="predicted", help="Predicted label column")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("figures/confusion_matrix.png"),
        help="Output image file",
    )
    parser.add_argument("--dpi", type=int, default=300, help="Resolution of the saved image")
    parser.add_argument(
        "--figsize",
        type=float,
        nargs=2,
        default=(6.0, 6.0),
        metavar=("WIDTH", "HEIGHT"),
        help="Figure size in inches",
    )

    # Colours
    parser.add_argument("--color", choices=COLOR_SCHEMES, default=DEFAULT_COLOR_SCHEME)
    parser.add_argument(
        "--rgb-code", type=float, nargs=3, default=DEFAULT_RGB_CODE, metavar=("R", "G", "B")
    )
    parser.add_argument(
        "--rgb-code-highlighting",
        type=float,
        nargs=3,
        default=DEFAULT_RGB_CODE_HIGHLIGHTING,
        metavar=("R", "G", "B"),
    )
    parser.add_argument(
        "--rgb-code-framebox",
        type=float,
        nargs=3,
        default=DEFAULT_RGB_CODE_FRAMEBOX,
        metavar=("R", "G", "B"),
    )

    # Labels
    parser.add_argument("--horizontal-label", default=DEFAULT_HORIZONTAL_LABEL)
    parser.add_argument("--vertical-label", default=DEFAULT_VERTICAL_LABEL)
    parser.add_argument(
        "--class-labels",
        nargs="+",
        default=None,
        help="Class labels overriding those of the input file",
    )
    parser.add_argument("--label-half-width", type=float, default=DEFAULT_LABEL_HALF_WIDTH)
    parser.add_argument(
        "--label-offset-factor", type=float, default=DEFAULT_LABEL_OFFSET_FACTOR
    )
    parser.add_argument(
        "--row-label-rotation", type=float, default=DEFAULT_ROW_LABEL_ROTATION
    )
    parser.add_argument("--row-label-scale", type=float, default=DEFAULT_LABEL_SCALE)
    parser.add_argument(
        "--column-label-rotation", type=float, default=DEFAULT_COLUMN_LABEL_ROTATION
    )
    parser.add_argument("--column-label-scale", type=float, default=DEFAULT_LABEL_SCALE)
    parser.add_argument("--left-margin", type=float, default=DEFAULT_LEFT_MARGIN)
    parser.add_argument("--top-margin", type=float, default=DEFAULT_TOP_MARGIN)

    # Highlighting & cell text
    parser.add_argument(
        "--highlighting", choices=HIGHLIGHTING_MODES, default=DEFAULT_HIGHLIGHTING
    )
    parser.add_argument(
        "--band-half-width",
        type=int,
        default=DEFAULT_BAND_HALF_WIDTH,
        help="Number of diagonals on each side of the main diagonal in the band",
    )
    parser.add_argument("--frame-width", type=float, default=DEFAULT_FRAMEBOX_LWD)
    parser.add_argument(
        "--percentage-display",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show percentages of the total instead of counts",
    )
    parser.add_argument(
        "--round-digits", type=int, default=DEFAULT_PERCENTAGE_ROUND_DIGITS
    )

    # Reporting
    parser.add_argument(
        "--profile",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Also print the accuracy for every band half-width",
    )
    parser.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Print progress information while rendering",
    )
    return parser


# -----------------------------------------------------------------------------
# Main execution flow
# -----------------------------------------------------------------------------
def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point with CLI argument parsing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    print(f"Input file: {args.input}")
    print(f"Output file: {args.output}")
    print()

    try:
        if args.input_format == "predictions":
            matrix = load_predictions(
                args.input,
                observed_col=args.observed_col,
                predicted_col=args.predicted_col,
                sep=args.sep,
            )
        else:
            matrix = load_confusion_matrix(
                args.input, sep=args.sep, has_labels=args.has_labels
            )

        chart = ConfusionChart(
            matrix,
            labels=args.class_labels,
            color_spec=ColorSpec(
                scheme=args.color,
                base=tuple(args.rgb_code),
                highlight=tuple(args.rgb_code_highlighting),
                frame=tuple(args.rgb_code_framebox),
            ),
            style=RenderStyle(
                horizontal_label=args.horizontal_label,
                vertical_label=args.vertical_label,
                label_half_width=args.label_half_width,
                label_offset_factor=args.label_offset_factor,
                row_label_rotation=args.row_label_rotation,
                row_label_scale=args.row_label_scale,
                column_label_rotation=args.column_label_rotation,
                column_label_scale=args.column_label_scale,
                left_margin=args.left_margin,
                top_margin=args.top_margin,
                highlighting=args.highlighting,
                band_half_width=args.band_half_width,
                frame_width=args.frame_width,
                percentage_display=args.percentage_display,
                percentage_round_digits=args.round_digits,
            ),
            verbose=args.verbose,
        )
    except (ValueError, FileNotFoundError) as error:
        parser.error(str(error))

    print_matrix_overview(chart.matrix)

    result = chart.accuracy()
    chance = compare_with_chance(chart.matrix, result.band_half_width)
    print_accuracy_summary(result, chance)
    if args.profile:
        print_accuracy_profile(accuracy_profile(chart.matrix))

    ensure_output_directory(args.output.parent)
    fig = chart.render(figsize=tuple(args.figsize))
    fig.savefig(args.output, dpi=args.dpi, bbox_inches="tight")
    plt.close(fig)
    print(f"\nSaved confusion matrix plot to {args.output}")


if __name__ == "__main__":
    main()
