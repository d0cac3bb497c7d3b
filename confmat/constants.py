"""Constants and default option values for the confmat package."""

from __future__ import annotations

# Colour schemes
COLOR_SCHEMES = ("grey_scaled", "rgb_scaled")
DEFAULT_COLOR_SCHEME = "grey_scaled"

# Default RGB triples (each channel in [0, 1])
DEFAULT_RGB_CODE = (0.0, 0.0, 1.0)
DEFAULT_RGB_CODE_HIGHLIGHTING = (1.0, 0.0, 0.0)
DEFAULT_RGB_CODE_FRAMEBOX = (0.0, 0.0, 0.0)

# Diagonal highlighting
HIGHLIGHTING_MODES = ("framebox", "color", "both", "none")
DEFAULT_HIGHLIGHTING = "framebox"
DEFAULT_FRAMEBOX_LWD = 1.0
DEFAULT_BAND_HALF_WIDTH = 0

# Axis titles and class labels
DEFAULT_HORIZONTAL_LABEL = "horizontal_label"
DEFAULT_VERTICAL_LABEL = "vertical_label"
CLASS_LABEL_PREFIX = "class"
DEFAULT_LABEL_HALF_WIDTH = 0.5
DEFAULT_LABEL_OFFSET_FACTOR = 2.0
DEFAULT_ROW_LABEL_ROTATION = 0.0
DEFAULT_COLUMN_LABEL_ROTATION = 90.0
DEFAULT_LABEL_SCALE = 1.0

# Margins are measured in text lines
DEFAULT_LEFT_MARGIN = 5.0
DEFAULT_TOP_MARGIN = 5.0
MARGIN_LINE_HEIGHT_IN = 0.2
MAX_MARGIN_FRACTION = 0.45

# Cell labels
DEFAULT_PERCENTAGE_ROUND_DIGITS = 1
PERCENT_SUFFIX = " %"

# Text anchors -> matplotlib (ha, va)
TEXT_ANCHORS = {
    "center": ("center", "center"),
    "bottom": ("center", "bottom"),
}
