import math

import numpy as np
import pytest

from confmat.errors import InvalidMatrix
from confmat.options import ColorScheme
from confmat.plotting.colors import ColorSpec, RGBAColor, color_for


def test_grey_scale_endpoints() -> None:
    spec = ColorSpec.grayscale()

    assert color_for(0, 10, spec) == pytest.approx((0.9, 0.9, 0.9, 1.0))
    assert color_for(10, 10, spec) == pytest.approx((0.1, 0.1, 0.1, 1.0))


def test_grey_scale_uses_square_root() -> None:
    level = color_for(25, 100, ColorSpec.grayscale()).r

    assert level == pytest.approx(0.9 - 0.8 * 0.5)


def test_grey_scale_ignores_highlighting() -> None:
    spec = ColorSpec.grayscale()

    assert color_for(3, 10, spec, True) == color_for(3, 10, spec, False)


def test_rgb_alpha_scaling() -> None:
    spec = ColorSpec.rgb((1.0, 0.5, 0.0))

    assert color_for(0, 16, spec) == pytest.approx((1.0, 0.5, 0.0, 0.1))
    assert color_for(4, 16, spec) == pytest.approx((1.0, 0.5, 0.0, 0.5))
    assert color_for(16, 16, spec) == pytest.approx((1.0, 0.5, 0.0, 0.9))


def test_rgb_highlight_substitutes_colour_only() -> None:
    spec = ColorSpec.rgb((0.0, 0.0, 1.0), highlight=(1.0, 0.0, 0.0))

    plain = color_for(4, 16, spec, False)
    highlighted = color_for(4, 16, spec, True)

    assert (highlighted.r, highlighted.g, highlighted.b) == (1.0, 0.0, 0.0)
    assert highlighted.a == pytest.approx(plain.a)


def test_alpha_increases_with_count() -> None:
    spec = ColorSpec.rgb()
    total = 50
    alphas = [color_for(count, total, spec).a for count in range(total + 1)]

    assert np.all(np.diff(alphas) > 0)


def test_grey_level_decreases_with_count() -> None:
    spec = ColorSpec.grayscale()
    levels = [color_for(count, 20, spec).r for count in range(21)]

    assert np.all(np.diff(levels) < 0)


def test_returns_rgba_named_tuple() -> None:
    color = color_for(1, 4, ColorSpec.rgb())

    assert isinstance(color, RGBAColor)
    assert math.isclose(color.a, 0.5)


def test_zero_total_is_an_error() -> None:
    with pytest.raises(InvalidMatrix):
        color_for(0, 0, ColorSpec.grayscale())


def test_colour_spec_constructors() -> None:
    assert ColorSpec().scheme is ColorScheme.GREY_SCALED
    spec = ColorSpec.rgb([0.2, 0.4, 0.6], highlight=[1, 1, 0], frame=[0, 0, 0])
    assert spec.scheme is ColorScheme.RGB_SCALED
    assert spec.base == (0.2, 0.4, 0.6)
    assert spec.highlight == (1, 1, 0)
