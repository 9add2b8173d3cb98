import pytest

from ledpixels.color_base import hsb_to_rgb, hsl_to_rgb


@pytest.mark.parametrize("l", [0.0, 0.25, 0.5, 1.0])
def test_hsl_achromatic_returns_lightness(l):
    assert hsl_to_rgb(0.3, 0.0, l) == (l, l, l)


def test_hsl_zero_lightness_is_black_regardless_of_saturation():
    assert hsl_to_rgb(0.7, 1.0, 0.0) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("h", [0.0, 0.1, 0.25, 0.4, 0.6, 0.8, 0.95])
@pytest.mark.parametrize("s,l", [(1.0, 0.5), (0.5, 0.3), (0.8, 0.7)])
def test_hsl_extremes_average_to_lightness(h, s, l):
    rgb = hsl_to_rgb(h, s, l)
    assert (max(rgb) + min(rgb)) / 2 == pytest.approx(l)
    assert all(-1e-9 <= c <= 1.0 + 1e-9 for c in rgb)


@pytest.mark.parametrize("b", [0.0, 0.4, 1.0])
def test_hsb_achromatic_returns_brightness(b):
    assert hsb_to_rgb(0.5, 0.0, b) == (b, b, b)


@pytest.mark.parametrize("h", [0.0, 0.1, 0.2, 0.35, 0.5, 0.7, 0.9])
@pytest.mark.parametrize("s,b", [(1.0, 1.0), (0.5, 0.8), (0.25, 0.6)])
def test_hsb_max_is_brightness_and_min_is_scaled(h, s, b):
    rgb = hsb_to_rgb(h, s, b)
    assert max(rgb) == pytest.approx(b)
    assert min(rgb) == pytest.approx(b * (1.0 - s))


def test_hsb_hue_one_wraps_to_zero():
    assert hsb_to_rgb(1.0, 1.0, 1.0) == pytest.approx(hsb_to_rgb(0.0, 1.0, 1.0))


def test_hsb_negative_hue_wraps():
    assert hsb_to_rgb(-0.25, 0.5, 0.5) == pytest.approx(hsb_to_rgb(0.75, 0.5, 0.5))


def test_hsb_pure_red():
    assert hsb_to_rgb(0.0, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))