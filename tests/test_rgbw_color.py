import pytest

from ledpixels.rgb_color import RgbColor
from ledpixels.rgbw_color import RgbwColor


def test_gray_uses_white_channel():
    assert RgbwColor.gray(77) == RgbwColor(0, 0, 0, 77)


def test_from_rgb_copies_channels_with_white_off():
    assert RgbwColor.from_rgb(RgbColor(10, 20, 30)) == RgbwColor(10, 20, 30, 0)


def test_from_html_reads_white_from_top_byte():
    assert RgbwColor.from_html(0x11223344) == RgbwColor(0x22, 0x33, 0x44, 0x11)


def test_from_hsl_matches_rgb_conversion():
    rgb = RgbColor.from_hsl(0.3, 0.7, 0.4)
    assert RgbwColor.from_hsl(0.3, 0.7, 0.4) == RgbwColor(rgb.r, rgb.g, rgb.b, 0)


def test_from_hsb_matches_rgb_conversion():
    rgb = RgbColor.from_hsb(0.6, 0.5, 0.9)
    assert RgbwColor.from_hsb(0.6, 0.5, 0.9) == RgbwColor(rgb.r, rgb.g, rgb.b, 0)


def test_out_of_range_channel_rejected():
    with pytest.raises(ValueError):
        RgbwColor(0, 0, 0, 256)
    with pytest.raises(ValueError):
        RgbwColor(-1, 0, 0, 0)


def test_monotone_and_colorless():
    assert RgbwColor(5, 5, 5, 9).is_monotone()
    assert not RgbwColor(5, 6, 5, 9).is_monotone()
    assert RgbwColor(0, 0, 0, 200).is_colorless()
    assert not RgbwColor(0, 1, 0, 0).is_colorless()


@pytest.mark.parametrize(
    "color",
    [RgbwColor(30, 60, 90, 10), RgbwColor(30, 60, 90, 200), RgbwColor(0, 0, 0, 0)],
)
def test_brightness_is_max_of_white_and_mean(color):
    rgb_mean = RgbColor(color.r, color.g, color.b).brightness()
    assert color.brightness() == max(color.w, rgb_mean)


def test_dim_full_ratio_keeps_color_and_zero_gives_black():
    color = RgbwColor(12, 130, 255, 64)
    assert color.dim(255) == color
    assert color.dim(0) == RgbwColor(0, 0, 0, 0)


def test_brighten_full_ratio_keeps_color_and_zero_gives_white():
    color = RgbwColor(12, 130, 255, 64)
    assert color.brighten(255) == color
    assert color.brighten(0) == RgbwColor(255, 255, 255, 255)


def test_darken_clamps_at_zero():
    color = RgbwColor(10, 100, 200, 50)
    color.darken(60)
    assert color == RgbwColor(0, 40, 140, 0)


def test_lighten_colorless_changes_only_white():
    color = RgbwColor(0, 0, 0, 250)
    color.lighten(10)
    assert color == RgbwColor(0, 0, 0, 255)


def test_lighten_colored_leaves_white():
    color = RgbwColor(1, 250, 100, 7)
    color.lighten(10)
    assert color == RgbwColor(11, 255, 110, 7)


def test_linear_blend_endpoints():
    left = RgbwColor(0, 50, 100, 200)
    right = RgbwColor(200, 150, 0, 20)
    assert RgbwColor.linear_blend(left, right, 0.0) == left
    assert RgbwColor.linear_blend(left, right, 1.0) == right


def test_bilinear_blend_corners():
    c00 = RgbwColor(1, 2, 3, 4)
    c01 = RgbwColor(10, 20, 30, 40)
    c10 = RgbwColor(100, 110, 120, 130)
    c11 = RgbwColor(200, 210, 220, 230)
    assert RgbwColor.bilinear_blend(c00, c01, c10, c11, 0.0, 0.0) == c00
    assert RgbwColor.bilinear_blend(c00, c01, c10, c11, 1.0, 0.0) == c10
    assert RgbwColor.bilinear_blend(c00, c01, c10, c11, 0.0, 1.0) == c01
    assert RgbwColor.bilinear_blend(c00, c01, c10, c11, 1.0, 1.0) == c11


def test_total_current_full_and_off():
    full = RgbwColor(255, 255, 255, 255)
    assert full.total_tenth_milliampere(160, 170, 180, 190) == 160 + 170 + 180 + 190
    assert RgbwColor(0, 0, 0, 0).total_tenth_milliampere(160, 170, 180, 190) == 0