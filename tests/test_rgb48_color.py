import pytest

from ledpixels.rgb48_color import Rgb48Color
from ledpixels.rgb_color import RgbColor


def test_gray_sets_all_channels():
    assert Rgb48Color.gray(1234) == Rgb48Color(1234, 1234, 1234)


def test_out_of_range_channel_rejected():
    with pytest.raises(ValueError):
        Rgb48Color(65536, 0, 0)
    with pytest.raises(ValueError):
        Rgb48Color(0, -1, 0)


def test_from_rgb_keeps_zero_and_full():
    assert Rgb48Color.from_rgb(RgbColor(0, 255, 0)) == Rgb48Color(0, Rgb48Color.MAX, 0)


def test_from_rgb_fills_low_byte():
    color = Rgb48Color.from_rgb(RgbColor(1, 128, 7))
    assert color.r == (1 << 8) | 0xFF
    assert color.g == (128 << 8) | 0xFF
    assert color.b == (7 << 8) | 0xFF


def test_from_html_matches_from_rgb():
    assert Rgb48Color.from_html(0x12AB00) == Rgb48Color.from_rgb(RgbColor(0x12, 0xAB, 0x00))


def test_from_html_pure_red():
    assert Rgb48Color.from_html(0xFF0000) == Rgb48Color(Rgb48Color.MAX, 0, 0)


def test_from_hsl_white_and_black():
    assert Rgb48Color.from_hsl(0.3, 0.0, 1.0) == Rgb48Color.gray(Rgb48Color.MAX)
    assert Rgb48Color.from_hsl(0.3, 0.7, 0.0) == Rgb48Color.gray(0)


def test_from_hsb_primary():
    assert Rgb48Color.from_hsb(0.0, 1.0, 1.0) == Rgb48Color(Rgb48Color.MAX, 0, 0)


def test_brightness_of_gray():
    assert Rgb48Color.gray(40000).brightness() == 40000


def test_dim_full_ratio_keeps_color():
    color = Rgb48Color(100, 30000, 65535)
    assert color.dim(65535) == color


def test_dim_zero_ratio_gives_black():
    assert Rgb48Color(100, 30000, 65535).dim(0) == Rgb48Color()


def test_brighten_full_ratio_keeps_color():
    color = Rgb48Color(0, 30000, 65535)
    assert color.brighten(65535) == color


def test_brighten_zero_ratio_gives_white():
    assert Rgb48Color(0, 30000, 65535).brighten(0) == Rgb48Color.gray(Rgb48Color.MAX)


def test_darken_clamps_at_zero():
    color = Rgb48Color(10, 500, 65535)
    color.darken(100)
    assert color == Rgb48Color(0, 400, 65435)


def test_lighten_clamps_at_max():
    color = Rgb48Color(65500, 0, 100)
    color.lighten(100)
    assert color == Rgb48Color(Rgb48Color.MAX, 100, 200)


def test_linear_blend_endpoints():
    left = Rgb48Color(0, 1000, 65535)
    right = Rgb48Color(65535, 3000, 0)
    assert Rgb48Color.linear_blend(left, right, 0.0) == left
    assert Rgb48Color.linear_blend(left, right, 1.0) == right


def test_linear_blend_between_same_colors():
    color = Rgb48Color(1, 2, 3)
    assert Rgb48Color.linear_blend(color, color, 0.42) == color


def test_bilinear_blend_corners():
    c00 = Rgb48Color(1, 2, 3)
    c01 = Rgb48Color(4, 5, 6)
    c10 = Rgb48Color(7, 8, 9)
    c11 = Rgb48Color(10, 11, 12)
    assert Rgb48Color.bilinear_blend(c00, c01, c10, c11, 0.0, 0.0) == c00
    assert Rgb48Color.bilinear_blend(c00, c01, c10, c11, 1.0, 0.0) == c10
    assert Rgb48Color.bilinear_blend(c00, c01, c10, c11, 0.0, 1.0) == c01
    assert Rgb48Color.bilinear_blend(c00, c01, c10, c11, 1.0, 1.0) == c11


def test_total_current_full_channels():
    color = Rgb48Color(Rgb48Color.MAX, Rgb48Color.MAX, 0)
    assert color.total_tenth_milliampere(200, 150, 100) == 350


def test_total_current_black_is_zero():
    assert Rgb48Color().total_tenth_milliampere(200, 200, 200) == 0