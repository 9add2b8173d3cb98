"""An 8-bit-per-channel red, green, blue and white colour."""

from __future__ import annotations

from dataclasses import dataclass

from ledpixels.rgb_color import RgbColor

__all__ = ["RgbwColor"]

_MAX = 255


def _to_channel(value: float) -> int:
    """Truncate a computed value into an 8-bit channel."""
    return int(value) & 0xFF


def _element_dim(value: int, ratio: int) -> int:
    return ((value * (ratio + 1)) >> 8) & 0xFF


def _element_brighten(value: int, ratio: int) -> int:
    element = (((value + 1) << 8) // (ratio + 1)) & 0xFFFF
    if element > _MAX:
        return _MAX
    return (element - 1) & 0xFF


@dataclass
class RgbwColor:
    """Red, green, blue and white channels, each 0-255."""

    r: int = 0
    g: int = 0
    b: int = 0
    w: int = 0

    MAX = _MAX

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "w"):
            value = getattr(self, name)
            if not 0 <= value <= _MAX:
                raise ValueError(f"channel {name} out of range 0-{_MAX}: {value}")

    @classmethod
    def gray(cls, brightness: int) -> RgbwColor:
        """A grey tone carried entirely by the white channel."""
        return cls(0, 0, 0, brightness)

    @classmethod
    def from_rgb(cls, color: RgbColor) -> RgbwColor:
        """Copy the colour channels of an RgbColor, with white off."""
        return cls(color.r, color.g, color.b, 0)

    @classmethod
    def from_html(cls, value: int) -> RgbwColor:
        """Build from a 0xWWRRGGBB integer."""
        return cls(
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
            (value >> 24) & 0xFF,
        )

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> RgbwColor:
        """Build from hue, saturation and lightness in 0.0-1.0."""
        return cls.from_rgb(RgbColor.from_hsl(h, s, l))

    @classmethod
    def from_hsb(cls, h: float, s: float, b: float) -> RgbwColor:
        """Build from hue, saturation and brightness in 0.0-1.0."""
        return cls.from_rgb(RgbColor.from_hsb(h, s, b))

    def is_monotone(self) -> bool:
        """True when the colour channels are equal; white may be anything."""
        return self.r == self.b and self.r == self.g

    def is_colorless(self) -> bool:
        """True when the colour channels are all zero; white may be anything."""
        return self.r == 0 and self.b == 0 and self.g == 0

    def brightness(self) -> int:
        """The larger of the white channel and the mean of the colour channels."""
        color_brightness = (self.r + self.g + self.b) // 3
        return self.w if self.w > color_brightness else color_brightness

    def dim(self, ratio: int) -> RgbwColor:
        """A new colour blended toward black; 255 keeps the colour, 0 gives black."""
        return RgbwColor(
            _element_dim(self.r, ratio),
            _element_dim(self.g, ratio),
            _element_dim(self.b, ratio),
            _element_dim(self.w, ratio),
        )

    def brighten(self, ratio: int) -> RgbwColor:
        """A new colour blended toward white; 255 keeps the colour, 0 gives white."""
        return RgbwColor(
            _element_brighten(self.r, ratio),
            _element_brighten(self.g, ratio),
            _element_brighten(self.b, ratio),
            _element_brighten(self.w, ratio),
        )

    def darken(self, delta: int) -> None:
        """Move every channel toward black by delta, stopping at 0."""
        self.r = self.r - delta if self.r > delta else 0
        self.g = self.g - delta if self.g > delta else 0
        self.b = self.b - delta if self.b > delta else 0
        self.w = self.w - delta if self.w > delta else 0

    def lighten(self, delta: int) -> None:
        """Move toward white by delta: the white channel if colourless, else the colours."""
        limit = _MAX - delta
        if self.is_colorless():
            self.w = self.w + delta if self.w < limit else _MAX
        else:
            self.r = self.r + delta if self.r < limit else _MAX
            self.g = self.g + delta if self.g < limit else _MAX
            self.b = self.b + delta if self.b < limit else _MAX

    @staticmethod
    def linear_blend(left: RgbwColor, right: RgbwColor, progress: float) -> RgbwColor:
        """Blend linearly from left (progress 0.0) to right (progress 1.0)."""
        return RgbwColor(
            _to_channel(left.r + (right.r - left.r) * progress),
            _to_channel(left.g + (right.g - left.g) * progress),
            _to_channel(left.b + (right.b - left.b) * progress),
            _to_channel(left.w + (right.w - left.w) * progress),
        )

    @staticmethod
    def bilinear_blend(
        c00: RgbwColor,
        c01: RgbwColor,
        c10: RgbwColor,
        c11: RgbwColor,
        x: float,
        y: float,
    ) -> RgbwColor:
        """Blend four corner colours by the unit coordinates x and y."""
        v00 = (1.0 - x) * (1.0 - y)
        v10 = x * (1.0 - y)
        v01 = (1.0 - x) * y
        v11 = x * y

        def mix(a: int, b: int, c: int, d: int) -> int:
            return _to_channel(a * v00 + b * v10 + c * v01 + d * v11)

        return RgbwColor(
            mix(c00.r, c10.r, c01.r, c11.r),
            mix(c00.g, c10.g, c01.g, c11.g),
            mix(c00.b, c10.b, c01.b, c11.b),
            mix(c00.w, c10.w, c01.w, c11.w),
        )

    def total_tenth_milliampere(self, red: int, green: int, blue: int, white: int) -> int:
        """Estimated current draw in tenths of a milliampere at full-channel ratings."""
        total = (
            self.r * red // _MAX
            + self.g * green // _MAX
            + self.b * blue // _MAX
            + self.w * white // _MAX
        )
        return total & 0xFFFF