"""An 8-bit-per-channel red, green, blue colour."""

from __future__ import annotations

from dataclasses import dataclass

from ledpixels.color_base import hsb_to_rgb, hsl_to_rgb

__all__ = ["RgbColor"]

_MAX = 255


def _to_channel(value: float) -> int:
    """Truncate a computed value into an 8-bit channel."""
    return int(value) & 0xFF


def _element_dim(value: int, ratio: int) -> int:
    return ((value * (ratio + 1)) >> 8) & 0xFF


def _element_brighten(value: int, ratio: int) -> int:
    element = (((value + 1) << 8) // (ratio + 1)) & 0xFFFF
    if element > _MAX:
        element = _MAX
    else:
        element = (element - 1) & 0xFFFF
    return element & 0xFF


@dataclass
class RgbColor:
    """Red, green and blue channels, each 0-255."""

    r: int = 0
    g: int = 0
    b: int = 0

    MAX = _MAX

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= _MAX:
                raise ValueError(f"channel {name} out of range 0-{_MAX}: {value}")

    @classmethod
    def gray(cls, brightness: int) -> RgbColor:
        """A grey tone with every channel set to brightness."""
        return cls(brightness, brightness, brightness)

    @classmethod
    def from_html(cls, value: int) -> RgbColor:
        """Build from a 0xRRGGBB integer."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> RgbColor:
        """Build from hue, saturation and lightness in 0.0-1.0."""
        r, g, b = hsl_to_rgb(h, s, l)
        return cls(_to_channel(r * _MAX), _to_channel(g * _MAX), _to_channel(b * _MAX))

    @classmethod
    def from_hsb(cls, h: float, s: float, b: float) -> RgbColor:
        """Build from hue, saturation and brightness in 0.0-1.0."""
        r, g, bl = hsb_to_rgb(h, s, b)
        return cls(_to_channel(r * _MAX), _to_channel(g * _MAX), _to_channel(bl * _MAX))

    def brightness(self) -> int:
        """Simple linear brightness: the mean of the channels."""
        return (self.r + self.g + self.b) // 3

    def dim(self, ratio: int) -> RgbColor:
        """A new colour blended toward black; 255 keeps the colour, 0 gives black."""
        return RgbColor(
            _element_dim(self.r, ratio),
            _element_dim(self.g, ratio),
            _element_dim(self.b, ratio),
        )

    def brighten(self, ratio: int) -> RgbColor:
        """A new colour blended toward white; 255 keeps the colour, 0 gives white."""
        return RgbColor(
            _element_brighten(self.r, ratio),
            _element_brighten(self.g, ratio),
            _element_brighten(self.b, ratio),
        )

    def darken(self, delta: int) -> None:
        """Move every channel toward black by delta, stopping at 0."""
        self.r = self.r - delta if self.r > delta else 0
        self.g = self.g - delta if self.g > delta else 0
        self.b = self.b - delta if self.b > delta else 0

    def lighten(self, delta: int) -> None:
        """Move every channel toward white by delta, stopping at 255."""
        limit = _MAX - delta
        self.r = self.r + delta if self.r < limit else _MAX
        self.g = self.g + delta if self.g < limit else _MAX
        self.b = self.b + delta if self.b < limit else _MAX

    @staticmethod
    def linear_blend(left: RgbColor, right: RgbColor, progress: float) -> RgbColor:
        """Blend linearly from left (progress 0.0) to right (progress 1.0)."""
        return RgbColor(
            _to_channel(left.r + (right.r - left.r) * progress),
            _to_channel(left.g + (right.g - left.g) * progress),
            _to_channel(left.b + (right.b - left.b) * progress),
        )

    @staticmethod
    def bilinear_blend(
        c00: RgbColor,
        c01: RgbColor,
        c10: RgbColor,
        c11: RgbColor,
        x: float,
        y: float,
    ) -> RgbColor:
        """Blend four corner colours by the unit coordinates x and y."""
        v00 = (1.0 - x) * (1.0 - y)
        v10 = x * (1.0 - y)
        v01 = (1.0 - x) * y
        v11 = x * y

        def mix(a: int, b: int, c: int, d: int) -> int:
            return _to_channel(a * v00 + b * v10 + c * v01 + d * v11)

        return RgbColor(
            mix(c00.r, c10.r, c01.r, c11.r),
            mix(c00.g, c10.g, c01.g, c11.g),
            mix(c00.b, c10.b, c01.b, c11.b),
        )

    def total_tenth_milliampere(self, red: int, green: int, blue: int) -> int:
        """Estimated current draw in tenths of a milliampere at full-channel ratings."""
        return (
            self.r * red // _MAX
            + self.g * green // _MAX
            + self.b * blue // _MAX
        )