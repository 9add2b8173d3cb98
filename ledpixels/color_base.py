"""Shared colour-space conversions used by the RGB colour types."""

from __future__ import annotations

__all__ = ["hsl_to_rgb", "hsb_to_rgb"]


def _calc_color(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0

    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """Convert hue, saturation and lightness (all 0.0-1.0) to unit RGB floats."""
    if s == 0.0 or l == 0.0:
        # achromatic or black
        return (l, l, l)

    q = l * (1.0 + s) if l < 0.5 else l + s - (l * s)
    p = 2.0 * l - q
    return (
        _calc_color(p, q, h + 1.0 / 3.0),
        _calc_color(p, q, h),
        _calc_color(p, q, h - 1.0 / 3.0),
    )


def hsb_to_rgb(h: float, s: float, b: float) -> tuple[float, float, float]:
    """Convert hue, saturation and brightness (all 0.0-1.0) to unit RGB floats."""
    v = b
    if s == 0.0:
        # achromatic or black
        return (v, v, v)

    if h < 0.0:
        h += 1.0
    elif h >= 1.0:
        h -= 1.0
    h *= 6.0
    sector = int(h)
    f = h - sector
    q = v * (1.0 - s * f)
    p = v * (1.0 - s)
    t = v * (1.0 - s * (1.0 - f))

    match sector:
        case 0:
            return (v, t, p)
        case 1:
            return (q, v, p)
        case 2:
            return (p, v, t)
        case 3:
            return (p, q, v)
        case 4:
            return (t, p, v)
        case _:
            return (v, p, q)