"""Colour types, HSL/HSB conversion, pixel buffers, animation timing and TLC5947 frames for LED strips."""

__version__ = "0.1.0"