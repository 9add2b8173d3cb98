"""In-memory pixel buffers addressed by index or by x, y coordinates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["PixelFeature", "BufferContext", "PixelBuffer", "ReadOnlyPixelBuffer"]


@dataclass(frozen=True)
class PixelFeature:
    """How one colour type is laid out as bytes in a pixel buffer.

    encode turns a colour into exactly pixel_size bytes, decode turns
    pixel_size bytes back into a colour, and black is what reads of
    out-of-range pixels return.
    """

    pixel_size: int
    encode: Callable[[Any], bytes]
    decode: Callable[[bytes], Any]
    black: Any

    def __post_init__(self) -> None:
        if self.pixel_size <= 0:
            raise ValueError(f"pixel size must be positive: {self.pixel_size}")

    def _encode(self, color: Any) -> bytes:
        raw = bytes(self.encode(color))
        if len(raw) != self.pixel_size:
            raise ValueError(
                f"encoded pixel has {len(raw)} bytes, expected {self.pixel_size}"
            )
        return raw

    def _decode_at(self, pixels: bytes | bytearray, index: int) -> Any:
        start = index * self.pixel_size
        return self.decode(bytes(pixels[start:start + self.pixel_size]))


@dataclass(frozen=True)
class BufferContext:
    """Raw pixel bytes together with the feature that describes them."""

    pixels: bytes | bytearray
    feature: PixelFeature

    def pixel_count(self) -> int:
        """Number of whole pixels held in the bytes."""
        return len(self.pixels) // self.feature.pixel_size


class _GridBase:
    def __init__(self, width: int, height: int, feature: PixelFeature) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"buffer dimensions must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.feature = feature

    @property
    def pixel_size(self) -> int:
        return self.feature.pixel_size

    @property
    def pixels_size(self) -> int:
        return self.pixel_size * self.pixel_count()

    def pixel_count(self) -> int:
        """Number of pixels, width times height."""
        return self.width * self.height

    def _index_of(self, x: int, y: int) -> int | None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return None
        return x + y * self.width

    def _check_initial(self, pixels: bytes | bytearray) -> None:
        if len(pixels) < self.pixels_size:
            raise ValueError(
                f"initial pixels hold {len(pixels)} bytes, need {self.pixels_size}"
            )


class PixelBuffer(_GridBase):
    """A writable width by height grid of pixels."""

    def __init__(
        self,
        width: int,
        height: int,
        feature: PixelFeature,
        pixels: bytes | bytearray | None = None,
    ) -> None:
        super().__init__(width, height, feature)
        if pixels is None:
            self.pixels = bytearray(self.pixels_size)
        else:
            self._check_initial(pixels)
            self.pixels = bytearray(pixels[:self.pixels_size])

    def context(self) -> BufferContext:
        """A view of the raw bytes and their feature."""
        return BufferContext(self.pixels, self.feature)

    def pixel_count(self) -> int:
        """Number of pixels, width times height."""
        return super().pixel_count()

    def _write(self, index: int, color: Any) -> None:
        start = index * self.pixel_size
        self.pixels[start:start + self.pixel_size] = self.feature._encode(color)

    def set_pixel_color(self, index: int, color: Any) -> None:
        """Set the pixel at index; indexes outside the buffer are ignored."""
        if 0 <= index < self.pixel_count():
            self._write(index, color)

    def set_pixel_xy(self, x: int, y: int, color: Any) -> None:
        """Set the pixel at x, y; coordinates outside the grid are ignored."""
        index = self._index_of(x, y)
        if index is not None:
            self._write(index, color)

    def get_pixel_color(self, index: int) -> Any:
        """The colour at index, or the feature's black when out of range."""
        if not 0 <= index < self.pixel_count():
            return self.feature.black
        return self.feature._decode_at(self.pixels, index)

    def get_pixel_xy(self, x: int, y: int) -> Any:
        """The colour at x, y, or the feature's black when outside the grid."""
        index = self._index_of(x, y)
        if index is None:
            return self.feature.black
        return self.feature._decode_at(self.pixels, index)

    def clear_to(self, color: Any) -> None:
        """Set every pixel to color."""
        self.pixels[:] = self.feature._encode(color) * self.pixel_count()


class ReadOnlyPixelBuffer(_GridBase):
    """A grid of pixels over fixed bytes; writes are silently ignored."""

    def __init__(
        self,
        width: int,
        height: int,
        feature: PixelFeature,
        pixels: bytes | bytearray,
    ) -> None:
        super().__init__(width, height, feature)
        self._check_initial(pixels)
        self.pixels = bytes(pixels)

    def context(self) -> BufferContext:
        """A view of the raw bytes and their feature."""
        return BufferContext(self.pixels, self.feature)

    def pixel_count(self) -> int:
        """Number of pixels, width times height."""
        return super().pixel_count()

    def set_pixel_color(self, index: int, color: Any) -> None:
        """Does nothing: the pixels are read only."""

    def set_pixel_xy(self, x: int, y: int, color: Any) -> None:
        """Does nothing: the pixels are read only."""

    def get_pixel_color(self, index: int) -> Any:
        """The colour at index, or the feature's black when out of range."""
        if not 0 <= index < self.pixel_count():
            return self.feature.black
        return self.feature._decode_at(self.pixels, index)

    def get_pixel_xy(self, x: int, y: int) -> Any:
        """The colour at x, y, or the feature's black when outside the grid."""
        index = self._index_of(x, y)
        if index is None:
            return self.feature.black
        return self.feature._decode_at(self.pixels, index)

    def clear_to(self, color: Any) -> None:
        """Does nothing: the pixels are read only."""