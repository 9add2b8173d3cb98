"""Frame encoding for TLC5947 24-channel, 12-bit PWM LED controllers.

Channel values are shifted out last module first, and within each module
last channel first, two 12-bit channels packed into every three bytes.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = [
    "CHANNELS_PER_MODULE",
    "FRAME_SIZE",
    "convert_frame_8bit",
    "convert_frame_16bit",
    "Tlc5947Encoder",
]

CHANNELS_PER_MODULE = 24
# 24 channels of 12 bits each
FRAME_SIZE = 36


def _check_channels(channels: Sequence[int], limit: int) -> None:
    if len(channels) != CHANNELS_PER_MODULE:
        raise ValueError(
            f"a module has {CHANNELS_PER_MODULE} channels, got {len(channels)}"
        )
    for value in channels:
        if not 0 <= value <= limit:
            raise ValueError(f"channel value out of range 0-{limit}: {value}")


def _pairs_reversed(channels: Sequence[int]) -> Iterator[tuple[int, int]]:
    backwards = list(reversed(channels))
    return zip(backwards[0::2], backwards[1::2])


def convert_frame_8bit(channels: Sequence[int]) -> bytes:
    """Pack one module's 24 8-bit channels into 36 bytes, scaling each to 12 bits."""
    _check_channels(channels, 0xFF)
    out = bytearray()
    for ch1, ch2 in _pairs_reversed(channels):
        out.append(ch1)
        out.append((ch1 & 0xF0) | (ch2 >> 4))
        out.append(((ch2 << 4) & 0xF0) | (ch2 >> 4))
    return bytes(out)


def convert_frame_16bit(channels: Sequence[int]) -> bytes:
    """Pack one module's 24 16-bit channels into 36 bytes, keeping the upper 12 bits."""
    _check_channels(channels, 0xFFFF)
    out = bytearray()
    for ch1, ch2 in _pairs_reversed(channels):
        out.append(ch1 >> 8)
        out.append((ch1 & 0xF0) | (ch2 >> 12))
        out.append((ch2 >> 4) & 0xFF)
    return bytes(out)


class Tlc5947Encoder:
    """Turns a strip's pixel buffer into the frames sent to a chain of modules.

    With sixteen_bit set, each channel takes two little-endian bytes in the
    buffer; otherwise one byte.
    """

    def __init__(
        self,
        pixel_count: int,
        element_size: int,
        settings_size: int = 0,
        sixteen_bit: bool = False,
    ) -> None:
        for label, value in (
            ("pixel count", pixel_count),
            ("element size", element_size),
            ("settings size", settings_size),
        ):
            if value < 0:
                raise ValueError(f"{label} must not be negative: {value}")
        self.pixel_count = pixel_count
        self.element_size = element_size
        self.settings_size = settings_size
        self.sixteen_bit = sixteen_bit

    @property
    def channel_size(self) -> int:
        return 2 if self.sixteen_bit else 1

    def module_count(self) -> int:
        """Number of 24-channel modules needed for every pixel channel."""
        channels = self.pixel_count * self.element_size // self.channel_size
        return -(-channels // CHANNELS_PER_MODULE)

    @property
    def _channel_bytes(self) -> int:
        return self.module_count() * CHANNELS_PER_MODULE * self.channel_size

    def data_size(self) -> int:
        """Bytes of buffer: all module channels plus the settings bytes."""
        return self._channel_bytes + self.settings_size

    def _channels(self, data: bytes | bytearray) -> list[int]:
        raw = bytes(data[:self._channel_bytes])
        if self.sixteen_bit:
            return [
                int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)
            ]
        return list(raw)

    def frames(self, data: bytes | bytearray) -> Iterator[bytes]:
        """The 36-byte frames to shift out, last module first."""
        if len(data) < self._channel_bytes:
            raise ValueError(
                f"data holds {len(data)} bytes, need {self._channel_bytes}"
            )
        channels = self._channels(data)
        convert = convert_frame_16bit if self.sixteen_bit else convert_frame_8bit
        for module in reversed(range(self.module_count())):
            start = module * CHANNELS_PER_MODULE
            yield convert(channels[start:start + CHANNELS_PER_MODULE])