# ledpixels

Pure-Python building blocks for addressable LED strips:

- colour types with 8-bit and 16-bit channels:
  `RgbColor` (`ledpixels.rgb_color`), `RgbwColor` (`ledpixels.rgbw_color`)
  and `Rgb48Color` (`ledpixels.rgb48_color`);
- HSL and HSB conversion to unit RGB floats: `hsl_to_rgb` and `hsb_to_rgb`
  in `ledpixels.color_base`;
- in-memory pixel grids addressed by index or by x/y:
  `PixelBuffer` and `ReadOnlyPixelBuffer` in `ledpixels.buffer`;
- an animation timer that drives many callbacks at once: `Animator` in
  `ledpixels.animator`;
- frame packing for the TLC5947 24-channel, 12-bit PWM driver:
  `Tlc5947Encoder`, `convert_frame_8bit` and `convert_frame_16bit` in
  `ledpixels.tlc5947`.

The package has no dependencies beyond the standard library.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Colours

```python
from ledpixels.rgb_color import RgbColor

red = RgbColor(255, 0, 0)
orange = RgbColor.from_html(0xFF8000)
half = RgbColor.linear_blend(red, orange, 0.5)
dimmed = red.dim(128)          # RgbColor(r=128, g=0, b=0)
print(red.brightness())        # mean of the channels: 85
```

Each colour type is a dataclass whose channels are checked on construction
(0-255 for the 8-bit types, 0-65535 for `Rgb48Color`); an out-of-range
channel raises `ValueError`. Every type offers:

- `gray(brightness)` and `from_html(value)`, `from_hsl(h, s, l)`,
  `from_hsb(h, s, b)` constructors;
- `dim(ratio)` and `brighten(ratio)`, which return a new colour blended
  toward black or white using integer arithmetic;
- `darken(delta)` and `lighten(delta)`, which change the colour in place and
  stop at the channel limits;
- `linear_blend(left, right, progress)` and
  `bilinear_blend(c00, c01, c10, c11, x, y)`;
- `total_tenth_milliampere(...)`, an estimate of current draw from the
  full-brightness figure you give for each channel.

`RgbwColor` keeps grey tones in its white channel: `RgbwColor.gray(b)` sets
only white, `from_html` reads a `0xWWRRGGBB` value, and `lighten` raises the
white channel when the colour channels are all zero. It also has
`is_monotone()` and `is_colorless()`. `RgbwColor.from_rgb` and
`Rgb48Color.from_rgb` convert from `RgbColor`; the 16-bit widening keeps zero
at zero and fills the low byte of any other channel with `0xFF`.

## Pixel buffers

A `PixelFeature` says how a colour becomes bytes and back:

```python
from ledpixels.buffer import PixelBuffer, PixelFeature
from ledpixels.rgb_color import RgbColor

rgb = PixelFeature(
    pixel_size=3,
    encode=lambda c: bytes((c.r, c.g, c.b)),
    decode=lambda raw: RgbColor(*raw),
    black=RgbColor(),
)

grid = PixelBuffer(8, 4, rgb)
grid.clear_to(RgbColor(0, 0, 32))
grid.set_pixel_xy(2, 1, RgbColor(255, 0, 0))
print(grid.get_pixel_color(10))       # RgbColor(r=255, g=0, b=0)
print(grid.get_pixel_xy(99, 99))      # out of range: the feature's black
```

Writes outside the grid are ignored and reads outside it return the
feature's `black`. `ReadOnlyPixelBuffer` reads the same way over fixed bytes
and ignores every write. `context()` returns a `BufferContext` holding the raw
bytes and their feature.

## Animation

```python
from ledpixels.animator import Animator, AnimationState

animator = Animator(4)

def on_update(param):
    if param.state is AnimationState.COMPLETED:
        print("animation", param.index, "done")

animator.start(0, 1000, on_update)
while animator.active_count():
    animator.update()
```

Durations count units of `time_scale` milliseconds (1 by default). Each
callback receives an `AnimationParam` with the slot index, a state
(`STARTED`, `PROGRESS` or `COMPLETED`) and a progress from 0.0 to 1.0.
`next_available(start)` finds a free slot, `stop`, `stop_all` and
`change_duration` manage running ones, and a custom `clock` returning
milliseconds can be passed for tests or simulation.

## TLC5947 frames

```python
from ledpixels.tlc5947 import Tlc5947Encoder

encoder = Tlc5947Encoder(pixel_count=8, element_size=3)
data = bytes(encoder.data_size())
for frame in encoder.frames(data):
    ...  # 36 bytes per module, last module first
```

With `sixteen_bit=True` each channel takes two little-endian bytes in the
buffer and only its upper 12 bits are sent.

## What it does not do

The package never touches hardware: it drives no pins, serial ports or SPI
buses, and has no timing loops for sending data. It gives you colours,
buffers and byte frames for your own output code to send. It has no gamma
correction, no colour type with four 16-bit channels, and no serial-line bit
encoding for single-wire LED strips.