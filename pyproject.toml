[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledpixels"
version = "0.1.0"
description = "Colour objects, pixel buffers, animation timing and TLC5947 frame packing for addressable LED strips"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "neopixel", "color", "hsl", "hsb", "pixel-buffer", "animation", "tlc5947"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ledpixels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
