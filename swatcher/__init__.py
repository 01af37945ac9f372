# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Swatcher -- Representative colors from raster images.

Samples an image's pixel grid at a configurable stride, tallies exact
colors, and reports the most frequent ones. Also cuts an image into
fixed-size tiles and reports one dominant color per tile.

Quick start::

    from swatcher import Swatcher

    s = Swatcher("image.png", accuracy="Medium")
    s.top_swatches(5)         # Five most frequent colors
    s.dominant()              # The most frequent one
    s.generate_composite(16)  # Dominant color of every 16x16 tile
"""

from __future__ import annotations

__version__ = "1.0.0"

from swatcher.errors import (
    CompositeTimeout,
    DecodeError,
    InvalidArgument,
    OutOfRange,
    SwatcherError,
    UnsupportedFormat,
)
from swatcher.schema import (
    Accuracy,
    Composite,
    Region,
    RGBColor,
    SwatchCount,
    SwatchTally,
    Tile,
)
from swatcher.measure import (
    PixelSource,
    analyze_pixels,
    dominant_swatch,
    generate_composite,
    iter_composite,
    load_image,
    render_composite,
    top_swatches,
)
from swatcher.config import SwatcherConfig
from swatcher.session import Swatcher

__all__ = [
    # Core API
    "Swatcher",
    "SwatcherConfig",
    "analyze_pixels",
    "top_swatches",
    "dominant_swatch",
    "iter_composite",
    "generate_composite",
    "render_composite",
    "load_image",
    "PixelSource",
    # Types
    "RGBColor",
    "Accuracy",
    "Region",
    "SwatchCount",
    "SwatchTally",
    "Tile",
    "Composite",
    # Errors
    "SwatcherError",
    "DecodeError",
    "UnsupportedFormat",
    "OutOfRange",
    "InvalidArgument",
    "CompositeTimeout",
    # Version
    "__version__",
]
