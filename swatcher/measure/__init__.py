# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Measurement core for Swatcher.

Deterministic, single-threaded sampling and tallying over a decoded
pixel grid. Colors are compared exactly; nothing is clustered.
"""

from swatcher.measure.source import PixelSource, load_image
from swatcher.measure.analyze import analyze_pixels
from swatcher.measure.select import dominant_swatch, top_swatches
from swatcher.measure.composite import (
    generate_composite,
    iter_composite,
    render_composite,
)

__all__ = [
    "PixelSource",
    "load_image",
    "analyze_pixels",
    "top_swatches",
    "dominant_swatch",
    "iter_composite",
    "generate_composite",
    "render_composite",
]
