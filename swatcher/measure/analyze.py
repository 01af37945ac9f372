# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Swatch analysis: sample a region at a stride and tally exact colors.

The walk visits x = region.x, region.x + stride, ... (outer) and, for each
x, y = region.y, region.y + stride, ... (inner). With stride > 1 this is a
subsample grid, not a full scan; stride is the accuracy/speed knob.

The walk is expressed as a strided slice of the pixel array, transposed
so that flattening follows the x-major scan order. Colors are packed into
0xRRGGBB keys and counted with np.unique; the first index of each key
breaks ties between equal counts.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from swatcher.errors import InvalidArgument
from swatcher.schema import Region, RGBColor, SwatchCount, SwatchTally
from swatcher.measure.colorspace import pack_rgb, unpack_rgb
from swatcher.measure.source import ImageInput, load_image

logger = logging.getLogger(__name__)

DEFAULT_STRIDE = 4


def validate_stride(stride: int) -> int:
    """Return stride, or raise InvalidArgument if it is not a positive int."""
    if isinstance(stride, bool) or not isinstance(stride, (int, np.integer)) or stride < 1:
        raise InvalidArgument(f"Stride must be a positive integer, got {stride!r}")
    return int(stride)


def analyze_pixels(
    image: ImageInput,
    region: Optional[Region] = None,
    stride: int = DEFAULT_STRIDE,
) -> SwatchTally:
    """
    Tally the colors of a region, sampled every `stride` pixels.

    Args:
        image: PixelSource, file path, or (H, W, 3) uint8 array
        region: Area to walk. Defaults to the whole image.
        stride: Step along both axes (>= 1). Default 4 (Low accuracy).

    Returns:
        SwatchTally ranked by count descending; equal counts keep the
        order in which the colors were first seen in the scan.
        A region with zero or negative width/height gives an empty tally.

    Raises:
        InvalidArgument: stride < 1
        OutOfRange: a non-empty region reaches outside the image

    Example:
        >>> tally = analyze_pixels("photo.png", stride=1)
        >>> tally.as_dict()
        {'rgb(255, 0, 0)': 15, 'rgb(0, 0, 255)': 1}
    """
    stride = validate_stride(stride)
    source = load_image(image)

    if region is None:
        region = source.bounds

    if region.is_empty:
        return SwatchTally(entries=(), region=region, stride=stride)

    source.check_region(region)

    x1, y1 = region.nw
    x2, y2 = region.se
    # (rows, cols, 3) -> (cols, rows, 3) so flattening is x-major
    block = source.pixels[y1:y2:stride, x1:x2:stride]
    samples = block.transpose(1, 0, 2).reshape(-1, 3)

    keys = pack_rgb(samples)
    unique, first_seen, counts = np.unique(keys, return_index=True, return_counts=True)

    # Primary key last: count descending, then first appearance ascending
    order = np.lexsort((first_seen, -counts.astype(np.int64)))

    ranked = unpack_rgb(unique[order])
    entries = [
        SwatchCount(color=RGBColor(int(r), int(g), int(b)), count=int(c))
        for (r, g, b), c in zip(ranked, counts[order])
    ]

    logger.debug(
        "Analyzed region %s at stride %d: %d samples, %d colors",
        region.to_dict(), stride, len(samples), len(entries),
    )
    return SwatchTally(entries=tuple(entries), region=region, stride=stride)
