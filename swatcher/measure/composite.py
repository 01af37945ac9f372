# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Color composite: one dominant color per fixed-size square tile.

The image is cut into width // size columns and height // size rows of
size × size tiles. Any strip narrower than a tile along the right or
bottom edge is left out; it is not a partial tile.

Tiles are produced column by column (all rows of column 0, then column 1,
...). Each tile is analyzed independently with its own tally.
"""

from __future__ import annotations

import logging
import time
from typing import Iterator, Optional

import numpy as np
from PIL import Image

from swatcher.errors import CompositeTimeout, InvalidArgument
from swatcher.schema import Composite, Region, Tile
from swatcher.measure.analyze import analyze_pixels, validate_stride
from swatcher.measure.select import dominant_swatch
from swatcher.measure.source import ImageInput, load_image

logger = logging.getLogger(__name__)


def _validate_tile_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
        raise InvalidArgument(f"Tile size must be a positive integer, got {size!r}")
    return int(size)


def _grid_dimensions(width: int, height: int, size: int) -> tuple[int, int]:
    """(columns, rows) of whole tiles that fit in the image."""
    return width // size, height // size


def iter_composite(
    image: ImageInput,
    size: int,
    *,
    stride: int = 1,
    deadline: Optional[float] = None,
) -> Iterator[Tile]:
    """
    Yield one Tile per size × size square, in column-major order.

    This is a generator: it can be consumed once. Arguments are checked
    when it is created, not on first iteration.

    Args:
        image: PixelSource, file path, or (H, W, 3) uint8 array
        size: Tile edge length in pixels (>= 1)
        stride: Sampling stride inside each tile (default 1, every pixel)
        deadline: Optional wall-clock budget in seconds for the whole walk.
            Checked before each tile; exceeding it raises CompositeTimeout.

    Raises:
        InvalidArgument: size < 1, stride < 1, or deadline <= 0
    """
    size = _validate_tile_size(size)
    stride = validate_stride(stride)
    if deadline is not None and deadline <= 0:
        raise InvalidArgument(f"Deadline must be positive, got {deadline!r}")
    source = load_image(image)
    return _walk_tiles(source, size, stride, deadline)


def _walk_tiles(source, size: int, stride: int, deadline: Optional[float]) -> Iterator[Tile]:
    columns, rows = _grid_dimensions(source.width, source.height, size)
    expires = time.monotonic() + deadline if deadline is not None else None

    for column in range(columns):
        x = column * size
        for row in range(rows):
            if expires is not None and time.monotonic() > expires:
                logger.warning(
                    "Composite deadline of %.3fs exceeded at tile (%d, %d) of %dx%d",
                    deadline, column, row, columns, rows,
                )
                raise CompositeTimeout(
                    f"Composite exceeded {deadline}s after "
                    f"{column * rows + row} of {columns * rows} tiles"
                )
            y = row * size
            tally = analyze_pixels(source, Region.square(x, y, size), stride)
            yield Tile(
                nw=(x, y),
                se=(x + size, y + size),
                color=dominant_swatch(tally),
                column=column,
                row=row,
            )


def generate_composite(
    image: ImageInput,
    size: int,
    *,
    stride: int = 1,
    deadline: Optional[float] = None,
) -> Composite:
    """
    Build the full color composite of an image.

    Args:
        image: PixelSource, file path, or (H, W, 3) uint8 array
        size: Tile edge length in pixels (>= 1)
        stride: Sampling stride inside each tile (default 1, every pixel)
        deadline: Optional wall-clock budget in seconds

    Returns:
        Composite with width // size columns and height // size rows.
        A tile size larger than either dimension gives an empty composite.

    Example:
        >>> c = generate_composite("photo.png", 4)
        >>> [(t.nw, t.se, str(t.color)) for t in c]
        [((0, 0), (4, 4), 'rgb(255, 0, 0)'), ((0, 4), (4, 8), 'rgb(255, 0, 0)'), ...]
    """
    size = _validate_tile_size(size)
    stride = validate_stride(stride)
    source = load_image(image)
    tiles = tuple(iter_composite(source, size, stride=stride, deadline=deadline))
    columns, rows = _grid_dimensions(source.width, source.height, size)

    logger.info(
        "Composite of %dx%d image: %dx%d tiles of %dpx",
        source.width, source.height, columns, rows, size,
    )
    return Composite(
        tile_size=size,
        columns=columns,
        rows=rows,
        stride=stride,
        tiles=tiles,
    )


def render_composite(composite: Composite, scale: Optional[int] = None) -> Image.Image:
    """
    Paint a composite as a Pillow RGB image.

    Args:
        composite: The composite to paint
        scale: Pixels per tile edge. Defaults to the composite's tile size,
            which reproduces the covered area of the source image at full size.
            Use 1 for one pixel per tile.

    Raises:
        InvalidArgument: scale < 1, or the composite has no tiles
    """
    scale = composite.tile_size if scale is None else scale
    if scale < 1:
        raise InvalidArgument(f"Scale must be >= 1, got {scale}")
    if not composite.tiles:
        raise InvalidArgument("Cannot render an empty composite")

    grid = np.zeros((composite.rows, composite.columns, 3), dtype=np.uint8)
    for tile in composite.tiles:
        grid[tile.row, tile.column] = tile.color.as_tuple()

    if scale > 1:
        grid = np.repeat(np.repeat(grid, scale, axis=0), scale, axis=1)
    return Image.fromarray(grid)
