# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Swatcher session: one decoded image, one accuracy level.

This is the primary entry point when several questions are asked of the
same image. The image is decoded once; every call reads the same grid.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Union

from swatcher.config import SwatcherConfig
from swatcher.errors import OutOfRange
from swatcher.schema import Accuracy, Composite, Region, RGBColor, SwatchTally, Tile
from swatcher.measure.source import ImageInput, load_image
from swatcher.measure.analyze import analyze_pixels, validate_stride
from swatcher.measure.select import dominant_swatch, top_swatches
from swatcher.measure.composite import generate_composite, iter_composite

logger = logging.getLogger(__name__)


class Swatcher:
    """
    Swatch extraction over a single image.

    Example:
        >>> s = Swatcher("photo.png", accuracy="High")
        >>> s.dominant()
        RGBColor(r=255, g=0, b=0)
        >>> [str(c) for c in s.top_swatches(2)]
        ['rgb(255, 0, 0)', 'rgb(0, 0, 255)']
        >>> s.generate_composite(4).tiles[0].se
        (4, 4)

    Args:
        image: Path to a JPEG/PNG file, an (H, W, 3) uint8 array, or a
            PixelSource
        accuracy: Sampling level for whole-image analysis, as an Accuracy
            or a label ("High", "Medium", "Low"). Default Low (stride 4).
        tile_stride: Stride inside each composite tile. Default 1, so tile
            colors do not depend on accuracy.
        composite_deadline: Optional seconds allowed per composite build
    """

    def __init__(
        self,
        image: ImageInput,
        accuracy: Union[Accuracy, str] = Accuracy.LOW,
        *,
        tile_stride: int = 1,
        composite_deadline: Optional[float] = None,
    ):
        self.accuracy = Accuracy.parse(accuracy)
        self.tile_stride = validate_stride(tile_stride)
        self.composite_deadline = composite_deadline
        self.source = load_image(image)
        logger.debug(
            "Session on %r at %s accuracy (stride %d)",
            self.source, self.accuracy.value, self.stride,
        )

    @classmethod
    def from_config(cls, image: ImageInput, config: SwatcherConfig) -> Swatcher:
        """Build a session from a SwatcherConfig."""
        return cls(
            image,
            config.accuracy,
            tile_stride=config.tile_stride,
            composite_deadline=config.composite_deadline,
        )

    @property
    def width(self) -> int:
        return self.source.width

    @property
    def height(self) -> int:
        return self.source.height

    @property
    def format(self) -> str:
        return self.source.format

    @property
    def stride(self) -> int:
        return self.accuracy.stride

    def analyze_pixels(
        self,
        nw: tuple[int, int] = (0, 0),
        size: Optional[int] = None,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> SwatchTally:
        """
        Tally the colors of a section, sampled at the session stride.

        With no size/width/height the section runs from nw to the image's
        far edges, so the default call covers the whole image. `size`
        gives a square section; `width`/`height` override either side.
        """
        x, y = nw
        if (size is None and (width is None or height is None)) and not (
            0 <= x < self.width and 0 <= y < self.height
        ):
            raise OutOfRange(
                f"Corner ({x}, {y}) is outside {self.width}x{self.height} image"
            )
        w = width if width is not None else (size if size is not None else self.width - x)
        h = height if height is not None else (size if size is not None else self.height - y)
        return analyze_pixels(self.source, Region(x=x, y=y, width=w, height=h), self.stride)

    def top_swatches(self, count: int) -> tuple[RGBColor, ...]:
        """
        The `count` most frequent colors of the whole image.

        Always a tuple, even for count == 1; see dominant().
        """
        return top_swatches(self.analyze_pixels(), count)

    def dominant(self) -> RGBColor:
        """The most frequent color of the whole image."""
        return dominant_swatch(self.analyze_pixels())

    def iter_composite(self, size: int) -> Iterator[Tile]:
        """Lazily yield composite tiles in column-major order."""
        return iter_composite(
            self.source, size, stride=self.tile_stride, deadline=self.composite_deadline
        )

    def generate_composite(self, size: int) -> Composite:
        """Dominant color of every size × size tile, column-major."""
        return generate_composite(
            self.source, size, stride=self.tile_stride, deadline=self.composite_deadline
        )

    def __repr__(self) -> str:
        return f"Swatcher({self.source!r}, accuracy={self.accuracy.value!r})"
