# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Pixel source: decoded images as an addressable, read-only grid.

Files are decoded with Pillow. Only JPEG and PNG are accepted; anything
else Pillow can open is rejected as UnsupportedFormat. In-memory arrays
of shape (H, W, 3) and dtype uint8 are accepted as-is.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, UnidentifiedImageError

from swatcher.errors import DecodeError, OutOfRange, UnsupportedFormat
from swatcher.schema import Region, RGBColor

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("JPEG", "PNG")
ARRAY_FORMAT = "ARRAY"

ImageInput = Union[str, Path, NDArray[np.uint8], "PixelSource"]


class PixelSource:
    """
    A decoded image behind a narrow read interface.

    The pixel array is stored row-major as (height, width, 3) and marked
    read-only, so every analysis over the same source sees the same data.

    Attributes:
        pixels: Read-only uint8 array of shape (height, width, 3)
        format: "JPEG", "PNG", or "ARRAY" for in-memory input
    """

    __slots__ = ("pixels", "format")

    def __init__(self, pixels: NDArray[np.uint8], format: str = ARRAY_FORMAT):
        if not isinstance(pixels, np.ndarray):
            raise DecodeError(f"Expected numpy array, got {type(pixels)}")
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise DecodeError(f"Expected (H, W, 3) array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise DecodeError(f"Expected uint8 array, got {pixels.dtype}")
        if pixels.shape[0] < 1 or pixels.shape[1] < 1:
            raise DecodeError(f"Image has no pixels: shape {pixels.shape}")

        pixels = np.array(pixels, dtype=np.uint8, copy=True)
        pixels.setflags(write=False)
        self.pixels = pixels
        self.format = format

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def bounds(self) -> Region:
        """The full image as a region."""
        return Region(x=0, y=0, width=self.width, height=self.height)

    def get_pixel(self, x: int, y: int) -> RGBColor:
        """Color of the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfRange(
                f"Pixel ({x}, {y}) is outside {self.width}x{self.height} image"
            )
        r, g, b = self.pixels[y, x]
        return RGBColor(int(r), int(g), int(b))

    def check_region(self, region: Region) -> None:
        """
        Raise OutOfRange unless region lies inside the image.

        Empty regions always pass; they hold no pixels to read.
        """
        if region.is_empty:
            return
        x2, y2 = region.se
        if region.x < 0 or region.y < 0 or x2 > self.width or y2 > self.height:
            raise OutOfRange(
                f"Region ({region.x}, {region.y})-({x2}, {y2}) is outside "
                f"{self.width}x{self.height} image"
            )

    def __repr__(self) -> str:
        return f"PixelSource({self.width}x{self.height}, format={self.format!r})"


def load_image(image: ImageInput) -> PixelSource:
    """
    Decode a file path or wrap an array as a PixelSource.

    Palette, grayscale and alpha images are converted to plain RGB; alpha
    is dropped, not composited.

    Raises:
        DecodeError: missing file, undecodable or corrupt data, bad array
        UnsupportedFormat: decodable image that is not JPEG or PNG
    """
    if isinstance(image, PixelSource):
        return image

    if isinstance(image, np.ndarray):
        return PixelSource(image)

    if not isinstance(image, (str, Path)):
        raise DecodeError(f"Expected file path or numpy array, got {type(image)}")

    path = Path(image)
    try:
        with Image.open(path) as img:
            fmt = img.format
            if fmt not in SUPPORTED_FORMATS:
                raise UnsupportedFormat(
                    f"{path}: format {fmt} is not supported "
                    f"(expected one of {', '.join(SUPPORTED_FORMATS)})"
                )
            if img.mode != "RGB":
                img = img.convert("RGB")
            pixels = np.array(img, dtype=np.uint8)
    except FileNotFoundError as e:
        raise DecodeError(f"Image not found: {path}") from e
    except UnidentifiedImageError as e:
        raise DecodeError(f"Cannot identify image file: {path}") from e
    except OSError as e:
        raise DecodeError(f"Cannot decode {path}: {e}") from e

    logger.debug("Loaded %s (%s, %dx%d)", path, fmt, pixels.shape[1], pixels.shape[0])
    return PixelSource(pixels, format=fmt)
