# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Color key conversions.

An 8-bit sRGB triple has three forms in Swatcher:

- Tuple ``(r, g, b)``: what the pixel grid returns.
- Packed ``0xRRGGBB`` integer: the tally key used by the vectorized
  analyzer (one uint32 per pixel, so ``np.unique`` can count exact colors).
- Display string ``rgb(R, G, B)``, plus ``#RRGGBB`` hex.

All conversions are exact and lossless.
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray

from swatcher.errors import InvalidArgument


_CSS_RE = re.compile(r"^\s*rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)\s*$")
_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


# =============================================================================
# Scalar forms
# =============================================================================


def validate_channel(name: str, value: int) -> int:
    """Return value as int, or raise if it is not a 0-255 channel."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"Channel {name} must be an integer, got {value!r}")
    if not 0 <= value <= 255:
        raise InvalidArgument(f"Channel {name} must be 0-255, got {value}")
    return int(value)


def rgb_to_css(r: int, g: int, b: int) -> str:
    """
    Render a triple in CSS functional notation.

    Example:
        >>> rgb_to_css(255, 0, 128)
        'rgb(255, 0, 128)'
    """
    return f"rgb({r}, {g}, {b})"


def css_to_rgb(css: str) -> tuple[int, int, int]:
    """Parse ``rgb(R, G, B)`` back into a triple."""
    m = _CSS_RE.match(css)
    if not m:
        raise InvalidArgument(f"Not an rgb() color: {css!r}")
    r, g, b = (int(v) for v in m.groups())
    return (
        validate_channel("r", r),
        validate_channel("g", g),
        validate_channel("b", b),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Render a triple as ``#RRGGBB``."""
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Parse ``#RRGGBB`` (leading # optional)."""
    m = _HEX_RE.match(hex_str.strip())
    if not m:
        raise InvalidArgument(f"Not a #RRGGBB color: {hex_str!r}")
    value = int(m.group(1), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


# =============================================================================
# Packed keys (vectorized)
# =============================================================================


def pack_rgb(pixels: NDArray[np.uint8]) -> NDArray[np.uint32]:
    """
    Pack an (N, 3) uint8 array into N ``0xRRGGBB`` keys.

    Two pixels share a key iff all three channels are equal.
    """
    pixels = np.asarray(pixels, dtype=np.uint8).reshape(-1, 3)
    wide = pixels.astype(np.uint32)
    return (wide[:, 0] << 16) | (wide[:, 1] << 8) | wide[:, 2]


def unpack_rgb(packed: NDArray[np.uint32]) -> NDArray[np.uint8]:
    """Inverse of pack_rgb: N keys back to an (N, 3) uint8 array."""
    packed = np.asarray(packed, dtype=np.uint32).reshape(-1)
    return np.stack(
        [(packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF],
        axis=1,
    ).astype(np.uint8)
