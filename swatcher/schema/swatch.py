# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Swatch schema: colors, regions, tallies and composites.

Design principles:
- Immutable: all types are frozen dataclasses
- Exact: two pixels are the same color iff their channels are equal
- Deterministic: tallies are ranked by count, ties in scan order
- Serializable: every result type round-trips through to_dict/from_dict

Scan order:
    The analyzer walks columns (x) in the outer loop and rows (y) in the
    inner loop. "First seen" always refers to this order, and composites
    list their tiles in the same column-major order:

        ┌────┬────┬────┐
        │ 0  │ 2  │ 4  │
        ├────┼────┼────┤
        │ 1  │ 3  │ 5  │
        └────┴────┴────┘
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from swatcher.errors import InvalidArgument


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True, order=True)
class RGBColor:
    """
    An exact 8-bit sRGB color; the canonical tally key.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate and normalize channels to plain ints."""
        from swatcher.measure.colorspace import validate_channel
        object.__setattr__(self, "r", validate_channel("r", self.r))
        object.__setattr__(self, "g", validate_channel("g", self.g))
        object.__setattr__(self, "b", validate_channel("b", self.b))

    @property
    def css(self) -> str:
        """Display form, e.g. ``rgb(255, 0, 128)``."""
        from swatcher.measure.colorspace import rgb_to_css
        return rgb_to_css(self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """Hex form, e.g. ``#FF0080``."""
        from swatcher.measure.colorspace import rgb_to_hex
        return rgb_to_hex(self.r, self.g, self.b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.css

    @classmethod
    def from_css(cls, css: str) -> RGBColor:
        """Parse the ``rgb(R, G, B)`` display form."""
        from swatcher.measure.colorspace import css_to_rgb
        return cls(*css_to_rgb(css))

    @classmethod
    def from_hex(cls, hex_str: str) -> RGBColor:
        """Parse ``#RRGGBB``."""
        from swatcher.measure.colorspace import hex_to_rgb
        return cls(*hex_to_rgb(hex_str))


# =============================================================================
# Sampling Accuracy
# =============================================================================


class Accuracy(Enum):
    """
    Sampling accuracy levels.

    Each level maps to a stride: the step, in pixels, taken along both
    axes while walking a region. Larger stride, fewer samples.
    """
    HIGH = "High"      # stride 1: every pixel
    MEDIUM = "Medium"  # stride 2: one pixel in four
    LOW = "Low"        # stride 4: one pixel in sixteen (default)

    @property
    def stride(self) -> int:
        return _ACCURACY_STRIDES[self]

    @classmethod
    def parse(cls, value: Union[Accuracy, str]) -> Accuracy:
        """
        Resolve an Accuracy from an enum member or a label.

        Labels are matched case-insensitively ("high", "High", "HIGH").

        Raises:
            InvalidArgument: for anything that is not a known level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        known = ", ".join(m.value for m in cls)
        raise InvalidArgument(f"Unknown accuracy {value!r}; expected one of: {known}")


_ACCURACY_STRIDES = {
    Accuracy.HIGH: 1,
    Accuracy.MEDIUM: 2,
    Accuracy.LOW: 4,
}


# =============================================================================
# Regions
# =============================================================================


@dataclass(frozen=True, slots=True)
class Region:
    """
    A rectangle of the pixel grid, anchored at its northwest corner.

    Width or height may be zero or negative; such a region holds no pixels.

    Attributes:
        x: Column of the northwest corner
        y: Row of the northwest corner
        width: Extent along x, in pixels
        height: Extent along y, in pixels
    """
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def square(cls, x: int, y: int, size: int) -> Region:
        """A size × size region with its northwest corner at (x, y)."""
        return cls(x=x, y=y, width=size, height=size)

    @property
    def nw(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def se(self) -> tuple[int, int]:
        """Exclusive southeast corner."""
        return (self.x + self.width, self.y + self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def sample_count(self, stride: int) -> int:
        """Number of pixels a walk at this stride visits."""
        if self.is_empty:
            return 0
        return -(-self.width // stride) * -(-self.height // stride)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Region:
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], width=data["width"], height=data["height"])


# =============================================================================
# Frequency Tally
# =============================================================================


@dataclass(frozen=True, slots=True)
class SwatchCount:
    """
    One row of a frequency tally.

    Attributes:
        color: The exact color observed
        count: Number of sampled pixels with that color
    """
    color: RGBColor
    count: int

    def __post_init__(self) -> None:
        """Validate count is positive."""
        if self.count < 1:
            raise ValueError(f"Count must be >= 1, got {self.count}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.color.css, "count": self.count}

    @classmethod
    def from_dict(cls, data: dict) -> SwatchCount:
        """Deserialize from dictionary."""
        return cls(color=RGBColor.from_css(data["color"]), count=data["count"])


@dataclass(frozen=True, slots=True)
class SwatchTally:
    """
    Ranked color frequencies from one analyzer pass.

    Entries are ordered by count descending. Equal counts keep the order
    in which the colors were first seen during the scan.

    Attributes:
        entries: Ranked (color, count) rows; no color appears twice
        region: The region that was walked
        stride: Step used along both axes
    """
    entries: tuple[SwatchCount, ...]
    region: Region
    stride: int

    def __post_init__(self) -> None:
        """Validate ranking and uniqueness."""
        counts = [e.count for e in self.entries]
        if any(a < b for a, b in zip(counts, counts[1:])):
            raise ValueError("Tally entries must be ordered by count descending")
        if len({e.color for e in self.entries}) != len(self.entries):
            raise ValueError("Tally entries must not repeat a color")

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SwatchCount]:
        return iter(self.entries)

    @property
    def total(self) -> int:
        """Number of pixels sampled."""
        return sum(e.count for e in self.entries)

    @property
    def colors(self) -> tuple[RGBColor, ...]:
        """Colors in rank order."""
        return tuple(e.color for e in self.entries)

    def count_of(self, color: RGBColor) -> int:
        """Occurrences of color in this tally (0 if never sampled)."""
        for e in self.entries:
            if e.color == color:
                return e.count
        return 0

    def as_dict(self) -> dict[str, int]:
        """Ordered ``rgb(...) -> count`` mapping."""
        return {e.color.css: e.count for e in self.entries}

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "version": SCHEMA_VERSION,
            "region": self.region.to_dict(),
            "stride": self.stride,
            "total": self.total,
            "swatches": [e.to_dict() for e in self.entries],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> SwatchTally:
        """Deserialize from dictionary."""
        return cls(
            entries=tuple(SwatchCount.from_dict(e) for e in data["swatches"]),
            region=Region.from_dict(data["region"]),
            stride=data["stride"],
        )


# =============================================================================
# Composite
# =============================================================================


@dataclass(frozen=True, slots=True)
class Tile:
    """
    One cell of a color composite.

    Attributes:
        nw: Northwest corner (x, y), inclusive
        se: Southeast corner (x, y), exclusive
        color: Dominant color of the tile
        column: Tile column index (0-based)
        row: Tile row index (0-based)
    """
    nw: tuple[int, int]
    se: tuple[int, int]
    color: RGBColor
    column: int = 0
    row: int = 0

    @property
    def size(self) -> int:
        return self.se[0] - self.nw[0]

    @property
    def region(self) -> Region:
        return Region(
            x=self.nw[0],
            y=self.nw[1],
            width=self.se[0] - self.nw[0],
            height=self.se[1] - self.nw[1],
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "nw": {"x": self.nw[0], "y": self.nw[1]},
            "se": {"x": self.se[0], "y": self.se[1]},
            "color": self.color.css,
            "column": self.column,
            "row": self.row,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Tile:
        """Deserialize from dictionary."""
        return cls(
            nw=(data["nw"]["x"], data["nw"]["y"]),
            se=(data["se"]["x"], data["se"]["y"]),
            color=RGBColor.from_css(data["color"]),
            column=data.get("column", 0),
            row=data.get("row", 0),
        )


@dataclass(frozen=True, slots=True)
class Composite:
    """
    A tile-grid simplification of an image.

    Each tile_size × tile_size square is replaced by its dominant color.
    Strips narrower than a tile along the right or bottom edge are not
    part of the composite.

    Attributes:
        tile_size: Tile edge length in pixels
        columns: Number of tile columns (width // tile_size)
        rows: Number of tile rows (height // tile_size)
        stride: Sampling stride used inside each tile
        tiles: Tiles in column-major order
    """
    tile_size: int
    columns: int
    rows: int
    stride: int = 1
    tiles: tuple[Tile, ...] = field(default_factory=tuple)
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate tile count matches the grid."""
        if len(self.tiles) != self.columns * self.rows:
            raise ValueError(
                f"Composite {self.columns}x{self.rows} requires "
                f"{self.columns * self.rows} tiles, got {len(self.tiles)}"
            )

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def get_tile(self, column: int, row: int) -> Tile:
        """Get the tile at a grid position."""
        if not (0 <= column < self.columns and 0 <= row < self.rows):
            raise KeyError(f"No tile at column {column}, row {row}")
        return self.tiles[column * self.rows + row]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "version": self.version,
            "tile_size": self.tile_size,
            "columns": self.columns,
            "rows": self.rows,
            "stride": self.stride,
            "tiles": [t.to_dict() for t in self.tiles],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Composite:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            tile_size=data["tile_size"],
            columns=data["columns"],
            rows=data["rows"],
            stride=data.get("stride", 1),
            tiles=tuple(Tile.from_dict(t) for t in data["tiles"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> Composite:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
