# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Schema definitions for swatch results.

All types in this module are immutable (frozen dataclasses).
Once a tally or composite is produced, it cannot be altered.
"""

from swatcher.schema.swatch import (
    SCHEMA_VERSION,
    Accuracy,
    Composite,
    Region,
    RGBColor,
    SwatchCount,
    SwatchTally,
    Tile,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Core types
    "RGBColor",
    "Accuracy",
    "Region",
    # Tally types
    "SwatchCount",
    "SwatchTally",
    # Composite types
    "Tile",
    "Composite",
]
