# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""Top swatch selection from a ranked tally."""

from __future__ import annotations

import numpy as np

from swatcher.errors import InvalidArgument, OutOfRange
from swatcher.schema import RGBColor, SwatchTally


def top_swatches(tally: SwatchTally, n: int) -> tuple[RGBColor, ...]:
    """
    Return the n most frequent colors, most frequent first.

    Always returns a tuple, including for n == 1; use dominant_swatch
    for the single top color.

    Raises:
        InvalidArgument: n < 1
        OutOfRange: the tally holds fewer than n distinct colors
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise InvalidArgument(f"Swatch count must be a positive integer, got {n!r}")
    if n > len(tally):
        raise OutOfRange(
            f"Requested {n} swatches but only {len(tally)} distinct colors were sampled"
        )
    return tally.colors[:n]


def dominant_swatch(tally: SwatchTally) -> RGBColor:
    """
    The single most frequent color.

    On a tie, the color seen first in the scan wins.

    Raises:
        OutOfRange: the tally is empty
    """
    if not tally.entries:
        raise OutOfRange("Cannot pick a dominant swatch from an empty tally")
    return tally.entries[0].color
