# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Plain-text serializer for terminal output.

Example (tally)::

    Swatches (stride 1, 16 samples)
    1. rgb(255, 0, 0)  #FF0000  15  (94%)
    2. rgb(0, 0, 255)  #0000FF   1  (6%)

Example (composite)::

    Composite 2x2 tiles of 4px
    (0, 0)-(4, 4)  rgb(255, 0, 0)
    (0, 4)-(4, 8)  rgb(255, 0, 0)
"""

from __future__ import annotations

from typing import Optional

from swatcher.schema import Composite, SwatchTally


def to_text(result, limit: Optional[int] = None) -> str:
    """Render a SwatchTally or Composite as aligned plain text.

    Args:
        result: SwatchTally or Composite.
        limit: For tallies, show at most this many rows.
    """
    if isinstance(result, SwatchTally):
        return _tally_to_text(result, limit)
    if isinstance(result, Composite):
        return _composite_to_text(result)
    raise TypeError(f"Expected SwatchTally or Composite, got {type(result)}")


def _tally_to_text(tally: SwatchTally, limit: Optional[int]) -> str:
    lines = [f"Swatches (stride {tally.stride}, {tally.total} samples)"]
    entries = tally.entries if limit is None else tally.entries[:limit]
    if not entries:
        lines.append("(no samples)")
        return "\n".join(lines)

    css_width = max(len(e.color.css) for e in entries)
    count_width = max(len(str(e.count)) for e in entries)
    total = tally.total
    for i, e in enumerate(entries, 1):
        pct = e.count / total * 100
        pct_str = f"{pct:.0f}%" if pct >= 1.0 else "<1%"
        lines.append(
            f"{i}. {e.color.css:<{css_width}}  {e.color.hex}  "
            f"{e.count:>{count_width}}  ({pct_str})"
        )
    return "\n".join(lines)


def _composite_to_text(composite: Composite) -> str:
    lines = [
        f"Composite {composite.columns}x{composite.rows} tiles of {composite.tile_size}px"
    ]
    if not composite.tiles:
        lines.append("(no tiles)")
        return "\n".join(lines)

    boxes = [f"({t.nw[0]}, {t.nw[1]})-({t.se[0]}, {t.se[1]})" for t in composite]
    box_width = max(len(b) for b in boxes)
    for box, tile in zip(boxes, composite):
        lines.append(f"{box:<{box_width}}  {tile.color.css}")
    return "\n".join(lines)
