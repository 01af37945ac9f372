# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Context block serializer.

Formats a SwatchTally or Composite as a structured block (XML, JSON, or
Markdown) for embedding in reports, templates or other documents.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Union

from swatcher.schema import SCHEMA_VERSION, Composite, SwatchTally

Result = Union[SwatchTally, Composite]


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    result: Result,
    *,
    format: BlockFormat = BlockFormat.XML,
    tag_name: str = "",
) -> str:
    """Serialize a tally or composite as a block.

    Args:
        result: SwatchTally or Composite to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        tag_name: Wrapper tag; defaults to "swatches" for tallies and
            "composite" for composites.

    Returns:
        Formatted block string.

    Example (XML, tally)::

        <swatches version="1.0" stride="1" total="16">
          <region x="0" y="0" width="4" height="4"/>
          <swatch color="rgb(255, 0, 0)" hex="#FF0000" count="15"/>
          <swatch color="rgb(0, 0, 255)" hex="#0000FF" count="1"/>
        </swatches>

    Example (XML, composite)::

        <composite version="1.0" tile_size="4" columns="2" rows="2" stride="1">
          <tile column="0" row="0" nw="0,0" se="4,4" color="rgb(255, 0, 0)"/>
          ...
        </composite>
    """
    if not isinstance(result, (SwatchTally, Composite)):
        raise TypeError(f"Expected SwatchTally or Composite, got {type(result)}")

    if not tag_name:
        tag_name = "swatches" if isinstance(result, SwatchTally) else "composite"

    if format == BlockFormat.XML:
        if isinstance(result, SwatchTally):
            return _tally_to_xml(result, tag_name)
        return _composite_to_xml(result, tag_name)
    elif format == BlockFormat.JSON:
        return json.dumps({tag_name: result.to_dict()}, indent=2)
    else:
        return _to_markdown(result, tag_name)


def _tally_to_xml(tally: SwatchTally, tag_name: str) -> str:
    """Generate XML block for a tally."""
    r = tally.region
    lines = [
        f'<{tag_name} version="{SCHEMA_VERSION}" stride="{tally.stride}" total="{tally.total}">',
        f'  <region x="{r.x}" y="{r.y}" width="{r.width}" height="{r.height}"/>',
    ]
    for entry in tally:
        c = entry.color
        lines.append(f'  <swatch color="{c.css}" hex="{c.hex}" count="{entry.count}"/>')
    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _composite_to_xml(composite: Composite, tag_name: str) -> str:
    """Generate XML block for a composite."""
    lines = [
        f'<{tag_name} version="{composite.version}" tile_size="{composite.tile_size}" '
        f'columns="{composite.columns}" rows="{composite.rows}" stride="{composite.stride}">'
    ]
    for tile in composite:
        lines.append(
            f'  <tile column="{tile.column}" row="{tile.row}" '
            f'nw="{tile.nw[0]},{tile.nw[1]}" se="{tile.se[0]},{tile.se[1]}" '
            f'color="{tile.color.css}"/>'
        )
    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _to_markdown(result: Result, tag_name: str) -> str:
    """Generate markdown block with code fence."""
    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(result.to_dict(), indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)
