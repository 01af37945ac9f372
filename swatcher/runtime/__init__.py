# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Output runtime for Swatcher.

Formats tallies and composites for display or embedding:

1. Text -- Aligned plain text for terminals
2. Context Block -- XML, JSON or Markdown block

The output layer never modifies result content.
"""

from swatcher.runtime.serializers import (
    BlockFormat,
    to_context_block,
    to_text,
)

__all__ = [
    "to_context_block",
    "to_text",
    "BlockFormat",
]
