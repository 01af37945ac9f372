# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Serializers for swatch results.

All serializers preserve the result exactly -- no rounding of counts,
no re-ranking.
"""

from swatcher.runtime.serializers.block import to_context_block, BlockFormat
from swatcher.runtime.serializers.text import to_text

__all__ = [
    "BlockFormat",
    "to_context_block",
    "to_text",
]
