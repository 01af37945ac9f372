# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Exception hierarchy for Swatcher.

Every failure raised by the library derives from SwatcherError. Argument and
range errors also derive from the matching builtin so callers that already
catch ValueError / IndexError keep working.
"""

from __future__ import annotations


class SwatcherError(Exception):
    """Base class for all Swatcher errors."""


class DecodeError(SwatcherError):
    """The input could not be decoded into a pixel grid."""


class UnsupportedFormat(SwatcherError):
    """The image decoded, but its format is not JPEG or PNG."""


class OutOfRange(SwatcherError, IndexError):
    """A region, tile or swatch count reaches outside what exists."""


class InvalidArgument(SwatcherError, ValueError):
    """A parameter is outside its legal domain."""


class CompositeTimeout(SwatcherError, TimeoutError):
    """A composite build ran past its deadline."""
