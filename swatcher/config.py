# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""
Session configuration.

Values come from keyword arguments, or from the process environment via
SwatcherConfig.from_env(). Environment variables:

    SWATCHER_ACCURACY            High | Medium | Low (default Low)
    SWATCHER_TILE_STRIDE         Positive int, stride inside composite tiles (default 1)
    SWATCHER_COMPOSITE_DEADLINE  Seconds allowed for one composite build (default: none)
    SWATCHER_LOG_LEVEL           Logging level name for the CLI (default WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from swatcher.errors import InvalidArgument
from swatcher.schema import Accuracy

ENV_PREFIX = "SWATCHER_"


@dataclass(frozen=True)
class SwatcherConfig:
    """Configuration for a Swatcher session."""

    # Stride used for whole-image analysis
    accuracy: Accuracy = Accuracy.LOW

    # Stride inside each composite tile, independent of accuracy
    # 1 = every pixel of the tile is counted
    tile_stride: int = 1

    # Wall-clock budget for one composite build, in seconds
    composite_deadline: Optional[float] = None

    # Only the CLI applies this; the library never configures logging
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        object.__setattr__(self, "accuracy", Accuracy.parse(self.accuracy))
        if self.tile_stride < 1:
            raise InvalidArgument(f"tile_stride must be >= 1, got {self.tile_stride}")
        if self.composite_deadline is not None and self.composite_deadline <= 0:
            raise InvalidArgument(
                f"composite_deadline must be positive, got {self.composite_deadline}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidArgument(f"Unknown log level {self.log_level!r}")

    @property
    def stride(self) -> int:
        return self.accuracy.stride

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> SwatcherConfig:
        """Build a config from SWATCHER_* variables; unset ones keep defaults."""
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        accuracy = env.get(f"{ENV_PREFIX}ACCURACY")
        if accuracy:
            kwargs["accuracy"] = Accuracy.parse(accuracy)

        tile_stride = env.get(f"{ENV_PREFIX}TILE_STRIDE")
        if tile_stride:
            kwargs["tile_stride"] = _parse_number(f"{ENV_PREFIX}TILE_STRIDE", tile_stride, int)

        deadline = env.get(f"{ENV_PREFIX}COMPOSITE_DEADLINE")
        if deadline:
            kwargs["composite_deadline"] = _parse_number(
                f"{ENV_PREFIX}COMPOSITE_DEADLINE", deadline, float
            )

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.strip().upper()

        return cls(**kwargs)


def _parse_number(name: str, raw: str, kind: type):
    try:
        return kind(raw.strip())
    except ValueError as e:
        raise InvalidArgument(f"{name} must be a {kind.__name__}, got {raw!r}") from e
