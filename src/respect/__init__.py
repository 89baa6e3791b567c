"""Partial-match ("respect") comparison of nested Python values."""
from __future__ import annotations

from respect.core.comparator import respect, respect_diffs
from respect.core.config import RespectConfig
from respect.core.constants import FLOAT_PRECISION, MAX_DIFF
from respect.core.diff import Diff
from respect.core.options import (
    LENGTH_MATTERS,
    ORDER_MATTERS,
    ZERO_VALUE_MATTERS,
    Options,
)

__version__ = "0.1.0"

__all__ = [
    "FLOAT_PRECISION",
    "LENGTH_MATTERS",
    "MAX_DIFF",
    "ORDER_MATTERS",
    "ZERO_VALUE_MATTERS",
    "Diff",
    "Options",
    "RespectConfig",
    "__version__",
    "respect",
    "respect_diffs",
]
