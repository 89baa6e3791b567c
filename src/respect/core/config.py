from __future__ import annotations

from dataclasses import dataclass, replace

from respect.core.constants import FLOAT_PRECISION, MAX_DIFF
from respect.core.options import Options, combine_options


@dataclass(slots=True, frozen=True)
class RespectConfig:
    max_diff: int = MAX_DIFF
    float_precision: int = FLOAT_PRECISION
    options: Options = Options.NONE

    def __post_init__(self) -> None:
        if self.max_diff < 1:
            raise ValueError("max_diff must be >= 1")
        if self.float_precision < 0:
            raise ValueError("float_precision must be >= 0")

    def with_options(self, *options: Options | int) -> RespectConfig:
        return replace(self, options=combine_options(self.options, *options))


__all__ = ["RespectConfig"]
