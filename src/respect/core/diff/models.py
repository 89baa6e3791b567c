from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from respect.core.errors import DiffKind


@dataclass(slots=True, frozen=True)
class Diff:
    path: str
    message: str
    kind: DiffKind = "value_mismatch"

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
