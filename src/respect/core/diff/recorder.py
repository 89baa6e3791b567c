from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from respect.core.constants import MAX_DIFF, OP_NOT_EQUAL
from respect.core.diff.models import Diff
from respect.core.errors import DiffKind
from respect.core.values import render


@dataclass(slots=True)
class DiffRecorder:
    """Path stack plus the bounded list of diagnostics for one comparison.

    A single recorder is shared by every branch of a traversal, so the cap holds
    for the whole comparison rather than per branch. Once full, further
    diagnostics are dropped.
    """

    max_diff: int = MAX_DIFF
    diffs: list[Diff] = field(default_factory=list)
    path: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_diff < 1:
            raise ValueError("max_diff must be >= 1")

    @property
    def full(self) -> bool:
        return len(self.diffs) >= self.max_diff

    def push(self, segment: str) -> None:
        self.path.append(segment)

    def pop(self) -> None:
        if self.path:
            self.path.pop()

    @contextmanager
    def segment(self, name: str) -> Iterator[None]:
        self.push(name)
        try:
            yield
        finally:
            self.pop()

    def record(self, lhs: Any, rhs: Any, *, kind: DiffKind, op: str = OP_NOT_EQUAL) -> None:
        self.note(f"{render(lhs)} {op} {render(rhs)}", kind=kind)

    def note(self, message: str, *, kind: DiffKind) -> None:
        if self.full:
            return
        self.diffs.append(Diff(path=".".join(self.path), message=message, kind=kind))

    def lines(self) -> list[str]:
        return [str(diff) for diff in self.diffs]
