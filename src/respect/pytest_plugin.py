from __future__ import annotations

from typing import Any

from respect.testing import Respects


def pytest_assertrepr_compare(op: str, left: Any, right: Any) -> list[str] | None:
    if op != "==":
        return None
    if isinstance(right, Respects):
        matcher, actual = right, left
    elif isinstance(left, Respects):
        matcher, actual = left, right
    else:
        return None

    if not matcher.diffs:
        matcher.match(actual)
    lines = [f"{actual!r} does not respect {matcher.expected!r}", "Diff:"]
    lines.extend(f"  {diff}" for diff in matcher.diffs)
    return lines
