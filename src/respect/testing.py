"""Assertion helpers for test suites.

``assert_respects`` is the plain-function form. ``Respects`` wraps a pattern
so it can sit on the right of ``==`` inside a bare ``assert``; the pytest
plugin then explains failures with the diagnostic list.
"""
from __future__ import annotations

from typing import Any

from respect.core.comparator import respect_diffs
from respect.core.config import RespectConfig
from respect.core.diff import Diff
from respect.core.options import Options
from respect.report import render_text


class RespectMatcher:
    def __init__(self, expected: Any, *options: Options | int, config: RespectConfig | None = None) -> None:
        self.expected = expected
        self.options = options
        self.config = config
        self.diffs: list[Diff] = []

    def match(self, actual: Any) -> bool:
        self.diffs = respect_diffs(actual, self.expected, *self.options, config=self.config)
        return not self.diffs

    def failure_message(self, actual: Any) -> str:
        return render_text(self.diffs)

    def negated_failure_message(self, actual: Any) -> str:
        return render_text(self.diffs)


class Respects(RespectMatcher):
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        return self.match(other)

    def __ne__(self, other: object) -> bool:
        return not self.match(other)

    def __repr__(self) -> str:
        return f"Respects({self.expected!r})"


def assert_respects(
    actual: Any,
    expected: Any,
    *options: Options | int,
    config: RespectConfig | None = None,
) -> None:
    matcher = RespectMatcher(expected, *options, config=config)
    if not matcher.match(actual):
        raise AssertionError(matcher.failure_message(actual))


def assert_not_respects(
    actual: Any,
    expected: Any,
    *options: Options | int,
    config: RespectConfig | None = None,
) -> None:
    matcher = RespectMatcher(expected, *options, config=config)
    if matcher.match(actual):
        raise AssertionError(f"Expected {actual!r} not to respect {expected!r}")


__all__ = ["RespectMatcher", "Respects", "assert_not_respects", "assert_respects"]
