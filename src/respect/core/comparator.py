from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from respect.core.config import RespectConfig
from respect.core.constants import (
    DOES_NOT_HAVE_KEY,
    NIL_MAP,
    NIL_POINTER,
    NIL_SLICE,
    NO_VALUE,
    OP_GREATER,
    OP_LESS,
    SEGMENT_LEN,
    SEGMENT_TYPE,
)
from respect.core.diff.models import Diff
from respect.core.diff.recorder import DiffRecorder
from respect.core.errors import (
    DIFF_KIND_CUSTOM_EQUALITY,
    DIFF_KIND_MISSING_KEY,
    DIFF_KIND_MISSING_VALUE,
    DIFF_KIND_NIL_VALUE,
    DIFF_KIND_TYPE_MISMATCH,
    DIFF_KIND_VALUE_MISMATCH,
)
from respect.core.options import Options, combine_options
from respect.core.sequence import match_sequence
from respect.core.values import (
    MISSING,
    deref,
    equality_method,
    field_value,
    float_text,
    is_zero,
    kind_of,
    render,
    type_names,
    visible_fields,
)

logger = logging.getLogger(__name__)


class Comparator:
    """Depth-first walk of an expected pattern against an actual value.

    One instance serves one top-level comparison; all diagnostics go into its
    recorder.
    """

    def __init__(self, config: RespectConfig) -> None:
        self.config = config
        self.options = config.options
        self.recorder = DiffRecorder(max_diff=config.max_diff)

    def respect(self, actual: Any, expected: Any) -> None:
        # An unset pattern field asserts nothing.
        if expected is None or expected is MISSING:
            return

        if actual is None or actual is MISSING:
            self._record_absent(actual, expected)
            return

        if type(actual) is not type(expected):
            actual_name, expected_name = type_names(type(actual), type(expected))
            with self.recorder.segment(SEGMENT_TYPE):
                self.recorder.record(actual_name, expected_name, kind=DIFF_KIND_TYPE_MISMATCH)
            return

        if not self.options & Options.ZERO_VALUE_MATTERS and is_zero(expected):
            return

        kind = kind_of(expected)
        if kind == "record":
            self._respect_record(actual, expected)
        elif kind == "map":
            self._respect_map(actual, expected)
        elif kind == "array":
            self._respect_array(actual, expected)
        elif kind == "sequence":
            match_sequence(
                actual,
                expected,
                recorder=self.recorder,
                options=self.options,
                precision=self.config.float_precision,
                compare=self.respect,
            )
        elif kind == "pointer":
            self.respect(deref(actual), deref(expected))
        elif kind == "float":
            precision = self.config.float_precision
            if float_text(actual, precision) != float_text(expected, precision):
                self.recorder.record(actual, expected, kind=DIFF_KIND_VALUE_MISMATCH)
        elif actual != expected:
            self.recorder.record(actual, expected, kind=DIFF_KIND_VALUE_MISMATCH)

    def _record_absent(self, actual: Any, expected: Any) -> None:
        kind = kind_of(expected)
        if kind in {"map", "sequence"} and not expected:
            return
        if actual is MISSING:
            self.recorder.record(NO_VALUE, expected, kind=DIFF_KIND_MISSING_VALUE)
        elif kind == "map":
            self.recorder.record(NIL_MAP, expected, kind=DIFF_KIND_NIL_VALUE)
        elif kind == "sequence":
            self.recorder.record(NIL_SLICE, expected, kind=DIFF_KIND_NIL_VALUE)
        else:
            self.recorder.record(NIL_POINTER, type(expected), kind=DIFF_KIND_NIL_VALUE)

    def _respect_record(self, actual: Any, expected: Any) -> None:
        equal = equality_method(actual)
        if equal is not None:
            if not equal(expected):
                self.recorder.record(actual, expected, kind=DIFF_KIND_CUSTOM_EQUALITY)
            return

        for name in visible_fields(expected):
            with self.recorder.segment(name):
                self.respect(field_value(actual, name), field_value(expected, name))
            if self.recorder.full:
                break

    def _respect_map(self, actual: Mapping[Any, Any], expected: Mapping[Any, Any]) -> None:
        if actual is expected:
            return
        for key, value in expected.items():
            with self.recorder.segment(f"map[{key}]"):
                if key in actual:
                    self.respect(actual[key], value)
                else:
                    self.recorder.record(DOES_NOT_HAVE_KEY, value, kind=DIFF_KIND_MISSING_KEY)
            if self.recorder.full:
                break

    def _respect_array(self, actual: Sequence[Any], expected: Sequence[Any]) -> None:
        # Tuples of different lengths cannot line up item for item.
        if len(actual) != len(expected):
            op = OP_LESS if len(actual) < len(expected) else OP_GREATER
            with self.recorder.segment(SEGMENT_LEN):
                self.recorder.record(len(actual), len(expected), kind=DIFF_KIND_TYPE_MISMATCH, op=op)
            return
        for index, item in enumerate(expected):
            with self.recorder.segment(f"array[{index}]"):
                self.respect(actual[index], item)
            if self.recorder.full:
                break


def respect_diffs(
    actual: Any,
    expected: Any,
    *options: Options | int,
    config: RespectConfig | None = None,
) -> list[Diff]:
    config = (config or RespectConfig()).with_options(combine_options(*options))
    if expected is None:
        return []
    if actual is None:
        return [Diff(path="", message=f"{NIL_POINTER} != {render(expected)}", kind=DIFF_KIND_NIL_VALUE)]

    comparator = Comparator(config)
    comparator.respect(actual, expected)
    logger.debug(
        "respect compared %s against %s: %d diagnostic(s)",
        type(actual).__qualname__,
        type(expected).__qualname__,
        len(comparator.recorder.diffs),
    )
    return list(comparator.recorder.diffs)


def respect(
    actual: Any,
    expected: Any,
    *options: Options | int,
    config: RespectConfig | None = None,
) -> list[str]:
    """Return the ways ``actual`` fails to respect ``expected``; empty means it does.

    ``expected`` is a partial pattern: ``None`` and zero-valued fields assert
    nothing (unless ``ZERO_VALUE_MATTERS``), maps and lists need only be
    contained in ``actual``, and floats are compared after rounding to
    ``config.float_precision`` decimals. At most ``config.max_diff``
    diagnostics are returned, each formatted ``"path: lhs op rhs"``.
    """
    return [str(diff) for diff in respect_diffs(actual, expected, *options, config=config)]


__all__ = ["Comparator", "respect", "respect_diffs"]
