from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from respect.core.constants import (
    NO_VALID_IDENTIFIER,
    NO_VALUE,
    NOT_FOUND,
    OP_GREATER,
    OP_LESS,
    SEGMENT_ITEM,
    SEGMENT_LEN,
)
from respect.core.diff.recorder import DiffRecorder
from respect.core.errors import (
    DIFF_KIND_AMBIGUOUS_IDENTIFIER,
    DIFF_KIND_ELEMENT_NOT_FOUND,
    DIFF_KIND_SEQUENCE_TOO_LONG,
    DIFF_KIND_SEQUENCE_TOO_SHORT,
)
from respect.core.options import Options
from respect.core.values import (
    SCALAR_KINDS,
    deref,
    field_value,
    kind_of,
    scalars_equal,
    visible_fields,
)

logger = logging.getLogger(__name__)

Compare = Callable[[Any, Any], None]
Identifier = tuple[str | None, ...]


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _member(item: Any, name: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return field_value(item, name)


def _identifier_fields(sample: Any) -> list[Any]:
    names = list(sample) if isinstance(sample, Mapping) else visible_fields(sample)
    return [name for name in names if _is_text(deref(_member(sample, name)))]


def _identifier(item: Any, names: list[Any]) -> Identifier:
    target = deref(item)
    parts: list[str | None] = []
    for name in names:
        value = None if target is None else deref(_member(target, name))
        parts.append(value if isinstance(value, str) else None)
    return tuple(parts)


def _render_identifier(identifier: Identifier) -> str:
    return "-".join(NO_VALUE if part is None else part for part in identifier)


def _match_positional(
    actual: Sequence[Any],
    expected: Sequence[Any],
    *,
    recorder: DiffRecorder,
    compare: Compare,
) -> None:
    for index, item in enumerate(expected):
        with recorder.segment(f"[{index}]"):
            compare(actual[index], item)
        if recorder.full:
            break


def _match_records(
    actual: Sequence[Any],
    expected: Sequence[Any],
    sample: Any,
    *,
    recorder: DiffRecorder,
    compare: Compare,
) -> None:
    names = _identifier_fields(sample)
    if not names:
        recorder.note(NO_VALID_IDENTIFIER, kind=DIFF_KIND_AMBIGUOUS_IDENTIFIER)
        return

    candidates = [_identifier(item, names) for item in actual]
    for index, item in enumerate(expected):
        if deref(item) is None:
            continue
        wanted = _identifier(item, names)
        with recorder.segment(f"[{index}]"):
            position = next((pos for pos, candidate in enumerate(candidates) if candidate == wanted), None)
            if position is None:
                with recorder.segment("-".join(str(name) for name in names)):
                    recorder.record(NOT_FOUND, _render_identifier(wanted), kind=DIFF_KIND_ELEMENT_NOT_FOUND)
            else:
                compare(actual[position], item)
        if recorder.full:
            break


def _match_scalars(
    actual: Sequence[Any],
    expected: Sequence[Any],
    *,
    recorder: DiffRecorder,
    precision: int,
) -> None:
    consumed: set[int] = set()
    for item in expected:
        target = deref(item)
        if target is None:
            continue
        position = next(
            (
                pos
                for pos, candidate in enumerate(actual)
                if pos not in consumed and scalars_equal(deref(candidate), target, precision)
            ),
            None,
        )
        if position is None:
            with recorder.segment(SEGMENT_ITEM):
                recorder.record(NOT_FOUND, target, kind=DIFF_KIND_ELEMENT_NOT_FOUND)
        else:
            consumed.add(position)
        if recorder.full:
            break


def _match_unordered(
    actual: Sequence[Any],
    expected: Sequence[Any],
    *,
    recorder: DiffRecorder,
    precision: int,
    compare: Compare,
) -> None:
    sample = next((deref(item) for item in expected if deref(item) is not None), None)
    if sample is None:
        return

    kind = kind_of(sample)
    if kind in {"record", "map"}:
        _match_records(actual, expected, sample, recorder=recorder, compare=compare)
    elif kind in SCALAR_KINDS:
        _match_scalars(actual, expected, recorder=recorder, precision=precision)
    else:
        logger.debug("No correlation key for unordered %s items; set ORDER_MATTERS to compare them", kind)
        recorder.note(NO_VALID_IDENTIFIER, kind=DIFF_KIND_AMBIGUOUS_IDENTIFIER)


def match_sequence(
    actual: Sequence[Any],
    expected: Sequence[Any],
    *,
    recorder: DiffRecorder,
    options: Options,
    precision: int,
    compare: Compare,
) -> None:
    """Check that ``actual`` contains every item asserted by ``expected``.

    A shorter actual always diverges and stops here. A longer one only
    diverges under ``LENGTH_MATTERS``, and matching still goes on afterwards.
    Items are paired by position under ``ORDER_MATTERS`` (or when both sides
    hold a single item); otherwise records and mappings are paired through the
    non-empty text fields of the first asserted item, and scalars by multiset
    containment.
    """
    expected_len = len(expected)
    if expected_len == 0 or actual is expected:
        return

    actual_len = len(actual)
    if actual_len < expected_len:
        with recorder.segment(SEGMENT_LEN):
            recorder.record(actual_len, expected_len, kind=DIFF_KIND_SEQUENCE_TOO_SHORT, op=OP_LESS)
        return
    if actual_len > expected_len and options & Options.LENGTH_MATTERS:
        with recorder.segment(SEGMENT_LEN):
            recorder.record(actual_len, expected_len, kind=DIFF_KIND_SEQUENCE_TOO_LONG, op=OP_GREATER)

    if options & Options.ORDER_MATTERS or (expected_len <= 1 and actual_len == 1):
        _match_positional(actual, expected, recorder=recorder, compare=compare)
        return
    _match_unordered(actual, expected, recorder=recorder, precision=precision, compare=compare)


__all__ = ["Compare", "match_sequence"]
