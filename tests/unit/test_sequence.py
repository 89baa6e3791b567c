from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from respect.core.diff import DiffRecorder
from respect.core.options import Options
from respect.core.sequence import match_sequence


@dataclass
class Item:
    sku: str = ""
    name: str = ""
    qty: int = 0


class _Spy:
    def __init__(self) -> None:
        self.pairs: list[tuple[Any, Any]] = []

    def __call__(self, actual: Any, expected: Any) -> None:
        self.pairs.append((actual, expected))


def _run(actual: list[Any], expected: list[Any], options: Options = Options.NONE, max_diff: int = 10):
    recorder = DiffRecorder(max_diff=max_diff)
    spy = _Spy()
    match_sequence(actual, expected, recorder=recorder, options=options, precision=10, compare=spy)
    return recorder, spy


def test_empty_expected_and_identical_lists() -> None:
    recorder, spy = _run([1, 2], [])
    assert recorder.diffs == []
    items = [1, 2]
    recorder, spy = _run(items, items)
    assert recorder.diffs == []
    assert spy.pairs == []


def test_too_short_stops_before_matching() -> None:
    recorder, spy = _run(["a"], ["a", "b"], Options.ORDER_MATTERS)
    assert recorder.lines() == ["<len>: 1 < 2"]
    assert spy.pairs == []


def test_positional_pairs_with_single_items() -> None:
    recorder, spy = _run([Item(qty=1)], [Item(qty=2)])
    assert recorder.diffs == []
    assert spy.pairs == [(Item(qty=1), Item(qty=2))]


def test_records_pair_on_every_text_field_of_the_first_item() -> None:
    actual = [Item("A1", "apple", 1), Item("B2", "banana", 2), Item("A1", "apricot", 3)]
    expected = [Item("A1", "apricot", 9), Item("B2", "banana", 2)]
    recorder, spy = _run(actual, expected)
    assert recorder.diffs == []
    assert spy.pairs == [(actual[2], expected[0]), (actual[1], expected[1])]


def test_records_not_found_use_joined_identifier() -> None:
    recorder, spy = _run([Item("A1", "apple"), Item("B2", "banana")], [Item("C3", "cherry")])
    assert recorder.lines() == ["[0].sku-name: <not found> != C3-cherry"]
    assert spy.pairs == []
    assert recorder.path == []


def test_records_identifier_missing_on_later_item() -> None:
    recorder, _ = _run([Item("A1", "apple"), Item("B2", "")], [Item("A1", "apple"), Item("B2")])
    assert recorder.lines() == []


def test_strings_are_consumed_once() -> None:
    recorder, _ = _run(["a", "b", "a"], ["a", "a"])
    assert recorder.diffs == []
    recorder, _ = _run(["a", "b", "c"], ["a", "a"])
    assert recorder.lines() == ["item: <not found> != a"]


def test_unordered_stops_at_cap_with_balanced_path() -> None:
    recorder, _ = _run(["x", "y", "z"], ["a", "b", "c"], max_diff=2)
    assert len(recorder.diffs) == 2
    assert recorder.path == []


def test_none_items_in_pattern_assert_nothing() -> None:
    recorder, _ = _run(["a", "b"], [None, "b"])
    assert recorder.diffs == []
    recorder, _ = _run(["a", "b"], [None, None])
    assert recorder.diffs == []


def test_mappings_pair_on_text_keys_of_the_first_item() -> None:
    actual = [{"sku": "A1", "qty": 1}, {"sku": "B2", "qty": 2}]
    expected = [{"sku": "B2", "qty": 5}]
    recorder, spy = _run(actual, expected)
    assert recorder.diffs == []
    assert spy.pairs == [(actual[1], expected[0])]

    recorder, spy = _run(actual, [{"sku": "C3"}])
    assert recorder.lines() == ["[0].sku: <not found> != C3"]
    assert spy.pairs == []


def test_mappings_without_text_values_are_ambiguous() -> None:
    recorder, spy = _run([{"qty": 1}, {"qty": 2}], [{"qty": 2}])
    assert recorder.lines() == ["<non valid field identifier was found>"]
    assert spy.pairs == []
