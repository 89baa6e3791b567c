from __future__ import annotations

from respect.core.errors import (
    DIFF_KIND_AMBIGUOUS_IDENTIFIER,
    DIFF_KIND_SEQUENCE_TOO_SHORT,
    DIFF_KIND_TYPE_MISMATCH,
    VALID_DIFF_KINDS,
)


def test_diff_kind_codes_are_stable() -> None:
    assert DIFF_KIND_TYPE_MISMATCH == "type_mismatch"
    assert DIFF_KIND_SEQUENCE_TOO_SHORT == "sequence_too_short"
    assert DIFF_KIND_AMBIGUOUS_IDENTIFIER in VALID_DIFF_KINDS
    assert len(VALID_DIFF_KINDS) == 10

