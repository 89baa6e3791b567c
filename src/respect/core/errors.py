from __future__ import annotations

from typing import Literal

DiffKind = Literal[
    "type_mismatch",
    "nil_value",
    "missing_value",
    "missing_key",
    "sequence_too_short",
    "sequence_too_long",
    "element_not_found",
    "ambiguous_identifier",
    "value_mismatch",
    "custom_equality",
]

DIFF_KIND_TYPE_MISMATCH = "type_mismatch"
DIFF_KIND_NIL_VALUE = "nil_value"
DIFF_KIND_MISSING_VALUE = "missing_value"
DIFF_KIND_MISSING_KEY = "missing_key"
DIFF_KIND_SEQUENCE_TOO_SHORT = "sequence_too_short"
DIFF_KIND_SEQUENCE_TOO_LONG = "sequence_too_long"
DIFF_KIND_ELEMENT_NOT_FOUND = "element_not_found"
DIFF_KIND_AMBIGUOUS_IDENTIFIER = "ambiguous_identifier"
DIFF_KIND_VALUE_MISMATCH = "value_mismatch"
DIFF_KIND_CUSTOM_EQUALITY = "custom_equality"

VALID_DIFF_KINDS = {
    DIFF_KIND_TYPE_MISMATCH,
    DIFF_KIND_NIL_VALUE,
    DIFF_KIND_MISSING_VALUE,
    DIFF_KIND_MISSING_KEY,
    DIFF_KIND_SEQUENCE_TOO_SHORT,
    DIFF_KIND_SEQUENCE_TOO_LONG,
    DIFF_KIND_ELEMENT_NOT_FOUND,
    DIFF_KIND_AMBIGUOUS_IDENTIFIER,
    DIFF_KIND_VALUE_MISMATCH,
    DIFF_KIND_CUSTOM_EQUALITY,
}


__all__ = [
    "DIFF_KIND_AMBIGUOUS_IDENTIFIER",
    "DIFF_KIND_CUSTOM_EQUALITY",
    "DIFF_KIND_ELEMENT_NOT_FOUND",
    "DIFF_KIND_MISSING_KEY",
    "DIFF_KIND_MISSING_VALUE",
    "DIFF_KIND_NIL_VALUE",
    "DIFF_KIND_SEQUENCE_TOO_LONG",
    "DIFF_KIND_SEQUENCE_TOO_SHORT",
    "DIFF_KIND_TYPE_MISMATCH",
    "DIFF_KIND_VALUE_MISMATCH",
    "VALID_DIFF_KINDS",
    "DiffKind",
]
