"""Runtime shape inspection for arbitrary Python values.

Every value handed to the comparator is classified into one of a closed set of
kinds. Composite kinds expose their members through ``visible_fields`` /
``field_value`` (records), indexing (sequences and arrays) and key lookup
(maps). Weak references are the only indirection Python has, so they play the
part of pointers.
"""
from __future__ import annotations

import dataclasses
import inspect
import types
import typing
import weakref
from collections.abc import Callable, Mapping, MutableSequence, Sequence
from enum import Enum
from typing import Any, Literal

Kind = Literal[
    "nil",
    "bool",
    "int",
    "float",
    "text",
    "sequence",
    "array",
    "map",
    "record",
    "pointer",
    "opaque",
]

SCALAR_KINDS = {"bool", "int", "float", "text", "opaque"}

EQUALITY_METHOD = "equal"

_BYTES_TYPES = (bytes, bytearray, memoryview)
_NEVER_RECORDS = (
    type,
    BaseException,
    Enum,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


# Marks a record field or array index that does not exist on the actual side.
MISSING: Any = _Missing()


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if _is_public(slot) and slot not in names:
                names.append(slot)
    return names


def _is_record(value: Any) -> bool:
    if isinstance(value, type):
        return False
    if dataclasses.is_dataclass(value) or isinstance(value, types.SimpleNamespace):
        return True
    if isinstance(value, _NEVER_RECORDS):
        return False
    # Types with their own __eq__ (UUID, Path, ...) keep their domain equality.
    if type(value).__eq__ is not object.__eq__:
        return False
    return hasattr(value, "__dict__") or bool(_slot_names(type(value)))


def kind_of(value: Any) -> Kind:
    if value is None or value is MISSING:
        return "nil"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "text"
    if isinstance(value, weakref.ref):
        return "pointer"
    if isinstance(value, _BYTES_TYPES):
        return "opaque"
    if isinstance(value, Mapping):
        return "map"
    if _is_namedtuple(value):
        return "record"
    if isinstance(value, MutableSequence):
        return "sequence"
    if isinstance(value, Sequence):
        return "array"
    if _is_record(value):
        return "record"
    return "opaque"


def deref(value: Any) -> Any:
    if isinstance(value, weakref.ref):
        return value()
    return value


def visible_fields(value: Any) -> list[str]:
    """Public field names of a record, in declaration order."""
    if dataclasses.is_dataclass(value):
        return [item.name for item in dataclasses.fields(value) if _is_public(item.name)]
    if _is_namedtuple(value):
        return [name for name in type(value)._fields if _is_public(name)]
    names = _slot_names(type(value))
    if hasattr(value, "__dict__"):
        for name in vars(value):
            if _is_public(name) and name not in names:
                names.append(name)
    return names


def field_value(value: Any, name: str) -> Any:
    return getattr(value, name, MISSING)


def is_zero(value: Any) -> bool:
    """Whether ``value`` is the zero/default value of its type."""
    kind = kind_of(value)
    if kind == "nil":
        return True
    if kind in {"bool", "int", "float", "text"}:
        return not value
    if kind in {"map", "sequence"}:
        return len(value) == 0
    if kind == "array":
        return all(is_zero(item) for item in value)
    if kind == "record":
        return all(is_zero(field_value(value, name)) for name in visible_fields(value))
    if kind == "pointer":
        return False
    return not value


def type_name(cls: type, *, qualified: bool = False) -> str:
    if qualified:
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__qualname__


def type_names(actual_type: type, expected_type: type) -> tuple[str, str]:
    # mod_a.Error and mod_b.Error only become distinguishable with their module.
    qualified = actual_type.__qualname__ == expected_type.__qualname__
    return (
        type_name(actual_type, qualified=qualified),
        type_name(expected_type, qualified=qualified),
    )


def render(value: Any) -> str:
    if isinstance(value, type):
        return type_name(value)
    return str(value)


def float_text(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


def scalars_equal(actual: Any, expected: Any, precision: int) -> bool:
    if type(actual) is not type(expected):
        return False
    if isinstance(expected, float):
        return float_text(actual, precision) == float_text(expected, precision)
    return bool(actual == expected)


def _owner_of(cls: type, name: str) -> type | None:
    for klass in cls.__mro__:
        if name in vars(klass):
            return klass
    return None


def _annotation_matches(annotation: Any, cls: type) -> bool:
    self_type = getattr(typing, "Self", None)
    if self_type is not None and annotation is self_type:
        return True
    if isinstance(annotation, str):
        return annotation in {
            "Self",
            "typing.Self",
            "typing_extensions.Self",
            cls.__name__,
            cls.__qualname__,
            type_name(cls, qualified=True),
        }
    return annotation is cls


def equality_method(value: Any) -> Callable[[Any], bool] | None:
    """Return the record's own ``equal(other)`` method, if it declares one.

    The method must take exactly one argument besides ``self``, and that
    argument must be declared as the record's own type. A method inherited from
    a base class and annotated with the base type belongs to the base, so it is
    not used for the subclass; comparison falls back to field by field.
    """
    cls = type(value)
    func = inspect.getattr_static(cls, EQUALITY_METHOD, None)
    if not isinstance(func, types.FunctionType):
        return None

    params = list(inspect.signature(func).parameters.values())
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if len(params) != 2 or any(param.kind not in positional for param in params):
        return None

    other = params[1]
    if other.annotation is inspect.Parameter.empty:
        if _owner_of(cls, EQUALITY_METHOD) is not cls:
            return None
    else:
        try:
            hints = typing.get_type_hints(func)
        except (NameError, TypeError):
            hints = {}
        if not _annotation_matches(hints.get(other.name, other.annotation), cls):
            return None

    return typing.cast(Callable[[Any], bool], getattr(value, EQUALITY_METHOD))


__all__ = [
    "EQUALITY_METHOD",
    "MISSING",
    "SCALAR_KINDS",
    "Kind",
    "deref",
    "equality_method",
    "field_value",
    "float_text",
    "is_zero",
    "kind_of",
    "render",
    "scalars_equal",
    "type_name",
    "type_names",
    "visible_fields",
]
