from __future__ import annotations

from enum import IntFlag


class Options(IntFlag):
    """Policy flags for a comparison. ``Options.NONE`` selects every default."""

    NONE = 0
    # Compare list items positionally instead of correlating them.
    ORDER_MATTERS = 1
    # Flag an actual list that is longer than the expected one.
    LENGTH_MATTERS = 2
    # Zero values in the pattern are asserted instead of ignored.
    ZERO_VALUE_MATTERS = 4


ORDER_MATTERS = Options.ORDER_MATTERS
LENGTH_MATTERS = Options.LENGTH_MATTERS
ZERO_VALUE_MATTERS = Options.ZERO_VALUE_MATTERS


def combine_options(*options: Options | int) -> Options:
    combined = Options.NONE
    for option in options:
        combined |= Options(option)
    return combined


def option_from_name(name: str) -> Options:
    normalized = name.strip().upper().replace("-", "_")
    if not normalized or normalized not in Options.__members__:
        known = ", ".join(member.lower() for member in Options.__members__ if member != "NONE")
        raise ValueError(f"Unknown option {name!r}; expected one of: {known}")
    return Options[normalized]


def options_from_names(names: list[str]) -> Options:
    return combine_options(*(option_from_name(name) for name in names))


def option_names(options: Options) -> list[str]:
    return [member.name.lower() for member in Options if member and member in options]


__all__ = [
    "LENGTH_MATTERS",
    "ORDER_MATTERS",
    "ZERO_VALUE_MATTERS",
    "Options",
    "combine_options",
    "option_from_name",
    "option_names",
    "options_from_names",
]
