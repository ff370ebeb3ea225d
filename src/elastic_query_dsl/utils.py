"""
Shared argument checks for query builders.

These are pure-Python helpers with no infrastructure dependencies.
"""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidArgumentTypeError

# Python types accepted for each expected shape.
_SHAPES: dict[type, tuple[type, ...]] = {
    list: (list, tuple),
    dict: (dict,),
}

_SHAPE_NAMES: dict[type, str] = {
    list: "list",
    dict: "dict",
}


def check_type(value: Any, expected: type) -> None:
    """
    Assert that *value* has the *expected* shape.

    ``list`` accepts any array-like (``list`` or ``tuple``); ``dict``
    accepts a plain mapping. Strings are never array-like.

    Raises:
        InvalidArgumentTypeError: *value* does not match.
        ValueError: *expected* is not a supported shape.
    """
    if expected not in _SHAPES:
        raise ValueError(f"Unsupported shape for check_type: {expected!r}")
    if not isinstance(value, _SHAPES[expected]):
        raise InvalidArgumentTypeError(_SHAPE_NAMES[expected], value)


def check_scalar(value: Any) -> None:
    """Assert that *value* is a term literal: ``str``, ``int`` or ``float``."""
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        raise InvalidArgumentTypeError("str | int | float", value)
