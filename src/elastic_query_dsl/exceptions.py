"""
Query DSL exception hierarchy.

All exceptions inherit from ``QueryDSLError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class QueryDSLError(Exception):
    """Base exception for all query DSL errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidArgumentTypeError(QueryDSLError, TypeError):
    """
    A builder method received an argument of the wrong shape.

    Subclasses ``TypeError`` so callers can catch it the way they would
    catch any other type mismatch.
    """

    def __init__(self, expected: str, actual: Any) -> None:
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(f"Invalid Type: expected {expected}, got {self.actual}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT_TYPE",
            "expected": self.expected,
            "actual": self.actual,
        }


class InvalidOptionError(QueryDSLError, ValueError):
    """
    Unknown option key supplied to a builder.

    Provides fuzzy-matched suggestions for likely intended keys.
    """

    def __init__(self, option: str, valid_options: list[str]) -> None:
        self.option = option
        self.valid_options = valid_options
        self.suggestions = get_close_matches(option, valid_options, n=3, cutoff=0.6)

        message = f"Unknown option: '{option}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid options: {', '.join(sorted(valid_options))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_OPTION",
            "option": self.option,
            "suggestions": self.suggestions,
            "valid_options": sorted(self.valid_options),
        }


class FieldNotSetError(QueryDSLError):
    """A query was rendered before its target field was set."""

    def __init__(self, query_type: str) -> None:
        self.query_type = query_type
        super().__init__(
            f"'{query_type}' query has no field set; call field() before to_dict()"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_SET",
            "query_type": self.query_type,
        }


class QueryParseError(QueryDSLError, ValueError):
    """A DSL dict could not be turned back into a query builder."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "QUERY_PARSE_ERROR",
            "message": self.message,
            "path": self.path,
        }


class ReservedFieldError(QueryDSLError, ValueError):
    """A query field is named like one of the shared query options."""

    def __init__(self, query_type: str, field: str) -> None:
        self.query_type = query_type
        self.field = field
        super().__init__(
            f"'{query_type}' query field '{field}' clashes with the shared "
            f"option of the same name"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RESERVED_FIELD",
            "query_type": self.query_type,
            "field": self.field,
        }
