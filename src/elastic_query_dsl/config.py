"""
Builder policy shared by query instances.

``DSLConfig`` decides how strictly a builder treats its input. It is
passed to each query at construction time; queries built without one use
``DEFAULT_CONFIG``, which keeps the permissive behaviour of the
JavaScript library the wire format comes from.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

UNSET_FIELD_KEY = "undefined"
"""Key an unset field renders under when ``require_field`` is off."""


@dataclass(frozen=True)
class DSLConfig:
    """
    Immutable builder policy.

    Attributes:
        require_field: If ``True``, rendering a query with no field raises
            :class:`~elastic_query_dsl.exceptions.FieldNotSetError`.
            Otherwise the field renders as :data:`UNSET_FIELD_KEY`.
        strict_values: If ``True``, single and bulk value appends reject
            anything that is not a ``str``, ``int`` or ``float``.
    """

    require_field: bool = False
    strict_values: bool = False

    def with_changes(self, **changes: Any) -> DSLConfig:
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = DSLConfig()
