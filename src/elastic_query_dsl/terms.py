"""
Builder for the ``terms`` query.

Matches documents whose field contains any of the given exact terms (not
analysed). The terms are either listed inline or fetched from a field of
another document ("terms lookup").

Example::

    TermsQuery("color", ["red", "green"]).to_dict()
    # → {"terms": {"color": ["red", "green"]}}

    TermsQuery("color").index("catalog").path("colors").to_dict()
    # → {"terms": {"color": {"index": "catalog", "path": "colors"}}}

Once any lookup option is set the query stays in lookup mode, and values
appended before or after are ignored when rendering.
"""

from __future__ import annotations

import logging
from typing import Any

from .base import Query
from .config import UNSET_FIELD_KEY, DSLConfig
from .exceptions import FieldNotSetError, QueryParseError, ReservedFieldError
from .options import QueryOption, TermsLookup, TermsLookupOption
from .utils import check_scalar, check_type

logger = logging.getLogger("elastic_query_dsl.terms")

_SHARED_KEYS: frozenset[str] = frozenset(m.value for m in QueryOption)


class TermsQuery(Query):
    """Fluent builder for a single ``terms`` clause."""

    query_name = "terms"

    def __init__(
        self,
        field: str | None = None,
        values: Any = None,
        *,
        config: DSLConfig | None = None,
    ) -> None:
        super().__init__(self.query_name, config=config)
        self._field: str | None = None
        self._values: list[Any] = []
        self._is_terms_lookup = False
        self._terms_lookup_opts: dict[str, Any] = {}

        if field is not None:
            self._field = field
        if values is not None:
            if isinstance(values, list | tuple):
                self.values(values)
            else:
                self.value(values)

    # -- inspection ----------------------------------------------------------

    @property
    def current_field(self) -> str | None:
        return self._field

    @property
    def current_values(self) -> list[Any]:
        return list(self._values)

    @property
    def is_terms_lookup(self) -> bool:
        return self._is_terms_lookup

    @property
    def terms_lookup_options(self) -> dict[str, Any]:
        return dict(self._terms_lookup_opts)

    # -- field and values ----------------------------------------------------

    def field(self, field: str) -> TermsQuery:
        """Set the field to search on."""
        self._field = field
        return self

    def value(self, value: Any) -> TermsQuery:
        """Append a single term."""
        if self._config.strict_values:
            check_scalar(value)
        self._values.append(value)
        self._log_superseded()
        return self

    def values(self, values: list[Any] | tuple[Any, ...]) -> TermsQuery:
        """
        Append all of *values*, in order.

        Raises:
            InvalidArgumentTypeError: *values* is not a list or tuple, or
                (with ``strict_values``) an item is not a term literal.
        """
        check_type(values, list)
        if self._config.strict_values:
            for item in values:
                check_scalar(item)
        self._values.extend(values)
        self._log_superseded()
        return self

    # -- terms lookup --------------------------------------------------------

    def terms_lookup(self, lookup_opts: dict[str, Any] | TermsLookup) -> TermsQuery:
        """
        Merge several lookup options at once.

        Valid keys are ``index``, ``type``, ``id``, ``path`` and ``routing``.
        Keys already set are overwritten.

        Raises:
            InvalidArgumentTypeError: *lookup_opts* is not a dict.
            InvalidOptionError: *lookup_opts* has a key outside the set above.
            InvalidArgumentTypeError: A lookup value is not a ``str`` or ``int``.
        """
        if isinstance(lookup_opts, TermsLookup):
            parsed = lookup_opts
        else:
            check_type(lookup_opts, dict)
            parsed = TermsLookup.parse(lookup_opts)

        self._enable_terms_lookup()
        self._terms_lookup_opts.update(parsed.to_dict())
        return self

    def index(self, index: str | int) -> TermsQuery:
        """The index to fetch the term values from."""
        self._set_terms_lookup_opt(TermsLookupOption.INDEX, index)
        return self

    def type(self, doc_type: str | int) -> TermsQuery:
        """The mapping type to fetch the term values from."""
        self._set_terms_lookup_opt(TermsLookupOption.TYPE, doc_type)
        return self

    def id(self, doc_id: str | int) -> TermsQuery:
        """The id of the document to fetch the term values from."""
        self._set_terms_lookup_opt(TermsLookupOption.ID, doc_id)
        return self

    def path(self, path: str | int) -> TermsQuery:
        """The field of the lookup document holding the term values."""
        self._set_terms_lookup_opt(TermsLookupOption.PATH, path)
        return self

    def routing(self, routing: str | int) -> TermsQuery:
        """Custom routing value used when fetching the lookup document."""
        self._set_terms_lookup_opt(TermsLookupOption.ROUTING, routing)
        return self

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """
        Build the ``terms`` query DSL.

        Raises:
            FieldNotSetError: No field was set and the config requires one.
            ReservedFieldError: The field is named like a shared option
                (``boost``, ``_name``) and the config requires a field.

        A field named ``boost`` or ``_name`` shares its key with the option
        of the same name, so the field payload replaces the option in the
        output. Only ``require_field`` turns this into an error.
        """
        field = self._field
        if field is not None and field in _SHARED_KEYS:
            if self._config.require_field:
                raise ReservedFieldError(self.query_type, field)
        if field is None:
            if self._config.require_field:
                raise FieldNotSetError(self.query_type)
            logger.debug(
                "Rendering '%s' query without a field; using key %r",
                self.query_type,
                UNSET_FIELD_KEY,
            )
            field = UNSET_FIELD_KEY

        payload: Any
        if self._is_terms_lookup:
            payload = dict(self._terms_lookup_opts)
        else:
            payload = list(self._values)

        body = dict(self._query_opts)
        body[field] = payload
        return {self.query_type: body}

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        *,
        config: DSLConfig | None = None,
    ) -> TermsQuery:
        """
        Rebuild a ``TermsQuery`` from its DSL representation.

        Raises:
            QueryParseError: *data* is not a well-formed ``terms`` query.
            InvalidOptionError: The lookup payload has an unknown key.
        """
        if not isinstance(data, dict) or list(data) != [cls.query_name]:
            raise QueryParseError(
                f"Expected a dict with the single key '{cls.query_name}'",
                path="<root>",
            )
        body = data[cls.query_name]
        if not isinstance(body, dict):
            raise QueryParseError(
                "Query body must be a dict", path=f"<root>.{cls.query_name}"
            )

        field_keys = [k for k in body if k not in _SHARED_KEYS]
        if len(field_keys) != 1:
            raise QueryParseError(
                f"Expected exactly one field, got {len(field_keys)}: {field_keys}",
                path=f"<root>.{cls.query_name}",
            )
        field = field_keys[0]
        payload = body[field]

        query = cls(field, config=config)
        if QueryOption.BOOST.value in body:
            query.boost(body[QueryOption.BOOST.value])
        if QueryOption.NAME.value in body:
            query.name(body[QueryOption.NAME.value])

        if isinstance(payload, list):
            query.values(payload)
        elif isinstance(payload, dict):
            query.terms_lookup(payload)
        else:
            raise QueryParseError(
                "Field payload must be a list of terms or a lookup dict",
                path=f"<root>.{cls.query_name}.{field}",
            )
        return query

    def __repr__(self) -> str:
        payload = self._terms_lookup_opts if self._is_terms_lookup else self._values
        return f"{self.__class__.__name__}(field={self._field!r}, payload={payload!r})"

    # -- internals -----------------------------------------------------------

    def _set_terms_lookup_opt(self, key: TermsLookupOption, val: Any) -> None:
        parsed = TermsLookup.parse({key.value: val})
        self._enable_terms_lookup()
        self._terms_lookup_opts.update(parsed.to_dict())

    def _enable_terms_lookup(self) -> None:
        if not self._is_terms_lookup:
            logger.debug(
                "'%s' query on %r switched to lookup mode",
                self.query_type,
                self._field,
            )
        self._is_terms_lookup = True

    def _log_superseded(self) -> None:
        if self._is_terms_lookup:
            logger.debug(
                "Values appended to '%s' query on %r are ignored in lookup mode",
                self.query_type,
                self._field,
            )


def terms_query(field: str | None = None, values: Any = None) -> TermsQuery:
    """Shorthand for ``TermsQuery(field, values)``."""
    return TermsQuery(field, values)
