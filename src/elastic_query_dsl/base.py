from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, TypeVar

from .config import DEFAULT_CONFIG, DSLConfig
from .exceptions import InvalidArgumentTypeError
from .options import QueryOption

Q = TypeVar("Q", bound="Query")


class Query(ABC):
    """
    Base class for query clauses.

    Holds the clause type tag and the options shared by every clause kind
    (``boost``, ``_name``). Subclasses render their own body in
    :meth:`to_dict` and merge the shared options into it.
    """

    def __init__(self, query_type: str, *, config: DSLConfig | None = None) -> None:
        self._query_type = query_type
        self._query_opts: dict[str, Any] = {}
        self._config = config if config is not None else DEFAULT_CONFIG

    @property
    def query_type(self) -> str:
        return self._query_type

    @property
    def config(self) -> DSLConfig:
        return self._config

    # -- shared options ------------------------------------------------------

    def boost(self: Q, factor: float) -> Q:
        """Set the relevance boost of this clause."""
        if isinstance(factor, bool) or not isinstance(factor, int | float):
            raise InvalidArgumentTypeError("int | float", factor)
        self._query_opts[QueryOption.BOOST.value] = factor
        return self

    def name(self: Q, name: str) -> Q:
        """Name the clause so matches report it in ``matched_queries``."""
        self._query_opts[QueryOption.NAME.value] = name
        return self

    # -- serialisation -------------------------------------------------------

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the query DSL representation of this clause."""
        raise NotImplementedError()

    def render(self) -> dict[str, Any]:
        return self.to_dict()

    def to_json(self, **kwargs: Any) -> str:
        """Serialise :meth:`to_dict` to a JSON string."""
        return json.dumps(self.to_dict(), **kwargs)
