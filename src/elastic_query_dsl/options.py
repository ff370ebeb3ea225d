"""Fixed option key sets for query builders."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidArgumentTypeError, InvalidOptionError

LookupValue = str | int | None


class QueryOption(str, Enum):
    """Options every query clause accepts next to its own body."""

    BOOST = "boost"
    NAME = "_name"


class TermsLookupOption(str, Enum):
    """Keys of a ``terms`` lookup: where to fetch the term values from."""

    INDEX = "index"
    TYPE = "type"
    ID = "id"
    PATH = "path"
    ROUTING = "routing"


LOOKUP_KEYS: list[str] = [m.value for m in TermsLookupOption]


class TermsLookup(BaseModel):
    """
    Validated terms lookup options.

    Unknown keys are rejected and values must already be a ``str`` or
    ``int`` (no coercion, bools rejected). Only keys that were explicitly
    given end up in :meth:`to_dict`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    index: LookupValue = None
    type: LookupValue = None
    id: LookupValue = None
    path: LookupValue = None
    routing: LookupValue = None

    @classmethod
    def parse(cls, opts: dict[str, Any]) -> TermsLookup:
        """
        Validate a plain lookup dict.

        Raises:
            InvalidOptionError: A key is not one of :data:`LOOKUP_KEYS`.
            InvalidArgumentTypeError: A value is not a ``str`` or ``int``.
        """
        normalized: dict[str, Any] = {}
        for key, val in opts.items():
            try:
                normalized[TermsLookupOption(key).value] = val
            except ValueError:
                raise InvalidOptionError(str(key), LOOKUP_KEYS) from None
        try:
            return cls.model_validate(normalized)
        except PydanticValidationError as exc:
            key = str(exc.errors()[0].get("loc", ("__root__",))[0])
            raise InvalidArgumentTypeError("str | int", normalized.get(key)) from exc

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
