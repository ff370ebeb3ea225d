from .base import Query
from .config import DEFAULT_CONFIG, UNSET_FIELD_KEY, DSLConfig
from .exceptions import (
    FieldNotSetError,
    InvalidArgumentTypeError,
    InvalidOptionError,
    QueryDSLError,
    QueryParseError,
    ReservedFieldError,
)
from .options import QueryOption, TermsLookup, TermsLookupOption
from .terms import TermsQuery, terms_query
from .utils import check_scalar, check_type

__all__ = [
    # Core types
    "Query",
    "TermsQuery",
    "terms_query",
    # Options
    "QueryOption",
    "TermsLookup",
    "TermsLookupOption",
    # Configuration
    "DSLConfig",
    "DEFAULT_CONFIG",
    "UNSET_FIELD_KEY",
    # Exceptions
    "QueryDSLError",
    "InvalidArgumentTypeError",
    "InvalidOptionError",
    "FieldNotSetError",
    "QueryParseError",
    "ReservedFieldError",
    # Utilities
    "check_type",
    "check_scalar",
]
