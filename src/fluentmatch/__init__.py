"""fluentmatch — Fluent pattern matching with a diagnostic log.

All public types are exported from this module for flat imports:

    from fluentmatch import FluentMatch, switch, Contains, InRange
"""

import logging

__version__ = "0.1.0"

# Errors
from fluentmatch._errors import FluentMatchError, PatternError, UnmatchedValueError

# Matcher
from fluentmatch._matcher import FluentMatch

# Predicates
from fluentmatch._predicates import (
    AllOf,
    AnyOf,
    Contains,
    EndsWith,
    Equals,
    GreaterThan,
    InRange,
    IsFalse,
    IsTrue,
    LessThan,
    Not,
    OneOf,
    Predicate,
    Regex,
    StartsWith,
    all_of,
    any_of,
    not_,
)

# Entry points
from fluentmatch._switch import (
    match_none,
    match_type,
    match_value,
    match_where,
    switch,
    switch_async,
    switch_many,
)
from fluentmatch._types import ErrorHandler, ErrorPolicy, LogEntry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Matcher
    "FluentMatch",
    "LogEntry",
    "ErrorPolicy",
    "ErrorHandler",
    # Entry points
    "switch",
    "switch_async",
    "switch_many",
    "match_value",
    "match_where",
    "match_type",
    "match_none",
    # Predicates
    "Predicate",
    "InRange",
    "GreaterThan",
    "LessThan",
    "Equals",
    "OneOf",
    "IsTrue",
    "IsFalse",
    "Contains",
    "StartsWith",
    "EndsWith",
    "Regex",
    "AllOf",
    "AnyOf",
    "Not",
    "all_of",
    "any_of",
    "not_",
    # Errors
    "FluentMatchError",
    "UnmatchedValueError",
    "PatternError",
]
