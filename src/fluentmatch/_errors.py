"""Error types raised by fluentmatch.

Clause failures never surface as these types: they are caught at the clause
boundary and routed through the error-handler chain. These errors come from
the convenience entry points and from predicate construction.
"""

from __future__ import annotations

from typing import Any


class FluentMatchError(Exception):
    """Base class for errors raised by fluentmatch itself."""


class UnmatchedValueError(FluentMatchError, LookupError):
    """No clause matched in a single-expression match.

    Raised by match_value, match_where and match_type. The decision is taken
    from the matcher's ``matched`` flag, so a clause that returns None is a
    match, not a miss.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"no match found for value {value!r}")


class PatternError(FluentMatchError, ValueError):
    """A regex pattern was rejected by RE2."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f'invalid regex pattern "{pattern}": {reason}')
