"""Core types shared by the matcher and its entry points.

- LogEntry is the immutable record appended once per clause evaluation
- ErrorPolicy decides what happens to a clause error no handler accepted
- ErrorHandler is the ``(error, subject) -> handled`` callback shape
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

# Labels used when a clause or default is declared without one.
CASE_LABEL = "case"
CASE_ASYNC_LABEL = "case_async"
DEFAULT_LABEL = "default"
DEFAULT_ASYNC_LABEL = "default_async"

# Receives the exception and the subject; returns True when it handled the error.
type ErrorHandler = Callable[[Exception, Any], bool]


class ErrorPolicy(enum.Enum):
    """What to do with a clause error that no handler accepted.

    SWALLOW keeps the chain running: the error is only visible in the log.
    RAISE re-raises the original exception after it has been logged.
    """

    SWALLOW = "swallow"
    RAISE = "raise"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One evaluation recorded by a FluentMatch.

    ``index`` equals the entry's position in the matcher log. An entry holds
    a result (``has_result``), an error, or neither (a side-effecting clause
    or default); never both. Default entries never carry an error.
    """

    index: int
    timestamp: datetime
    label: str
    value: Any
    result: Any = None
    has_result: bool = False
    error: Exception | None = None
    handled: bool = False
    is_default: bool = False

    def __post_init__(self) -> None:
        if self.error is not None and (self.has_result or self.is_default):
            msg = "a log entry cannot carry both an error and a result"
            raise ValueError(msg)

    @property
    def outcome(self) -> str:
        """``"error"``, ``"default"`` or ``"match"``."""
        if self.error is not None:
            return "error"
        if self.is_default:
            return "default"
        return "match"

    def __str__(self) -> str:
        if self.error is not None:
            detail = f"error={self.error!r}"
        elif self.has_result:
            detail = f"result={self.result!r}"
        else:
            detail = "no result"
        return f"#{self.index} {self.label} [{self.outcome}] value={self.value!r} {detail}"
