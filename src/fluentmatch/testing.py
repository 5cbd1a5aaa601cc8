"""Test utilities for fluentmatch.

Provides error handlers that remember what they were offered, for use in
tests and examples. These are NOT production handlers: they exist to make
the handler chain observable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fluentmatch._matcher import FluentMatch


@dataclass(slots=True)
class RecordingHandler:
    """An error handler that records every ``(error, value)`` it is offered.

    Returns ``handles`` for every call, so the same class covers both the
    accepting and the declining side of the chain.

    >>> from fluentmatch import FluentMatch
    >>> from fluentmatch.testing import RecordingHandler
    >>> h = RecordingHandler(handles=True)
    >>> _ = FluentMatch(0).case(lambda v: 1 / v > 0, lambda: "pos", on_error=h)
    >>> [type(e).__name__ for e, _ in h.calls]
    ['ZeroDivisionError']
    """

    handles: bool = False
    calls: list[tuple[Exception, Any]] = field(default_factory=list)

    def __call__(self, error: Exception, value: Any) -> bool:
        self.calls.append((error, value))
        return self.handles


def labels(matcher: FluentMatch[Any, Any]) -> list[str]:
    """Labels of every log entry, in order."""
    return [entry.label for entry in matcher.log]


def outcomes(matcher: FluentMatch[Any, Any]) -> list[str]:
    """Outcomes (``match``, ``error``, ``default``) of every log entry, in order."""
    return [entry.outcome for entry in matcher.log]
