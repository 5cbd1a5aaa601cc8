"""Shortcut clauses built on the predicate library.

Each shortcut is a thin wrapper over ``case``: it builds a predicate from
fluentmatch._predicates, picks a descriptive label where one helps the log,
and returns the matcher for chaining.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Self

from fluentmatch._predicates import (
    Contains,
    EndsWith,
    Equals,
    GreaterThan,
    InRange,
    IsFalse,
    IsTrue,
    LessThan,
    OneOf,
    Regex,
    StartsWith,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from fluentmatch._types import ErrorHandler


class ClauseShortcuts:
    """Mixin adding shortcut clauses to FluentMatch."""

    __slots__ = ()

    if TYPE_CHECKING:
        value: Any

        def case(
            self,
            predicate: Callable[[Any], bool],
            then: Callable[[], Any] | None = None,
            *,
            do: Callable[[], object] | None = None,
            label: str | None = None,
            on_error: ErrorHandler | None = None,
        ) -> Self: ...

    # ── Numeric ──────────────────────────────────────────────────────────────

    def case_in_range(
        self,
        low: Any,
        high: Any,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Match when ``low <= value <= high`` (both ends inclusive)."""
        return self.case(InRange(low, high), then, do=do, label=label, on_error=on_error)

    def case_greater_than(
        self,
        bound: Any,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        return self.case(
            GreaterThan(bound), then, do=do, label=label or f">{bound}", on_error=on_error
        )

    def case_less_than(
        self,
        bound: Any,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        return self.case(
            LessThan(bound), then, do=do, label=label or f"<{bound}", on_error=on_error
        )

    def case_equals(
        self,
        expected: Any,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        return self.case(
            Equals(expected), then, do=do, label=label or f"=={expected}", on_error=on_error
        )

    # ── Membership / records / enums ─────────────────────────────────────────

    def case_one_of(
        self,
        values: Iterable[Any],
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        return self.case(OneOf(values), then, do=do, label=label, on_error=on_error)

    def case_record(
        self,
        record: Any,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Match by value equality against a record (dataclass, namedtuple, ...)."""
        return self.case(
            Equals(record), then, do=do, label=label or f"Record: {record!r}", on_error=on_error
        )

    def case_enum(
        self,
        predicate: Callable[[Any], bool],
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Match an Enum subject against ``predicate``.

        Non-Enum subjects never match, so the predicate only ever sees members.
        """
        return self.case(
            lambda v: isinstance(v, enum.Enum) and predicate(v),
            then,
            do=do,
            label=label,
            on_error=on_error,
        )

    def case_true(
        self,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        return self.case(IsTrue(), then, do=do, label=label or "True", on_error=on_error)

    def case_false(
        self,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        return self.case(IsFalse(), then, do=do, label=label or "False", on_error=on_error)

    # ── Strings ──────────────────────────────────────────────────────────────

    def case_contains(
        self,
        substring: str,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
        ignore_case: bool = False,
    ) -> Self:
        return self.case(
            Contains(substring, ignore_case), then, do=do, label=label, on_error=on_error
        )

    def case_starts_with(
        self,
        prefix: str,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
        ignore_case: bool = False,
    ) -> Self:
        return self.case(
            StartsWith(prefix, ignore_case), then, do=do, label=label, on_error=on_error
        )

    def case_ends_with(
        self,
        suffix: str,
        then: Callable[[], Any] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
        ignore_case: bool = False,
    ) -> Self:
        return self.case(
            EndsWith(suffix, ignore_case), then, do=do, label=label, on_error=on_error
        )

    def case_regex(
        self,
        pattern: str,
        then: Callable[[Any], Any] | None = None,
        *,
        do: Callable[[Any], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Match a string subject against an RE2 pattern (search semantics).

        The body receives the match object. An invalid pattern raises
        PatternError here, before any clause is evaluated.
        """
        regex = Regex(pattern)
        return self.case(
            regex,
            (lambda: then(regex.match(self.value))) if then is not None else None,
            do=(lambda: do(regex.match(self.value))) if do is not None else None,
            label=label or f"Regex: {pattern}",
            on_error=on_error,
        )
