"""FluentMatch — chainable matcher with first-match-wins semantics.

Clauses are evaluated the moment they are declared, in declaration order:
- short_circuit=True: the first satisfied clause wins; every later case call
  is a no-op that logs nothing
- short_circuit=False: every satisfied clause contributes to all_results
- a failing predicate or body never aborts the chain; the error goes through
  the clause handler, then the matcher handler, and is logged either way
- default runs only when nothing matched

Async clauses are coroutines. Awaiting one evaluates it to completion before
the caller declares the next clause, so sync and async clauses interleave
without reordering.
"""

from __future__ import annotations

import functools
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Self

from fluentmatch._clauses import ClauseShortcuts
from fluentmatch._types import (
    CASE_ASYNC_LABEL,
    CASE_LABEL,
    DEFAULT_ASYNC_LABEL,
    DEFAULT_LABEL,
    ErrorPolicy,
    LogEntry,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fluentmatch._types import ErrorHandler

logger = logging.getLogger(__name__)


class FluentMatch[T, R](ClauseShortcuts):
    """A single matching session over one subject value.

    >>> m = FluentMatch(42).case_value(1, lambda: "One").case(lambda v: v > 10, lambda: "Big")
    >>> m.default(lambda: "Other")
    'Big'

    Not safe for concurrent use: one matcher per logical call chain.
    """

    __slots__ = (
        "_value",
        "_short_circuit",
        "_on_error",
        "_error_policy",
        "_matched",
        "_defaulted",
        "_result",
        "_all_results",
        "_log",
    )

    def __init__(
        self,
        value: T | None,
        short_circuit: bool = True,
        on_error: ErrorHandler | None = None,
        *,
        error_policy: ErrorPolicy = ErrorPolicy.SWALLOW,
    ) -> None:
        self._value = value
        self._short_circuit = short_circuit
        self._on_error = on_error
        self._error_policy = error_policy
        self._matched = False
        self._defaulted = False
        self._result: R | None = None
        self._all_results: list[R] = []
        self._log: list[LogEntry] = []

    def __repr__(self) -> str:
        return (
            f"FluentMatch(value={self._value!r}, matched={self._matched}, "
            f"result={self._result!r})"
        )

    # ── State ────────────────────────────────────────────────────────────────

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def short_circuit(self) -> bool:
        return self._short_circuit

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._error_policy

    @property
    def matched(self) -> bool:
        """True once at least one clause succeeded. A default is not a match."""
        return self._matched

    @property
    def defaulted(self) -> bool:
        return self._defaulted

    @property
    def result(self) -> R | None:
        """Result of the most recent successful clause or default."""
        return self._result

    @property
    def all_results(self) -> tuple[R, ...]:
        return tuple(self._all_results)

    @property
    def log(self) -> tuple[LogEntry, ...]:
        return tuple(self._log)

    def get(self) -> R | None:
        """Explicit accessor for the match result."""
        return self._result

    # ── Synchronous clauses ──────────────────────────────────────────────────

    def case(
        self,
        predicate: Callable[[T | None], bool],
        then: Callable[[], R] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Add a predicate clause.

        ``then`` produces a result; ``do`` only runs for its side effects.
        Exactly one of them must be given.
        """
        _check_body(then, do)
        if self._skipped():
            return self
        label = label or CASE_LABEL
        try:
            if not predicate(self._value):
                return self
            produced = (then(),) if then is not None else _run(do)
        except Exception as e:
            if not self._handle_error(e, label, on_error) and self._raises():
                raise
            return self
        self._accept(label, produced)
        return self

    def case_value(
        self,
        expected: T | None,
        then: Callable[[], R] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Add a clause matching when the subject ``== expected``."""
        return self.case(
            functools.partial(_equals, expected), then, do=do, label=label, on_error=on_error
        )

    def case_type[C](
        self,
        cls: type[C] | tuple[type, ...],
        then: Callable[[C], R] | None = None,
        *,
        do: Callable[[C], object] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Add a clause matching when the subject is an instance of ``cls``.

        The body receives the subject, narrowed to ``cls``. The label
        defaults to the class name.
        """
        _check_body(then, do)
        return self.case(
            functools.partial(_is_instance, cls),
            functools.partial(then, self._value) if then is not None else None,
            do=functools.partial(do, self._value) if do is not None else None,
            label=label or _type_label(cls),
            on_error=on_error,
        )

    def default(
        self,
        then: Callable[[], R] | None = None,
        *,
        do: Callable[[], object] | None = None,
        label: str | None = None,
    ) -> R | None:
        """Run the fallback body if nothing matched.

        Returns the (possibly default) result for ``then``; None for ``do``.
        Exceptions from a default body propagate to the caller.
        """
        _check_body(then, do)
        if self._matched or self._defaulted:
            return self._result if then is not None else None
        produced = (then(),) if then is not None else _run(do)
        self._accept(label or DEFAULT_LABEL, produced, is_default=True)
        return self._result if then is not None else None

    # ── Asynchronous clauses ─────────────────────────────────────────────────

    async def case_async(
        self,
        predicate: Callable[[T | None], bool],
        then: Callable[[], Awaitable[R]] | None = None,
        *,
        do: Callable[[], Awaitable[object]] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        """Async counterpart of case: the body is awaited to completion."""
        _check_body(then, do)
        if self._skipped():
            return self
        label = label or CASE_ASYNC_LABEL
        try:
            if not predicate(self._value):
                return self
            if then is not None:
                produced: tuple[Any, ...] = (await then(),)
            else:
                await do()  # type: ignore[misc]
                produced = ()
        except Exception as e:
            if not self._handle_error(e, label, on_error) and self._raises():
                raise
            return self
        self._accept(label, produced)
        return self

    async def case_value_async(
        self,
        expected: T | None,
        then: Callable[[], Awaitable[R]] | None = None,
        *,
        do: Callable[[], Awaitable[object]] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        return await self.case_async(
            functools.partial(_equals, expected), then, do=do, label=label, on_error=on_error
        )

    async def case_type_async[C](
        self,
        cls: type[C] | tuple[type, ...],
        then: Callable[[C], Awaitable[R]] | None = None,
        *,
        do: Callable[[C], Awaitable[object]] | None = None,
        label: str | None = None,
        on_error: ErrorHandler | None = None,
    ) -> Self:
        _check_body(then, do)
        return await self.case_async(
            functools.partial(_is_instance, cls),
            functools.partial(then, self._value) if then is not None else None,
            do=functools.partial(do, self._value) if do is not None else None,
            label=label or _type_label(cls),
            on_error=on_error,
        )

    async def default_async(
        self,
        then: Callable[[], Awaitable[R]] | None = None,
        *,
        do: Callable[[], Awaitable[object]] | None = None,
        label: str | None = None,
    ) -> R | None:
        _check_body(then, do)
        if self._matched or self._defaulted:
            return self._result if then is not None else None
        if then is not None:
            produced: tuple[Any, ...] = (await then(),)
        else:
            await do()  # type: ignore[misc]
            produced = ()
        self._accept(label or DEFAULT_ASYNC_LABEL, produced, is_default=True)
        return self._result if then is not None else None

    # ── Internals ────────────────────────────────────────────────────────────

    def _skipped(self) -> bool:
        return self._matched and self._short_circuit

    def _raises(self) -> bool:
        return self._error_policy is ErrorPolicy.RAISE

    def _accept(self, label: str, produced: tuple[Any, ...], *, is_default: bool = False) -> None:
        """Record a successful clause or default. ``produced`` is empty for ``do`` bodies."""
        if produced:
            self._result = produced[0]
            self._all_results.append(produced[0])
        if is_default:
            self._defaulted = True
        else:
            self._matched = True
        self._append(label, produced=produced, is_default=is_default)
        logger.debug("clause %r fired for %r", label, self._value)

    def _handle_error(
        self, error: Exception, label: str, on_error: ErrorHandler | None
    ) -> bool:
        """Offer a clause error to the clause handler, then the matcher handler.

        Exactly one error entry is appended, even when a handler raises.
        Returns whether the error was handled.
        """
        handled = False
        try:
            if on_error is not None:
                handled = bool(on_error(error, self._value))
            if not handled and self._on_error is not None:
                handled = bool(self._on_error(error, self._value))
        finally:
            self._append(label, error=error, handled=handled)
        if not handled and not self._raises():
            logger.warning(
                "unhandled error in clause %r for %r swallowed: %r", label, self._value, error
            )
        return handled

    def _append(
        self,
        label: str,
        *,
        produced: tuple[Any, ...] = (),
        error: Exception | None = None,
        handled: bool = False,
        is_default: bool = False,
    ) -> None:
        self._log.append(
            LogEntry(
                index=len(self._log),
                timestamp=datetime.now(UTC),
                label=label,
                value=self._value,
                result=produced[0] if produced else None,
                has_result=bool(produced),
                error=error,
                handled=handled,
                is_default=is_default,
            )
        )


def _check_body(then: object, do: object) -> None:
    if (then is None) == (do is None):
        msg = "exactly one of 'then' or 'do' must be given"
        raise TypeError(msg)


def _run(do: Callable[[], object] | None) -> tuple[Any, ...]:
    do()  # type: ignore[misc]
    return ()


def _equals(expected: Any, value: Any) -> bool:
    return bool(value == expected)


def _is_instance(cls: type | tuple[type, ...], value: Any) -> bool:
    return isinstance(value, cls)


def _type_label(cls: type | tuple[type, ...]) -> str:
    if isinstance(cls, tuple):
        return " | ".join(c.__name__ for c in cls)
    return cls.__name__
