"""Entry points: build a matcher, run it over many items, or match in one call.

The single-expression helpers (match_value, match_where, match_type) decide
"nothing matched" from ``FluentMatch.matched``. A clause that returns None
is therefore a successful match returning None, never an UnmatchedValueError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluentmatch._errors import UnmatchedValueError
from fluentmatch._matcher import FluentMatch
from fluentmatch._types import ErrorPolicy

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Iterator

    from fluentmatch._types import ErrorHandler


def switch[T, R](
    value: T | None,
    short_circuit: bool = True,
    on_error: ErrorHandler | None = None,
    *,
    error_policy: ErrorPolicy = ErrorPolicy.SWALLOW,
) -> FluentMatch[T, R]:
    """Start a fluent match over ``value``.

    >>> switch("b").case_value("a", lambda: 1).case_value("b", lambda: 2).get()
    2
    """
    return FluentMatch(value, short_circuit, on_error, error_policy=error_policy)


async def switch_async[T, R](
    value: T | None,
    configure: Callable[[FluentMatch[T, R]], Awaitable[FluentMatch[T, R]]],
    short_circuit: bool = True,
    on_error: ErrorHandler | None = None,
    *,
    error_policy: ErrorPolicy = ErrorPolicy.SWALLOW,
) -> FluentMatch[T, R]:
    """Build a matcher and await ``configure`` on it.

    ``configure`` declares clauses (awaiting each async one in turn) and
    returns the matcher.
    """
    matcher: FluentMatch[T, R] = FluentMatch(
        value, short_circuit, on_error, error_policy=error_policy
    )
    return await configure(matcher)


def switch_many[T, R](
    items: Iterable[T],
    configure: Callable[[FluentMatch[T, R]], object],
) -> Iterator[R]:
    """Lazily yield every result for every item.

    Each item gets a fresh non-short-circuit matcher, so every satisfied
    clause contributes. Results come in item order, then clause order.
    ``configure`` is called only when the iterator reaches that item.
    """
    for item in items:
        matcher: FluentMatch[T, R] = FluentMatch(item, short_circuit=False)
        configure(matcher)
        yield from matcher.all_results


def match_value[T, R](value: T | None, *cases: tuple[T | None, Callable[[], R]]) -> R:
    """Return the body result of the first ``(expected, then)`` pair equal to ``value``.

    Raises:
        UnmatchedValueError: If no pair matched.
    """
    matcher: FluentMatch[T, R] = FluentMatch(value)
    for expected, then in cases:
        matcher.case_value(expected, then)
    return _matched_result(matcher)


def match_where[T, R](
    value: T | None, *cases: tuple[Callable[[T | None], bool], Callable[[], R]]
) -> R:
    """Return the body result of the first ``(predicate, then)`` pair that holds.

    Raises:
        UnmatchedValueError: If no predicate held.
    """
    matcher: FluentMatch[T, R] = FluentMatch(value)
    for predicate, then in cases:
        matcher.case(predicate, then)
    return _matched_result(matcher)


def match_type[T, R](value: T | None, *cases: tuple[type, Callable[[T], R]]) -> R:
    """Dispatch on the exact runtime type of ``value`` (subclasses do not match).

    Raises:
        UnmatchedValueError: If no pair named ``type(value)``.
    """
    matcher: FluentMatch[T, R] = FluentMatch(value)
    for cls, then in cases:
        matcher.case(
            _exact_type(cls),
            _bind(then, value),
            label=cls.__name__,
        )
    return _matched_result(matcher)


def match_none[T, R](
    value: T | None,
    when_none: Callable[[], R],
    when_some: Callable[[T], R],
) -> R:
    """``when_none()`` if value is None, else ``when_some(value)``."""
    if value is None:
        return when_none()
    return when_some(value)


def _matched_result[R](matcher: FluentMatch[Any, R]) -> R:
    if not matcher.matched:
        # The last swallowed clause error, if any, becomes the cause.
        errors = [entry.error for entry in matcher.log if entry.error is not None]
        raise UnmatchedValueError(matcher.value) from (errors[-1] if errors else None)
    return matcher.result  # type: ignore[return-value]


def _exact_type(cls: type) -> Callable[[Any], bool]:
    return lambda v: type(v) is cls


def _bind[T, R](then: Callable[[T], R], value: T) -> Callable[[], R]:
    return lambda: then(value)
