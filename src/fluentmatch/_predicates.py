"""Predicate library: ready-made ``(value) -> bool`` callables for clauses.

Each predicate is a frozen dataclass, immutable after construction, so a
predicate can be built once and shared across matchers. String predicates
return False for non-string subjects (None included) instead of raising.

Regex uses ``google-re2`` for guaranteed linear-time matching. RE2 does not
support backreferences or lookahead/lookbehind because they require
backtracking. Patterns using them are rejected at construction time.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any

import re2

from fluentmatch._errors import PatternError

type Predicate = Callable[[Any], bool]

# ─── Comparison ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class InRange:
    """Inclusive range check: ``low <= value <= high``."""

    low: Any
    high: Any

    def __call__(self, value: Any, /) -> bool:
        return value is not None and self.low <= value <= self.high


@dataclass(frozen=True, slots=True)
class GreaterThan:
    bound: Any

    def __call__(self, value: Any, /) -> bool:
        return value is not None and value > self.bound


@dataclass(frozen=True, slots=True)
class LessThan:
    bound: Any

    def __call__(self, value: Any, /) -> bool:
        return value is not None and value < self.bound


@dataclass(frozen=True, slots=True)
class Equals:
    """Equality via ``==``. ``Equals(None)`` matches a None subject."""

    expected: Any

    def __call__(self, value: Any, /) -> bool:
        return bool(value == self.expected)


@dataclass(frozen=True, slots=True)
class OneOf:
    """Set membership.

    Hashable candidates are frozen into a frozenset at construction time;
    unhashable ones (or unhashable subjects) fall back to a linear scan.
    """

    values: Iterable[Any]
    _lookup: frozenset[Any] | None = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        try:
            lookup: frozenset[Any] | None = frozenset(self.values)
        except TypeError:
            lookup = None
        object.__setattr__(self, "_lookup", lookup)

    def __call__(self, value: Any, /) -> bool:
        if self._lookup is not None and isinstance(value, Hashable):
            return value in self._lookup
        return value in self.values


@dataclass(frozen=True, slots=True)
class IsTrue:
    def __call__(self, value: Any, /) -> bool:
        return value is True


@dataclass(frozen=True, slots=True)
class IsFalse:
    def __call__(self, value: Any, /) -> bool:
        return value is False


# ─── String shape ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Contains:
    """Substring search.

    When ignore_case is True, comparison is case-insensitive.
    The substring is pre-folded at construction time.
    """

    substring: str
    ignore_case: bool = False
    _cmp_substring: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_cmp_substring",
            self.substring.casefold() if self.ignore_case else self.substring,
        )

    def __call__(self, value: Any, /) -> bool:
        if not isinstance(value, str):
            return False
        input_val = value.casefold() if self.ignore_case else value
        return self._cmp_substring in input_val


@dataclass(frozen=True, slots=True)
class StartsWith:
    """String prefix match (startswith)."""

    prefix: str
    ignore_case: bool = False
    _cmp_prefix: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_cmp_prefix", self.prefix.casefold() if self.ignore_case else self.prefix
        )

    def __call__(self, value: Any, /) -> bool:
        if not isinstance(value, str):
            return False
        input_val = value.casefold() if self.ignore_case else value
        return input_val.startswith(self._cmp_prefix)


@dataclass(frozen=True, slots=True)
class EndsWith:
    """String suffix match (endswith)."""

    suffix: str
    ignore_case: bool = False
    _cmp_suffix: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_cmp_suffix", self.suffix.casefold() if self.ignore_case else self.suffix
        )

    def __call__(self, value: Any, /) -> bool:
        if not isinstance(value, str):
            return False
        input_val = value.casefold() if self.ignore_case else value
        return input_val.endswith(self._cmp_suffix)


@dataclass(frozen=True, slots=True)
class Regex:
    """Regular expression match.

    The pattern is compiled at construction time via ``google-re2``. Uses
    search (not fullmatch), so the pattern may match anywhere in the string.

    Raises:
        PatternError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            raise PatternError(self.pattern, str(e)) from e
        object.__setattr__(self, "_compiled", compiled)

    def __call__(self, value: Any, /) -> bool:
        return self.match(value) is not None

    def match(self, value: Any, /) -> Any:
        """Return the RE2 match object for ``value``, or None."""
        if not isinstance(value, str):
            return None
        return self._compiled.search(value)


# ─── Composition ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class AllOf:
    """All predicates must hold. Short-circuits on the first False.

    Empty AllOf returns True (vacuous truth).
    """

    predicates: tuple[Predicate, ...]

    def __call__(self, value: Any, /) -> bool:
        return all(p(value) for p in self.predicates)


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Any predicate must hold. Short-circuits on the first True.

    Empty AnyOf returns False.
    """

    predicates: tuple[Predicate, ...]

    def __call__(self, value: Any, /) -> bool:
        return any(p(value) for p in self.predicates)


@dataclass(frozen=True, slots=True)
class Not:
    """Inverts the inner predicate."""

    predicate: Predicate

    def __call__(self, value: Any, /) -> bool:
        return not self.predicate(value)


def all_of(*predicates: Predicate) -> Predicate:
    """Compose predicates with AND semantics.

    - Single -> unwrapped (no wrapping overhead)
    - Otherwise -> AllOf(predicates)
    """
    if len(predicates) == 1:
        return predicates[0]
    return AllOf(predicates)


def any_of(*predicates: Predicate) -> Predicate:
    """Compose predicates with OR semantics. Symmetric with all_of."""
    if len(predicates) == 1:
        return predicates[0]
    return AnyOf(predicates)


def not_(predicate: Predicate) -> Predicate:
    # Double negation collapses back to the inner predicate.
    match predicate:
        case Not(predicate=inner):
            return inner
        case _:
            return Not(predicate)
