"""Match benchmarks for fluentmatch.

Measures the hot path: building a chain per subject, first-match-wins
scanning, miss-heavy chains that fall through to the default, and the cost
of the error chain.

Run: pytest tests/bench/test_bench_match.py --benchmark-only
"""

from __future__ import annotations

import pytest

from fluentmatch import (
    Contains,
    FluentMatch,
    InRange,
    Regex,
    StartsWith,
    all_of,
    switch_many,
)

pytest.importorskip("pytest_benchmark")


# ── Fixtures ─────────────────────────────────────────────────────────────────


def route(path: str) -> str | None:
    return (
        FluentMatch(path)
        .case_value("/", lambda: "root")
        .case(StartsWith("/api/"), lambda: "api")
        .case(Contains("static"), lambda: "static")
        .default(lambda: "fallback")
    )


def chain(value: int, width: int) -> FluentMatch[int, int]:
    m: FluentMatch[int, int] = FluentMatch(value)
    for n in range(width):
        m.case_value(n, lambda n=n: n)
    return m


# ── Core scenarios ───────────────────────────────────────────────────────────


def test_bench_value_hit_first(benchmark):
    benchmark(route, "/")


def test_bench_predicate_hit(benchmark):
    benchmark(route, "/api/v2/users")


def test_bench_fall_through_to_default(benchmark):
    benchmark(route, "/other/path")


def test_bench_short_circuit_wide_chain(benchmark):
    # Hit on the first clause, then 99 skipped clauses.
    benchmark(chain, 0, 100)


def test_bench_miss_wide_chain(benchmark):
    benchmark(chain, -1, 100)


# ── Predicates ───────────────────────────────────────────────────────────────


def test_bench_regex_hit(benchmark):
    pattern = Regex(r"^/api/v\d+/users/\d+$")
    benchmark(lambda: FluentMatch("/api/v2/users/12345").case(pattern, lambda: "user").get())


def test_bench_composed_predicate(benchmark):
    pred = all_of(Contains("hello"), Contains("world"))
    benchmark(lambda: FluentMatch("hello world").case(pred, lambda: "both").get())


# ── Errors and bulk ──────────────────────────────────────────────────────────


def test_bench_error_chain(benchmark):
    def run() -> FluentMatch[int, str]:
        return (
            FluentMatch(0, on_error=lambda e, v: True)
            .case(lambda v: 1 / v > 0, lambda: "positive")
            .case_value(0, lambda: "zero")
        )

    benchmark(run)


def test_bench_switch_many(benchmark):
    items = list(range(1000))

    def configure(m: FluentMatch[int, str]) -> None:
        m.case(InRange(0, 99), lambda: "low").case(lambda v: v % 2 == 0, lambda: "even")

    benchmark(lambda: list(switch_many(items, configure)))
