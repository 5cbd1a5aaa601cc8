"""Scenario fixture loader for fluentmatch.

Loads YAML scenario fixtures from tests/fixtures/ and converts each clause
table into a function that declares those clauses on a FluentMatch, for
parametrized testing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from fluentmatch import (
    Contains,
    EndsWith,
    Equals,
    FluentMatch,
    GreaterThan,
    InRange,
    LessThan,
    OneOf,
    Regex,
    StartsWith,
)

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

_TYPES: dict[str, type] = {"bool": bool, "int": int, "float": float, "str": str}


@dataclass
class ScenarioCase:
    """A single subject from a scenario fixture."""

    fixture_name: str
    case_name: str
    short_circuit: bool
    configure: Callable[[FluentMatch[Any, Any]], None]
    value: Any
    result: Any
    all_results: list[Any]
    matched: bool


# ─── YAML → clause conversion ───────────────────────────────────────────────


def _raise(value: Any) -> bool:
    msg = f"predicate failed on {value!r}"
    raise RuntimeError(msg)


def parse_predicate(spec: dict[str, Any]) -> Callable[[Any], bool]:
    """Parse a predicate spec into a ``(value) -> bool`` callable."""
    if "equals" in spec:
        return Equals(spec["equals"])
    if "in_range" in spec:
        low, high = spec["in_range"]
        return InRange(low, high)
    if "greater_than" in spec:
        return GreaterThan(spec["greater_than"])
    if "less_than" in spec:
        return LessThan(spec["less_than"])
    if "one_of" in spec:
        return OneOf(spec["one_of"])
    if "contains" in spec:
        return Contains(spec["contains"])
    if "starts_with" in spec:
        return StartsWith(spec["starts_with"])
    if "ends_with" in spec:
        return EndsWith(spec["ends_with"])
    if "regex" in spec:
        return Regex(spec["regex"])
    if "is_none" in spec:
        return lambda v: v is None
    if "raises" in spec:
        return _raise
    msg = f"Unknown predicate type: {spec}"
    raise ValueError(msg)


def _constant(value: Any) -> Callable[..., Any]:
    return lambda *_: value


def _type_step(cls: type, then: Callable[..., Any], label: str | None) -> Callable[..., Any]:
    return lambda m: m.case_type(cls, then, label=label)


def _predicate_step(
    pred: Callable[[Any], bool], then: Callable[..., Any], label: str | None
) -> Callable[..., Any]:
    return lambda m: m.case(pred, then, label=label)


def parse_clauses(doc: dict[str, Any]) -> Callable[[FluentMatch[Any, Any]], None]:
    """Parse a fixture's clause table (and default) into a configure function."""
    steps: list[Callable[[FluentMatch[Any, Any]], Any]] = []
    for clause in doc["clauses"]:
        spec = clause["predicate"]
        then = _constant(clause["result"])
        label = clause.get("label")
        if "type" in spec:
            steps.append(_type_step(_TYPES[spec["type"]], then, label))
        else:
            steps.append(_predicate_step(parse_predicate(spec), then, label))
    if "default" in doc:
        fallback = _constant(doc["default"])
        steps.append(lambda m: m.default(fallback))

    def configure(matcher: FluentMatch[Any, Any]) -> None:
        for step in steps:
            step(matcher)

    return configure


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_scenarios() -> list[ScenarioCase]:
    """Load every scenario fixture under tests/fixtures/."""
    cases: list[ScenarioCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[ScenarioCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[ScenarioCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            configure = parse_clauses(doc)
            for case in doc["cases"]:
                cases.append(
                    ScenarioCase(
                        fixture_name=doc["name"],
                        case_name=case["name"],
                        short_circuit=doc.get("short_circuit", True),
                        configure=configure,
                        value=case["value"],
                        result=case["result"],
                        all_results=case["all_results"],
                        matched=case["matched"],
                    )
                )
    return cases
