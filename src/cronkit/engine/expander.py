# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Resolve field specs into the concrete values they match."""

from __future__ import annotations

from cronkit.core.constants import FIELD_DOMAINS, FIELD_ORDER, CronField
from cronkit.models.expression import (
    CronExpression,
    FieldSpec,
    ListSpec,
    Range,
    Single,
    Step,
    Wildcard,
)


def _values(spec: FieldSpec, lo: int, hi: int) -> set[int]:
    if isinstance(spec, Wildcard):
        return set(range(lo, hi + 1))
    if isinstance(spec, Single):
        return {spec.value}
    if isinstance(spec, Range):
        return set(range(spec.lo, spec.hi + 1))
    if isinstance(spec, Step):
        start, stop = (lo, hi) if isinstance(spec.base, Wildcard) else (spec.base.lo, spec.base.hi)
        return set(range(start, stop + 1, spec.interval))
    if isinstance(spec, ListSpec):
        values: set[int] = set()
        for item in spec.items:
            values |= _values(item, lo, hi)
        return values
    raise TypeError(f"Unknown field spec: {spec!r}")


def expand(spec: FieldSpec, field: CronField) -> list[int]:
    """Return the sorted, duplicate-free values *spec* matches in *field*'s domain."""
    lo, hi = FIELD_DOMAINS[field]
    return sorted(_values(spec, lo, hi))


def expand_expression(expr: CronExpression) -> dict[CronField, list[int]]:
    """Expand all five fields of *expr*, keyed by field."""
    return {field: expand(expr.spec(field), field) for field in FIELD_ORDER}
