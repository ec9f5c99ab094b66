# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Field specification variants and the parsed five-field expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from cronkit.core.constants import FIELD_ORDER, CronField


@dataclass(frozen=True)
class Wildcard:
    """``*``: every value in the field's domain."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class Single:
    """One concrete value."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Range:
    """Inclusive ``lo-hi`` range."""

    lo: int
    hi: int

    def __str__(self) -> str:
        return f"{self.lo}-{self.hi}"


@dataclass(frozen=True)
class Step:
    """``base/interval`` progression over a wildcard or a range."""

    base: Wildcard | Range
    interval: int

    def __str__(self) -> str:
        return f"{self.base}/{self.interval}"


@dataclass(frozen=True)
class ListSpec:
    """Comma-separated union of sub-specs, kept in source order."""

    items: tuple[Wildcard | Single | Range | Step, ...]

    def __str__(self) -> str:
        return ",".join(str(item) for item in self.items)


FieldSpec = Union[Wildcard, Single, Range, Step, ListSpec]


@dataclass(frozen=True)
class CronExpression:
    """A parsed 5-field cron expression."""

    source: str
    tokens: tuple[str, str, str, str, str]
    minute: FieldSpec
    hour: FieldSpec
    day_of_month: FieldSpec
    month: FieldSpec
    day_of_week: FieldSpec

    def spec(self, field: CronField) -> FieldSpec:
        return getattr(self, field.value)

    def specs(self) -> dict[CronField, FieldSpec]:
        """Return the five field specs keyed by field, in positional order."""
        return {f: self.spec(f) for f in FIELD_ORDER}

    def raw_fields(self) -> dict[str, str]:
        return {f.value: token for f, token in zip(FIELD_ORDER, self.tokens)}
