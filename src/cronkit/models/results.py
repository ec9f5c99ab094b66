# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Request and result models for the cron action dispatcher."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class CronRequest(BaseModel):
    """Input for a single dispatcher call."""

    action: str
    expression: str | None = None
    description: str | None = Field(
        default=None,
        description="Free-text schedule description for the generate action",
    )
    count: int | None = Field(
        default=None,
        description="Number of upcoming occurrences for the next action",
    )


class _FlatResult(BaseModel):
    def to_dict(self) -> dict[str, Any]:
        """Return the flat mapping shape, omitting unset optional fields."""
        return self.model_dump(exclude_none=True)


class FieldTokens(BaseModel):
    """Raw source tokens of the five fields."""

    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str


class ExpandedFields(BaseModel):
    """Concrete values each field resolves to."""

    minute: list[int]
    hour: list[int]
    day_of_month: list[int]
    month: list[int]
    day_of_week: list[int]


class ParseResult(_FlatResult):
    success: Literal[True] = True
    expression: str
    fields: FieldTokens
    expanded: ExpandedFields
    description: str


class ValidationResult(_FlatResult):
    valid: bool
    error: str | None = None


class NextResult(_FlatResult):
    success: Literal[True] = True
    expression: str
    count: int
    next_executions: list[str] = Field(default_factory=list)


class GenerateResult(_FlatResult):
    success: Literal[True] = True
    expression: str
    description: str
    explanation: str


class FailureResult(_FlatResult):
    success: Literal[False] = False
    error: str


CronResult = ParseResult | ValidationResult | NextResult | GenerateResult | FailureResult
