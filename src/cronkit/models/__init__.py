# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for cronkit."""

from cronkit.models.expression import (
    CronExpression,
    FieldSpec,
    ListSpec,
    Range,
    Single,
    Step,
    Wildcard,
)
from cronkit.models.results import (
    CronRequest,
    CronResult,
    ExpandedFields,
    FailureResult,
    FieldTokens,
    GenerateResult,
    NextResult,
    ParseResult,
    ValidationResult,
)

__all__ = [
    "CronExpression",
    "CronRequest",
    "CronResult",
    "ExpandedFields",
    "FailureResult",
    "FieldSpec",
    "FieldTokens",
    "GenerateResult",
    "ListSpec",
    "NextResult",
    "ParseResult",
    "Range",
    "Single",
    "Step",
    "ValidationResult",
    "Wildcard",
]
