# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Whole-expression validation reporting the first problem found."""

from __future__ import annotations

import logging

from cronkit.core.exceptions import CronkitError
from cronkit.engine.parser import parse_expression
from cronkit.models.results import ValidationResult

logger = logging.getLogger("cronkit.engine.validator")


def validate_expression(expression: str | None) -> ValidationResult:
    """Check *expression* and return a :class:`ValidationResult`.

    Never raises for bad input: missing input, a wrong field count and the
    first field-level syntax or range error are all reported in ``error``.
    """
    try:
        parse_expression(expression)
    except CronkitError as exc:
        logger.debug("Rejected cron expression %r: %s", expression, exc)
        return ValidationResult(valid=False, error=str(exc))
    return ValidationResult(valid=True)
