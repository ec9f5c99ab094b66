# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cron expression engine: parse, expand, validate, describe, predict, generate."""

from cronkit.engine.describer import describe
from cronkit.engine.expander import expand, expand_expression
from cronkit.engine.generator import generate_expression
from cronkit.engine.occurrences import next_occurrences
from cronkit.engine.parser import parse_expression, parse_field
from cronkit.engine.validator import validate_expression

__all__ = [
    "describe",
    "expand",
    "expand_expression",
    "generate_expression",
    "next_occurrences",
    "parse_expression",
    "parse_field",
    "validate_expression",
]
