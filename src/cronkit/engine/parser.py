# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cron expression parser.

Supports standard 5-field cron expressions:
    minute hour day-of-month month day-of-week

Each field supports:
    *           - any value
    N           - specific value (e.g. 5)
    N,M         - list of values (e.g. 1,15)
    N-M         - range of values (e.g. 1-5)
    */N         - step over the whole domain (e.g. */15)
    N-M/S       - step over a range (e.g. 9-17/2)

Syntax problems raise :class:`CronSyntaxError`; well-formed values outside
a field's domain raise :class:`CronRangeError`.
"""

from __future__ import annotations

import re

from cronkit.core.constants import FIELD_DOMAINS, FIELD_LABELS, FIELD_ORDER, CronField
from cronkit.core.exceptions import CronRangeError, CronSyntaxError, MissingInputError
from cronkit.models.expression import (
    CronExpression,
    FieldSpec,
    ListSpec,
    Range,
    Single,
    Step,
    Wildcard,
)

_ALLOWED_CHARS = re.compile(r"[0-9*,/\-]+")
_INTEGER = re.compile(r"\d+")


def _fail_syntax(field: CronField, message: str) -> CronSyntaxError:
    return CronSyntaxError(f"{FIELD_LABELS[field]}: {message}")


def _parse_int(text: str, field: CronField, token: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise _fail_syntax(field, f"invalid value {token!r}")
    value = int(text)
    lo, hi = FIELD_DOMAINS[field]
    if value < lo or value > hi:
        raise CronRangeError(
            f"{FIELD_LABELS[field]}: value {value} out of range ({lo}-{hi})"
        )
    return value


def _parse_range(text: str, field: CronField, token: str) -> Range:
    lo_text, sep, hi_text = text.partition("-")
    if not sep or "-" in hi_text:
        raise _fail_syntax(field, f"invalid range {token!r}")
    lo = _parse_int(lo_text, field, token)
    hi = _parse_int(hi_text, field, token)
    if lo > hi:
        raise _fail_syntax(field, f"range start {lo} exceeds end {hi} in {token!r}")
    return Range(lo, hi)


def _parse_step(text: str, field: CronField) -> Step:
    base_text, _, interval_text = text.partition("/")
    if "/" in interval_text or not _INTEGER.fullmatch(interval_text):
        raise _fail_syntax(field, f"invalid step value in {text!r}")
    interval = int(interval_text)
    if interval <= 0:
        raise _fail_syntax(field, f"step must be positive in {text!r}")

    base: Wildcard | Range
    if base_text == "*":
        base = Wildcard()
    elif "-" in base_text:
        base = _parse_range(base_text, field, text)
    else:
        raise _fail_syntax(field, f"step base must be '*' or a range in {text!r}")
    return Step(base, interval)


def _parse_part(part: str, field: CronField) -> Wildcard | Single | Range | Step:
    """Classify one comma-free sub-token, by precedence: step, range, wildcard, single."""
    if not part:
        raise _fail_syntax(field, "empty list element")
    if "/" in part:
        return _parse_step(part, field)
    if "-" in part:
        return _parse_range(part, field, part)
    if part == "*":
        return Wildcard()
    return Single(_parse_int(part, field, part))


def parse_field(token: str, field: CronField) -> FieldSpec:
    """Parse a single field token into a :data:`FieldSpec`.

    Raises:
        CronSyntaxError: If the token is malformed.
        CronRangeError: If a value falls outside the field's domain.
    """
    if not _ALLOWED_CHARS.fullmatch(token):
        raise _fail_syntax(field, f"invalid characters in {token!r}")

    parts = [_parse_part(part, field) for part in token.split(",")]
    if len(parts) == 1:
        return parts[0]
    return ListSpec(tuple(parts))


def split_expression(expression: str | None) -> list[str]:
    """Split an expression into exactly five raw tokens.

    Raises:
        MissingInputError: If the expression is missing or blank.
        CronSyntaxError: If the token count is not five.
    """
    if expression is None or not expression.strip():
        raise MissingInputError("expression is required")

    tokens = expression.split()
    if len(tokens) != 5:
        raise CronSyntaxError(
            f"Invalid cron expression: expected 5 fields, got {len(tokens)}"
        )
    return tokens


def parse_expression(expression: str | None) -> CronExpression:
    """Parse a 5-field cron expression into a :class:`CronExpression`.

    Fields are parsed left to right; the first error propagates.
    """
    tokens = split_expression(expression)
    specs = [parse_field(token, field) for token, field in zip(tokens, FIELD_ORDER)]
    minute, hour, day_of_month, month, day_of_week = specs
    return CronExpression(
        source=" ".join(tokens),
        tokens=(tokens[0], tokens[1], tokens[2], tokens[3], tokens[4]),
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month=month,
        day_of_week=day_of_week,
    )
