# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Agent-tool entry point for the cron engine.

:class:`CronTool` is the single public dispatcher: it maps an action tag
(``parse``, ``validate``, ``next``, ``generate``) to the matching engine
operation and returns a flat result mapping.  Errors never escape; they are
returned as ``{"success": False, "error": ...}`` (or ``{"valid": False,
"error": ...}`` for ``validate``).

Usage::

    from cronkit.tool import CronTool

    tool = CronTool()
    tool.execute(action="parse", expression="0 9 * * 1-5")
    tool.execute(action="next", expression="0 * * * *", count=3)
    tool.execute(action="generate", description="every monday at 9am")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from cronkit.core.config import Settings, get_settings
from cronkit.core.constants import FIELD_ORDER, VALID_ACTIONS_TEXT, Action
from cronkit.core.exceptions import CronkitError, UnknownActionError
from cronkit.engine.describer import describe
from cronkit.engine.expander import expand_expression
from cronkit.engine.generator import generate_expression
from cronkit.engine.occurrences import next_occurrences
from cronkit.engine.parser import parse_expression
from cronkit.engine.validator import validate_expression
from cronkit.models.results import (
    CronRequest,
    CronResult,
    ExpandedFields,
    FailureResult,
    FieldTokens,
    GenerateResult,
    NextResult,
    ParseResult,
)

logger = logging.getLogger("cronkit.tool")

Handler = Callable[[CronRequest, datetime | None], CronResult]


def resolve_action(tag: str) -> Action:
    """Match *tag* case-insensitively against the known actions."""
    try:
        return Action(tag.strip().lower())
    except ValueError:
        raise UnknownActionError(
            f"Unknown action: {tag}. Valid actions: {VALID_ACTIONS_TEXT}"
        ) from None


def clamp_count(count: int | None, *, default: int, maximum: int) -> int:
    """Apply the default when *count* is absent and clamp it to ``[1, maximum]``."""
    if count is None:
        count = default
    return max(1, min(count, maximum))


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "request"
    return f"Invalid {location}: {first['msg']}"


class CronTool:
    """Parse, validate, predict and generate 5-field cron expressions.

    Parameters
    ----------
    settings : Settings | None
        Optional settings override; falls back to ``get_settings()``.
    """

    name: str = "cron"
    description: str = (
        "Parse, validate, and explain 5-field cron expressions "
        "(minute hour day-of-month month day-of-week). Actions: 'parse' explains "
        "an expression, 'validate' checks it, 'next' lists upcoming run times, "
        "'generate' builds an expression from a description such as "
        "'every day at 9am' or 'every 5 minutes'."
    )
    parameters: dict[str, Any] = {
        "type": "object",
        "properties": {
            "action": {
                "type": "string",
                "enum": [a.value for a in Action],
                "description": "The action to perform",
            },
            "expression": {
                "type": "string",
                "description": "Cron expression for parse, validate and next",
            },
            "description": {
                "type": "string",
                "description": "Schedule description for generate, e.g. 'weekdays at 9am'",
            },
            "count": {
                "type": "integer",
                "description": "Number of upcoming times for next (default 5, max 20)",
            },
        },
        "required": ["action"],
    }

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._handlers: dict[Action, Handler] = {
            Action.PARSE: self._parse,
            Action.VALIDATE: self._validate,
            Action.NEXT: self._next,
            Action.GENERATE: self._generate,
        }

    # -- public interface ---------------------------------------------------

    def execute(
        self,
        action: str,
        expression: str | None = None,
        description: str | None = None,
        count: int | None = None,
        *,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """Run *action* and return the flat result mapping."""
        try:
            request = CronRequest(
                action=action,
                expression=expression,
                description=description,
                count=count,
            )
        except ValidationError as exc:
            message = _describe_validation_error(exc)
            logger.warning("Rejected cron request: %s", message)
            return FailureResult(error=message).to_dict()
        return self.dispatch(request, now=now).to_dict()

    def dispatch(self, request: CronRequest, *, now: datetime | None = None) -> CronResult:
        """Run *request* and return its typed result model.

        *now* is the reference instant for ``next``; when omitted the local
        wall clock is read here, never inside the engine.
        """
        logger.info("CronTool dispatch action=%r", request.action)
        try:
            action = resolve_action(request.action)
            return self._handlers[action](request, now)
        except CronkitError as exc:
            logger.warning("Cron action %r failed: %s", request.action, exc)
            return FailureResult(error=str(exc))

    # -- handlers -----------------------------------------------------------

    def _parse(self, request: CronRequest, now: datetime | None) -> ParseResult:
        expr = parse_expression(request.expression)
        expanded = expand_expression(expr)
        return ParseResult(
            expression=request.expression or expr.source,
            fields=FieldTokens(**expr.raw_fields()),
            expanded=ExpandedFields(**{f.value: expanded[f] for f in FIELD_ORDER}),
            description=describe(expr),
        )

    def _validate(self, request: CronRequest, now: datetime | None) -> CronResult:
        return validate_expression(request.expression)

    def _next(self, request: CronRequest, now: datetime | None) -> NextResult:
        expr = parse_expression(request.expression)
        count = clamp_count(
            request.count,
            default=self.settings.default_count,
            maximum=self.settings.max_count,
        )
        reference = now or datetime.now().astimezone()
        occurrences = next_occurrences(
            expr,
            reference,
            count,
            horizon_days=self.settings.search_horizon_days,
        )
        return NextResult(
            expression=request.expression or expr.source,
            count=len(occurrences),
            next_executions=[o.isoformat(timespec="minutes") for o in occurrences],
        )

    def _generate(self, request: CronRequest, now: datetime | None) -> GenerateResult:
        expression = generate_expression(request.description)
        return GenerateResult(
            expression=expression,
            description=request.description or "",
            explanation=describe(parse_expression(expression)),
        )


def dispatch(
    request: CronRequest,
    *,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> CronResult:
    """Dispatch *request* through a fresh :class:`CronTool`."""
    return CronTool(settings=settings).dispatch(request, now=now)
