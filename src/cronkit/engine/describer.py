# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Best-effort English descriptions of parsed cron expressions.

Recognises common shapes only; anything else falls back to a generic
phrase rather than failing.
"""

from __future__ import annotations

from cronkit.core.constants import DAY_NAMES, MONTH_NAMES, CronField
from cronkit.engine.expander import expand
from cronkit.models.expression import CronExpression, FieldSpec, Step, Wildcard

# Past this many clock times the description summarises instead of listing.
_MAX_LISTED_TIMES = 6

_WEEKDAYS = [1, 2, 3, 4, 5]
_WEEKENDS = [0, 6]


def _join(values: list[int]) -> str:
    return ", ".join(str(v) for v in values)


def _describe_time(minute: FieldSpec, hour: FieldSpec) -> str | None:
    if isinstance(minute, Wildcard) and isinstance(hour, Wildcard):
        return None

    if isinstance(minute, Wildcard):
        return f"Every minute during hour(s) {_join(expand(hour, CronField.HOUR))}"

    if isinstance(hour, Wildcard):
        if isinstance(minute, Step) and isinstance(minute.base, Wildcard):
            return f"Every {minute.interval} minutes"
        return f"At minute {_join(expand(minute, CronField.MINUTE))} of every hour"

    hours = expand(hour, CronField.HOUR)
    minutes = expand(minute, CronField.MINUTE)
    times = [f"{h:02d}:{m:02d}" for h in hours for m in minutes]
    if len(times) > _MAX_LISTED_TIMES:
        return (
            f"At {len(times)} times a day, minute(s) {_join(minutes)} "
            f"past hour(s) {_join(hours)}"
        )
    return f"At {', '.join(times)}"


def _describe_day_of_week(spec: FieldSpec) -> str:
    days = expand(spec, CronField.DAY_OF_WEEK)
    if days == _WEEKDAYS:
        return "on weekdays"
    if days == _WEEKENDS:
        return "on weekends"
    return "on " + ", ".join(DAY_NAMES[d] for d in days)


def describe(expr: CronExpression) -> str:
    """Return a human-readable phrase for *expr*."""
    parts: list[str] = []

    time_desc = _describe_time(expr.minute, expr.hour)
    if time_desc:
        parts.append(time_desc)

    if not isinstance(expr.day_of_month, Wildcard):
        parts.append(
            f"on day {_join(expand(expr.day_of_month, CronField.DAY_OF_MONTH))} of the month"
        )

    if not isinstance(expr.month, Wildcard):
        months = expand(expr.month, CronField.MONTH)
        parts.append("in " + ", ".join(MONTH_NAMES[m] for m in months))

    if not isinstance(expr.day_of_week, Wildcard):
        parts.append(_describe_day_of_week(expr.day_of_week))

    if not parts:
        return "Every minute"
    if time_desc is None:
        parts.insert(0, "Every minute")
    return ", ".join(parts)
