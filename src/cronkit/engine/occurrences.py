# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Upcoming occurrence calculation for parsed cron expressions.

The reference instant is always passed in; nothing here reads the clock.
Returned datetimes keep the reference instant's tzinfo and are plain
wall-clock values (no timezone conversion).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, time, timedelta

from cronkit.core.constants import DEFAULT_SEARCH_HORIZON_DAYS, CronField
from cronkit.core.exceptions import ExhaustedError
from cronkit.engine.expander import expand_expression
from cronkit.models.expression import CronExpression, Wildcard

logger = logging.getLogger("cronkit.engine.occurrences")


def cron_weekday(day: date) -> int:
    """Return the cron weekday of *day* (0=Sunday ... 6=Saturday)."""
    return day.isoweekday() % 7


def _day_matcher(
    expr: CronExpression, days: set[int], weekdays: set[int]
) -> Callable[[date], bool]:
    """Build the day predicate.

    Both day fields restricted: either may match.  One restricted: only it
    counts.  Neither restricted: every day matches.
    """
    dom_any = isinstance(expr.day_of_month, Wildcard)
    dow_any = isinstance(expr.day_of_week, Wildcard)

    if dom_any and dow_any:
        return lambda d: True
    if dow_any:
        return lambda d: d.day in days
    if dom_any:
        return lambda d: cron_weekday(d) in weekdays
    return lambda d: d.day in days or cron_weekday(d) in weekdays


def next_occurrences(
    expr: CronExpression,
    now: datetime,
    count: int,
    *,
    horizon_days: int = DEFAULT_SEARCH_HORIZON_DAYS,
) -> list[datetime]:
    """Return the next *count* datetimes strictly after *now* matching *expr*.

    Candidates start at the minute boundary following *now* and are visited
    in increasing order: day by day, then through the expanded hours and
    minutes of each matching day.

    Raises:
        ExhaustedError: If fewer than *count* matches exist within
            *horizon_days* of *now*.
    """
    if count < 1:
        return []

    expanded = expand_expression(expr)
    minutes = expanded[CronField.MINUTE]
    hours = expanded[CronField.HOUR]
    months = set(expanded[CronField.MONTH])
    day_matches = _day_matcher(
        expr,
        set(expanded[CronField.DAY_OF_MONTH]),
        set(expanded[CronField.DAY_OF_WEEK]),
    )

    try:
        start = now.replace(second=0, microsecond=0) + timedelta(minutes=1)
    except OverflowError:
        raise ExhaustedError(
            f"No matching time found for {expr.source!r}: "
            f"{now.isoformat()} is the last representable minute"
        ) from None
    first_day = start.date()
    # The calendar ends at date.max; the walk stops there.
    last_day = first_day + timedelta(days=min(horizon_days, (date.max - first_day).days))

    results: list[datetime] = []
    day = first_day
    while True:
        if day.month in months and day_matches(day):
            for hour in hours:
                for minute in minutes:
                    candidate = datetime.combine(day, time(hour, minute), tzinfo=now.tzinfo)
                    if candidate < start:
                        continue
                    results.append(candidate)
                    if len(results) == count:
                        return results
        if day >= last_day:
            break
        day += timedelta(days=1)

    logger.debug(
        "Occurrence search for %r exhausted after %d days with %d match(es)",
        expr.source, horizon_days, len(results),
    )
    raise ExhaustedError(
        f"No matching time found for {expr.source!r} within {horizon_days} days "
        f"(found {len(results)} of {count})"
    )
