# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Natural-language schedule descriptions to cron expressions.

Descriptions are matched against an ordered rule table; the first rule whose
pattern appears as whole words anywhere in the normalised text produces the
expression, so "run the backup every day at 9am" works too.  New
phrases are added by inserting a :class:`GeneratorRule` into ``RULES`` ahead of
any more general rule it contains.

Usage::

    from cronkit.engine.generator import generate_expression

    generate_expression("every day at 9am")    # "0 9 * * *"
    generate_expression("weekdays at 5:30pm")  # "30 17 * * 1-5"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from cronkit.core.exceptions import MissingInputError, UnparseableDescriptionError
from cronkit.engine.validator import validate_expression

logger = logging.getLogger("cronkit.engine.generator")

WEEKDAY_INDEX: dict[str, int] = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}

_DAY = "(?P<day>" + "|".join(WEEKDAY_INDEX) + ")"
_CLOCK = r"(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s?(?P<ampm>am|pm)?"


@dataclass(frozen=True)
class GeneratorRule:
    """A regex searched for in the normalised text, and its producer."""

    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], str]


def _rule(pattern: str, build: Callable[[re.Match[str]], str]) -> GeneratorRule:
    return GeneratorRule(re.compile(rf"\b(?:{pattern})\b"), build)


def _fixed(expression: str) -> Callable[[re.Match[str]], str]:
    return lambda _m: expression


def to_24_hour(hour: int, ampm: str | None) -> int:
    """Convert a 12-hour clock hour to 24-hour; 12am is 0 and 12pm is 12."""
    if ampm == "pm" and hour != 12:
        return hour + 12
    if ampm == "am" and hour == 12:
        return 0
    return hour


def _clock(m: re.Match[str], day_of_week: str = "*") -> str:
    hour = to_24_hour(int(m.group("hour")), m.group("ampm"))
    minute = int(m.group("minute") or 0)
    return f"{minute} {hour} * * {day_of_week}"


# Specific phrases come before the general ones they contain: "every monday
# at 9am" and "hourly at :15" must not stop at "at 9am" or "hourly".
RULES: list[GeneratorRule] = [
    # Intervals
    _rule(r"every minute", _fixed("* * * * *")),
    _rule(r"every (?P<n>\d+) minutes?", lambda m: f"*/{int(m.group('n'))} * * * *"),
    _rule(r"every (?P<n>\d+) hours?", lambda m: f"0 */{int(m.group('n'))} * * *"),
    _rule(r"hourly at :?(?P<minute>\d{1,2})", lambda m: f"{int(m.group('minute'))} * * * *"),
    _rule(r"every hour|hourly", _fixed("0 * * * *")),
    # Clock times
    _rule(rf"(?:every )?weekdays? at {_CLOCK}", lambda m: _clock(m, "1-5")),
    _rule(rf"(?:every )?weekends? at {_CLOCK}", lambda m: _clock(m, "0,6")),
    _rule(
        rf"every {_DAY}s? at {_CLOCK}",
        lambda m: _clock(m, str(WEEKDAY_INDEX[m.group("day")])),
    ),
    _rule(rf"(?:every day |daily )?at {_CLOCK}", _clock),
    # Fixed phrases
    _rule(r"(?:every day )?at noon", _fixed("0 12 * * *")),
    _rule(r"(?:every day )?at midnight", _fixed("0 0 * * *")),
    _rule(r"monthly|first of (?:the )?month", _fixed("0 0 1 * *")),
    _rule(r"yearly|annually", _fixed("0 0 1 1 *")),
    _rule(rf"every {_DAY}s?", lambda m: f"0 0 * * {WEEKDAY_INDEX[m.group('day')]}"),
]


def normalize_description(description: str) -> str:
    return " ".join(description.strip().lower().split())


def generate_expression(description: str | None) -> str:
    """Map a free-text schedule *description* to a validated cron expression.

    Raises:
        MissingInputError: If the description is missing or blank.
        UnparseableDescriptionError: If no rule matches, or the matched rule
            produced an expression that fails validation.
    """
    if description is None or not description.strip():
        raise MissingInputError("description is required")

    text = normalize_description(description)
    for rule in RULES:
        match = rule.pattern.search(text)
        if match is None:
            continue

        expression = rule.build(match)
        validation = validate_expression(expression)
        if not validation.valid:
            raise UnparseableDescriptionError(
                f"Could not parse: {description} "
                f"(produced invalid expression {expression!r}: {validation.error})"
            )
        logger.debug("Generated %r from %r", expression, description)
        return expression

    raise UnparseableDescriptionError(f"Could not parse: {description}")
