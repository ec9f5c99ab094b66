# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, field domains, and calendar name tables."""

from enum import StrEnum


class Action(StrEnum):
    PARSE = "parse"
    VALIDATE = "validate"
    NEXT = "next"
    GENERATE = "generate"


class CronField(StrEnum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"


# Positional order of the five fields in an expression.
FIELD_ORDER: tuple[CronField, ...] = (
    CronField.MINUTE,
    CronField.HOUR,
    CronField.DAY_OF_MONTH,
    CronField.MONTH,
    CronField.DAY_OF_WEEK,
)

FIELD_DOMAINS: dict[CronField, tuple[int, int]] = {
    CronField.MINUTE: (0, 59),
    CronField.HOUR: (0, 23),
    CronField.DAY_OF_MONTH: (1, 31),
    CronField.MONTH: (1, 12),
    CronField.DAY_OF_WEEK: (0, 6),  # 0=Sunday
}

# Human-readable field labels used in error messages.
FIELD_LABELS: dict[CronField, str] = {
    CronField.MINUTE: "minute",
    CronField.HOUR: "hour",
    CronField.DAY_OF_MONTH: "day of month",
    CronField.MONTH: "month",
    CronField.DAY_OF_WEEK: "day of week",
}

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

VALID_ACTIONS_TEXT = ", ".join(a.value for a in Action)

# Default occurrence search horizon; spans the 8-year Feb 29 gap around 2100.
DEFAULT_SEARCH_HORIZON_DAYS = 366 * 8
