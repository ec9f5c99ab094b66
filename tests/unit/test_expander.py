# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for field expansion."""

from __future__ import annotations

from cronkit.core.constants import CronField
from cronkit.engine.expander import expand, expand_expression
from cronkit.engine.parser import parse_expression, parse_field


def _expand(token: str, field: CronField) -> list[int]:
    return expand(parse_field(token, field), field)


class TestExpand:
    """Tests for resolving specs into concrete values."""

    def test_wildcard_covers_domain(self):
        assert _expand("*", CronField.DAY_OF_MONTH) == list(range(1, 32))
        assert _expand("*", CronField.DAY_OF_WEEK) == [0, 1, 2, 3, 4, 5, 6]

    def test_single(self):
        assert _expand("7", CronField.HOUR) == [7]

    def test_range_is_inclusive(self):
        assert _expand("9-17", CronField.HOUR) == list(range(9, 18))

    def test_quarter_hour_step(self):
        assert _expand("*/15", CronField.MINUTE) == [0, 15, 30, 45]

    def test_step_starts_at_domain_minimum(self):
        assert _expand("*/5", CronField.DAY_OF_MONTH) == [1, 6, 11, 16, 21, 26, 31]

    def test_range_step_bounded_by_range(self):
        assert _expand("9-17/2", CronField.HOUR) == [9, 11, 13, 15, 17]
        assert _expand("10-20/7", CronField.MINUTE) == [10, 17]

    def test_step_larger_than_domain(self):
        assert _expand("*/75", CronField.MINUTE) == [0]

    def test_list_is_sorted_union_without_duplicates(self):
        assert _expand("30,1,1-3,*/20", CronField.MINUTE) == [0, 1, 2, 3, 20, 30, 40]

    def test_expand_expression(self):
        expanded = expand_expression(parse_expression("0,30 9-11 1 */6 1-5"))
        assert expanded[CronField.MINUTE] == [0, 30]
        assert expanded[CronField.HOUR] == [9, 10, 11]
        assert expanded[CronField.DAY_OF_MONTH] == [1]
        assert expanded[CronField.MONTH] == [1, 7]
        assert expanded[CronField.DAY_OF_WEEK] == [1, 2, 3, 4, 5]
