# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the CronTool action dispatcher."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from cronkit.core.config import Settings
from cronkit.models.results import CronRequest, FailureResult, NextResult, ParseResult
from cronkit.tool import CronTool, clamp_count, dispatch, resolve_action


@pytest.fixture
def tool(settings) -> CronTool:
    return CronTool(settings=settings)


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParseAction:
    def test_simple_expression(self, tool):
        result = tool.execute(action="parse", expression="0 9 * * *")
        assert result["success"] is True
        assert result["expression"] == "0 9 * * *"
        assert result["fields"]["minute"] == "0"
        assert result["fields"]["hour"] == "9"
        assert result["description"]

    def test_expanded_fields(self, tool):
        result = tool.execute(action="parse", expression="*/15 * * * *")
        assert result["expanded"]["minute"] == [0, 15, 30, 45]
        assert result["expanded"]["day_of_week"] == [0, 1, 2, 3, 4, 5, 6]

    def test_weekday_description(self, tool):
        result = tool.execute(action="parse", expression="0 9 * * 1-5")
        assert "weekday" in result["description"].lower()

    def test_missing_expression(self, tool):
        result = tool.execute(action="parse")
        assert result == {"success": False, "error": "expression is required"}

    def test_invalid_expression(self, tool):
        result = tool.execute(action="parse", expression="invalid")
        assert result["success"] is False
        assert "expected 5 fields, got 1" in result["error"]


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateAction:
    def test_valid(self, tool):
        assert tool.execute(action="validate", expression="0 9 * * *") == {"valid": True}

    def test_invalid_field_count(self, tool):
        result = tool.execute(action="validate", expression="0 9 * *")
        assert result["valid"] is False
        assert "expected 5 fields" in result["error"]

    @pytest.mark.parametrize("expression", ["60 9 * * *", "0 25 * * *"])
    def test_out_of_range(self, tool, expression):
        assert tool.execute(action="validate", expression=expression)["valid"] is False

    def test_missing_expression(self, tool):
        result = tool.execute(action="validate", expression=None)
        assert result == {"valid": False, "error": "expression is required"}


# ---------------------------------------------------------------------------
# next
# ---------------------------------------------------------------------------


class TestNextAction:
    def test_requested_count(self, tool, now):
        result = tool.execute(action="next", expression="* * * * *", count=3, now=now)
        assert result["success"] is True
        assert result["count"] == 3
        assert result["next_executions"] == [
            "2026-02-20T14:31",
            "2026-02-20T14:32",
            "2026-02-20T14:33",
        ]

    def test_default_count_is_five(self, tool, now):
        result = tool.execute(action="next", expression="* * * * *", now=now)
        assert result["count"] == 5
        assert len(result["next_executions"]) == 5

    def test_count_capped_at_twenty(self, tool, now):
        result = tool.execute(action="next", expression="* * * * *", count=100, now=now)
        assert result["count"] == 20

    def test_count_floor_is_one(self, tool, now):
        result = tool.execute(action="next", expression="* * * * *", count=0, now=now)
        assert result["count"] == 1

    def test_times_are_future_and_sequential(self, tool, now):
        result = tool.execute(action="next", expression="0 * * * *", count=3, now=now)
        times = [datetime.fromisoformat(t) for t in result["next_executions"]]
        assert all(t > now for t in times)
        assert times == sorted(set(times))

    def test_uses_local_clock_when_now_omitted(self, tool):
        before = datetime.now().astimezone()
        result = tool.execute(action="next", expression="* * * * *", count=1)
        assert datetime.fromisoformat(result["next_executions"][0]) > before

    def test_exhausted_search_is_a_failure(self, tool, now):
        result = tool.execute(action="next", expression="0 0 31 2 *", now=now)
        assert result["success"] is False
        assert "No matching time" in result["error"]

    def test_search_near_end_of_calendar_is_a_failure(self, tool):
        result = tool.execute(action="next", expression="0 0 1 1 *", now=datetime(9995, 6, 1))
        assert result["success"] is False
        assert "No matching time" in result["error"]

    def test_last_representable_minute_is_a_failure(self, tool):
        result = tool.execute(
            action="next", expression="* * * * *", now=datetime(9999, 12, 31, 23, 59)
        )
        assert result == {"success": False, "error": result["error"]}
        assert "No matching time" in result["error"]

    def test_settings_control_defaults(self, now):
        tool = CronTool(settings=Settings(default_count=2, max_count=4))
        assert tool.execute(action="next", expression="* * * * *", now=now)["count"] == 2
        assert tool.execute(action="next", expression="* * * * *", count=9, now=now)["count"] == 4

    def test_non_integer_count(self, tool):
        result = tool.execute(action="next", expression="* * * * *", count="lots")
        assert result["success"] is False
        assert "count" in result["error"]

    def test_invalid_expression(self, tool, now):
        result = tool.execute(action="next", expression="* * * * 9", now=now)
        assert result["success"] is False
        assert "day of week" in result["error"]


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerateAction:
    def test_generate(self, tool):
        result = tool.execute(action="generate", description="every 5 minutes")
        assert result == {
            "success": True,
            "expression": "*/5 * * * *",
            "description": "every 5 minutes",
            "explanation": "Every 5 minutes",
        }

    def test_unparseable(self, tool):
        result = tool.execute(action="generate", description="gibberish text here")
        assert result["success"] is False
        assert "Could not parse" in result["error"]

    def test_missing_description(self, tool):
        result = tool.execute(action="generate")
        assert result == {"success": False, "error": "description is required"}


# ---------------------------------------------------------------------------
# dispatch
# ---------------------------------------------------------------------------


class TestDispatch:
    @pytest.mark.parametrize("action", ["VALIDATE", "Validate", "validate", " validate "])
    def test_action_is_case_insensitive(self, tool, action):
        assert tool.execute(action=action, expression="0 9 * * *") == {"valid": True}

    def test_unknown_action(self, tool):
        result = tool.execute(action="explode", expression="* * * * *")
        assert result == {
            "success": False,
            "error": "Unknown action: explode. Valid actions: parse, validate, next, generate",
        }

    def test_typed_results(self, settings, now):
        parsed = dispatch(CronRequest(action="parse", expression="0 9 * * *"), settings=settings)
        assert isinstance(parsed, ParseResult)
        upcoming = dispatch(
            CronRequest(action="next", expression="0 9 * * *", count=1),
            settings=settings,
            now=now,
        )
        assert isinstance(upcoming, NextResult)
        assert upcoming.next_executions == ["2026-02-21T09:00"]
        failed = dispatch(CronRequest(action="nope"), settings=settings)
        assert isinstance(failed, FailureResult)

    def test_logs_action_and_failure(self, tool, caplog):
        with caplog.at_level(logging.INFO, logger="cronkit"):
            tool.execute(action="validate", expression="* * * * *")
            tool.execute(action="generate", description="whenever")
        assert "action='validate'" in caplog.text
        assert "Could not parse" in caplog.text

    def test_tool_metadata(self):
        assert CronTool.name == "cron"
        assert CronTool.parameters["properties"]["action"]["enum"] == [
            "parse",
            "validate",
            "next",
            "generate",
        ]


class TestHelpers:
    def test_resolve_action(self):
        assert resolve_action("NEXT") == "next"

    def test_clamp_count(self):
        assert clamp_count(None, default=5, maximum=20) == 5
        assert clamp_count(-3, default=5, maximum=20) == 1
        assert clamp_count(21, default=5, maximum=20) == 20
