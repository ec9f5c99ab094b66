# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json
from typing import Any


def format_json(result: dict[str, Any]) -> str:
    """Return a flat cron result mapping as formatted JSON."""
    return json.dumps(result, indent=2)
