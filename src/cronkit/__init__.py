# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""cronkit - Cron expression engine for agent tools and scripts."""

__version__ = "0.1.0"

from cronkit.models.results import CronRequest
from cronkit.tool import CronTool, dispatch

__all__ = [
    "CronRequest",
    "CronTool",
    "__version__",
    "dispatch",
]
