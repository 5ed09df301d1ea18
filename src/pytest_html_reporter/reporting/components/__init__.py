"""htpy components for report generation.

This module provides type-safe HTML generation using htpy.
All report partials are implemented as functions returning htpy elements.
"""

from __future__ import annotations

from .report import full_report
from .suite_table import suite_info, suite_table

__all__ = [
    "full_report",
    "suite_info",
    "suite_table",
]
