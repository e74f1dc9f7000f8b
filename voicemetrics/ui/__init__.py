"""Terminal presentation of analysis results."""

from .report_screen import PerformanceReport

__all__ = [
    "PerformanceReport",
]
