"""Aggregation of transcription records into performance statistics."""

from .analyzer import analyze, group_stats

__all__ = [
    "analyze",
    "group_stats",
]
