"""Data models for the voicemetrics application."""

from .record import TranscriptionRecord
from .analysis import ModelStat, AnalysisResult, SystemInfo

__all__ = [
    "TranscriptionRecord",
    "ModelStat",
    "AnalysisResult",
    "SystemInfo",
]
