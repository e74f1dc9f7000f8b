"""Voicemetrics - performance analysis for transcription history."""

__version__ = "0.1.0"
