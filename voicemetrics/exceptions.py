"""Exceptions raised at the edges of the analysis pipeline."""


class VoiceMetricsError(Exception):
    """Base class for all voicemetrics errors."""


class ConfigError(VoiceMetricsError, ValueError):
    """Configuration file is empty or cannot be parsed."""


class RecordStoreError(VoiceMetricsError):
    """Transcription records could not be read from the store."""

    def __init__(self, message: str, path=None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class InvalidRecordError(RecordStoreError):
    """A stored record is missing required data or holds bad values."""
