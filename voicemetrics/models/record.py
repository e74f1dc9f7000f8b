"""Transcription record data model."""

import math
from dataclasses import dataclass
from typing import Optional, Dict, Any

from ..exceptions import InvalidRecordError


# Stored key -> field name. Both the camelCase keys written by the desktop
# app and plain snake_case keys are accepted.
_FIELD_ALIASES = {
    "audioDuration": "audio_duration",
    "duration": "audio_duration",
    "transcriptionModelName": "transcription_model_name",
    "transcriptionDuration": "transcription_duration",
    "enhancementModelName": "enhancement_model_name",
    "aiEnhancementModelName": "enhancement_model_name",
    "enhancementDuration": "enhancement_duration",
    "enhancedText": "enhanced_text",
}

_DURATION_FIELDS = ("transcription_duration", "enhancement_duration")
_TEXT_FIELDS = ("transcription_model_name", "enhancement_model_name", "enhanced_text")


@dataclass(frozen=True)
class TranscriptionRecord:
    """One processed audio item with its timing and enhancement metadata.

    Optional fields use None to mean "absent".
    """
    audio_duration: float  # Seconds of recorded audio
    transcription_model_name: Optional[str] = None
    transcription_duration: Optional[float] = None  # Processing time (seconds)
    enhancement_model_name: Optional[str] = None
    enhancement_duration: Optional[float] = None  # Processing time (seconds)
    enhanced_text: Optional[str] = None

    @property
    def has_transcription_data(self) -> bool:
        return self.transcription_duration is not None

    @property
    def is_enhanced(self) -> bool:
        return self.enhanced_text is not None and self.enhancement_duration is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TranscriptionRecord":
        """Build a record from a stored mapping.

        Args:
            data: Mapping with camelCase or snake_case keys. Unknown keys
                  (ids, timestamps, raw text) are ignored.

        Returns:
            TranscriptionRecord

        Raises:
            InvalidRecordError: If a value has the wrong type or a duration
                                is negative or not finite.
        """
        if not isinstance(data, dict):
            raise InvalidRecordError(f"Expected an object, got {type(data).__name__}")

        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__ and name not in values:
                values[name] = value

        audio_duration = _to_seconds("audio_duration", values.get("audio_duration"))
        values["audio_duration"] = 0.0 if audio_duration is None else audio_duration

        for name in _DURATION_FIELDS:
            values[name] = _to_seconds(name, values.get(name))

        for name in _TEXT_FIELDS:
            value = values.get(name)
            if value is not None and not isinstance(value, str):
                raise InvalidRecordError(f"{name} must be a string, got {type(value).__name__}")

        return cls(**values)


def _to_seconds(name: str, value: Any) -> Optional[float]:
    if value is None:
        return None
    # bool is an int subclass; a flag is never a duration
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRecordError(f"{name} must be a number, got {value!r}")
    seconds = float(value)
    # json.loads accepts NaN and Infinity literals
    if not math.isfinite(seconds) or seconds < 0:
        raise InvalidRecordError(f"{name} must be a finite number >= 0, got {value!r}")
    return seconds
