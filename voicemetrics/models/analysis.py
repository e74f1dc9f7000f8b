"""Analysis result data models."""

import json
import uuid
from dataclasses import dataclass, field
from typing import Tuple, Dict, Any


@dataclass(frozen=True)
class ModelStat:
    """Aggregated timing statistics for one model."""
    name: str
    file_count: int
    total_processing_time: float
    avg_processing_time: float
    avg_audio_duration: float
    speed_factor: float  # RTFX: audio seconds per processing second, 0 if not computed
    # Stable key for list rendering only
    id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "fileCount": self.file_count,
            "totalProcessingTime": self.total_processing_time,
            "avgProcessingTime": self.avg_processing_time,
            "avgAudioDuration": self.avg_audio_duration,
            "speedFactor": self.speed_factor,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Snapshot of performance statistics over a set of transcriptions."""
    total_transcripts: int
    total_with_transcription_data: int
    total_audio_duration: float
    total_enhanced_files: int
    transcription_models: Tuple[ModelStat, ...] = ()
    enhancement_models: Tuple[ModelStat, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON-friendly camelCase shape."""
        return {
            "totalTranscripts": self.total_transcripts,
            "totalWithTranscriptionData": self.total_with_transcription_data,
            "totalAudioDuration": self.total_audio_duration,
            "totalEnhancedFiles": self.total_enhanced_files,
            "transcriptionModels": [stat.to_dict() for stat in self.transcription_models],
            "enhancementModels": [stat.to_dict() for stat in self.enhancement_models],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True)
class SystemInfo:
    """Host descriptors shown alongside the report."""
    device: str
    processor: str
    memory: str
