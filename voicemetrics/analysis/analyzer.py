"""Performance analysis over a snapshot of transcription records.

`analyze` is a pure function: it never mutates its input and returns fresh
value objects on every call. Records missing a model name or a processing
duration are left out of the per-model statistics for that family but still
count towards the top-level totals.
"""

import logging
from operator import attrgetter
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..models.analysis import AnalysisResult, ModelStat
from ..models.record import TranscriptionRecord

logger = logging.getLogger(__name__)

ModelNameGetter = Callable[[TranscriptionRecord], Optional[str]]
DurationGetter = Callable[[TranscriptionRecord], Optional[float]]


def analyze(records: Iterable[TranscriptionRecord]) -> AnalysisResult:
    """Compute totals and per-model statistics for a set of transcriptions.

    Args:
        records: Transcription records to analyze

    Returns:
        AnalysisResult with transcription and enhancement model statistics
        sorted by model name
    """
    records = list(records)

    total_with_transcription_data = 0
    total_audio_duration = 0.0
    total_enhanced_files = 0
    for record in records:
        total_audio_duration += record.audio_duration
        if record.has_transcription_data:
            total_with_transcription_data += 1
        if record.is_enhanced:
            total_enhanced_files += 1

    transcription_models = group_stats(
        records,
        attrgetter("transcription_model_name"),
        attrgetter("transcription_duration"),
        compute_speed_factor=True,
    )
    # Enhancement does not consume audio, so it has no speed factor
    enhancement_models = group_stats(
        records,
        attrgetter("enhancement_model_name"),
        attrgetter("enhancement_duration"),
        compute_speed_factor=False,
    )

    result = AnalysisResult(
        total_transcripts=len(records),
        total_with_transcription_data=total_with_transcription_data,
        total_audio_duration=total_audio_duration,
        total_enhanced_files=total_enhanced_files,
        transcription_models=transcription_models,
        enhancement_models=enhancement_models,
    )
    logger.debug(
        f"Analyzed {result.total_transcripts} transcripts: "
        f"{len(transcription_models)} transcription models, "
        f"{len(enhancement_models)} enhancement models")
    return result


def group_stats(records: Sequence[TranscriptionRecord],
                model_name: ModelNameGetter,
                duration: DurationGetter,
                compute_speed_factor: bool = False) -> Tuple[ModelStat, ...]:
    """Group records by model name and compute timing statistics per group.

    Args:
        records: Records to group
        model_name: Returns the model name of a record, or None if absent
        duration: Returns the processing duration of a record, or None if absent
        compute_speed_factor: Whether to report audio/processing time ratios

    Returns:
        One ModelStat per model name, sorted ascending by name
    """
    # dict keeps first-seen order, so the stable sort below is deterministic
    groups: Dict[str, List[Tuple[float, float]]] = {}
    for record in records:
        name = model_name(record)
        processing_time = duration(record)
        if name is None or processing_time is None:
            continue
        groups.setdefault(name, []).append((processing_time, record.audio_duration))

    stats = []
    for name, items in groups.items():
        file_count = len(items)
        total_processing_time = sum((processing_time for processing_time, _ in items), 0.0)
        total_audio_duration = sum((audio_duration for _, audio_duration in items), 0.0)

        speed_factor = 0.0
        if compute_speed_factor and total_processing_time > 0:
            speed_factor = total_audio_duration / total_processing_time

        stats.append(ModelStat(
            name=name,
            file_count=file_count,
            total_processing_time=total_processing_time,
            avg_processing_time=total_processing_time / file_count,
            avg_audio_duration=total_audio_duration / file_count,
            speed_factor=speed_factor,
        ))

    stats.sort(key=attrgetter("name"))
    return tuple(stats)
