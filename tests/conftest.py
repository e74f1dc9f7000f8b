"""Pytest configuration and fixtures for voicemetrics tests."""

import pytest
import tempfile
import json
import logging
from pathlib import Path

from voicemetrics.models.record import TranscriptionRecord


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def make_record():
    """Factory for transcription records with sensible defaults."""
    def _make(audio_duration=10.0, **kwargs):
        return TranscriptionRecord(audio_duration=audio_duration, **kwargs)

    return _make


@pytest.fixture
def sample_records():
    """A mixed history: two transcription models, one enhancement model, gaps."""
    return [
        TranscriptionRecord(
            audio_duration=30.0,
            transcription_model_name="whisper-large-v3",
            transcription_duration=3.0,
            enhancement_model_name="gpt-4o-mini",
            enhancement_duration=1.5,
            enhanced_text="Cleaned up text.",
        ),
        TranscriptionRecord(
            audio_duration=90.0,
            transcription_model_name="whisper-large-v3",
            transcription_duration=6.0,
        ),
        TranscriptionRecord(
            audio_duration=12.0,
            transcription_model_name="parakeet-tdt",
            transcription_duration=0.4,
            enhancement_model_name="gpt-4o-mini",
            enhancement_duration=2.5,
            enhanced_text="Another one.",
        ),
        # Legacy record without timing data
        TranscriptionRecord(
            audio_duration=5.0,
            transcription_model_name="whisper-base",
        ),
        TranscriptionRecord(audio_duration=8.0),
    ]


@pytest.fixture
def stored_records_dir(temp_data_dir):
    """Data directory with a .json and a .jsonl export."""
    transcriptions_dir = Path(temp_data_dir) / "transcriptions"
    transcriptions_dir.mkdir()

    with open(transcriptions_dir / "2024-01.json", 'w') as f:
        json.dump({
            "transcriptions": [
                {
                    "id": "a1",
                    "text": "hello world",
                    "duration": 10,
                    "transcriptionModelName": "A",
                    "transcriptionDuration": 2,
                },
                {
                    "id": "a2",
                    "duration": 20,
                    "transcriptionModelName": "A",
                    "transcriptionDuration": 2,
                    "aiEnhancementModelName": "B",
                    "enhancementDuration": 3,
                    "enhancedText": "Hello, world.",
                },
            ]
        }, f)

    with open(transcriptions_dir / "2024-02.jsonl", 'w') as f:
        f.write(json.dumps({"audio_duration": 4.5, "enhancement_model_name": "B",
                            "enhancement_duration": 5}) + "\n")
        f.write("\n")
        f.write(json.dumps({"audioDuration": 1.5}) + "\n")

    # Ignored: unsupported suffix
    (transcriptions_dir / "notes.txt").write_text("not a record")

    return temp_data_dir
