"""Read-only access to stored transcription history."""

from .record_store import RecordStore, load_records

__all__ = [
    "RecordStore",
    "load_records",
]
