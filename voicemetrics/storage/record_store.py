"""Loading transcription records from JSON exports."""

import json
import logging
from pathlib import Path
from typing import Dict, Any, List, Union

from ..exceptions import RecordStoreError, InvalidRecordError
from ..models.record import TranscriptionRecord


logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".jsonl")


class RecordStore:
    """Reads transcription records from a directory of JSON exports.

    Two layouts are understood:
      * ``*.json`` - a list of record objects, or an object holding such a
        list under ``"transcriptions"``
      * ``*.jsonl`` - one record object per line

    The store never writes; every call to `load_all` returns a fresh snapshot.
    """

    def __init__(self, data_dir: str = "./data"):
        """Initialize record store.

        Args:
            data_dir: Base directory holding the exports. Records are read from
                      its ``transcriptions`` subdirectory.
        """
        self.data_dir = Path(data_dir)
        self.transcriptions_dir = self.data_dir / "transcriptions"

        logger.info(f"RecordStore initialized with data_dir: {self.data_dir}")

    def list_files(self) -> List[Path]:
        """List export files in load order.

        Returns:
            Paths of supported files sorted by name, empty if the directory is missing
        """
        if not self.transcriptions_dir.is_dir():
            logger.warning(f"Transcriptions directory not found: {self.transcriptions_dir}")
            return []

        files = [
            path for path in self.transcriptions_dir.iterdir()
            if path.is_file() and path.suffix in SUPPORTED_SUFFIXES
        ]
        files.sort()
        logger.debug(f"Found {len(files)} transcription files")
        return files

    def load_all(self) -> List[TranscriptionRecord]:
        """Load every record from every export file.

        Returns:
            List of records in file order

        Raises:
            RecordStoreError: If a file cannot be read or parsed
        """
        records: List[TranscriptionRecord] = []
        for path in self.list_files():
            records.extend(load_records(path))

        logger.info(f"Loaded {len(records)} transcription records from {self.transcriptions_dir}")
        return records


def load_records(path: Union[str, Path]) -> List[TranscriptionRecord]:
    """Load records from a single ``.json`` or ``.jsonl`` file.

    Args:
        path: File to read

    Returns:
        List of records in file order

    Raises:
        RecordStoreError: If the file is missing, unreadable or not valid JSON
        InvalidRecordError: If an entry is not a valid record
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        raise RecordStoreError(f"Cannot read file: {e}", path) from e

    if path.suffix == ".jsonl":
        items = []
        for line_number, line in enumerate(content.splitlines(), 1):
            if not line.strip():
                continue
            try:
                items.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise RecordStoreError(f"Invalid JSON on line {line_number}: {e}", path) from e
    else:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise RecordStoreError(f"Invalid JSON: {e}", path) from e
        items = _extract_items(data, path)

    records = []
    for index, item in enumerate(items):
        try:
            records.append(TranscriptionRecord.from_dict(item))
        except InvalidRecordError as e:
            raise InvalidRecordError(f"Record {index}: {e}", path) from e

    logger.debug(f"Loaded {len(records)} records from {path}")
    return records


def _extract_items(data: Any, path: Path) -> List[Dict[str, Any]]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict) and isinstance(data.get("transcriptions"), list):
        return data["transcriptions"]
    raise RecordStoreError("Expected a list of records or an object with a 'transcriptions' list", path)
