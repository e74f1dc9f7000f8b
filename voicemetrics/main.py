"""Main application entry point for voicemetrics."""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from voicemetrics import __version__
from voicemetrics.analysis import analyze
from voicemetrics.exceptions import ConfigError, VoiceMetricsError
from voicemetrics.models.record import TranscriptionRecord
from voicemetrics.storage.record_store import RecordStore, load_records
from voicemetrics.system_info import get_system_info
from voicemetrics.ui.report_screen import PerformanceReport

from .config import LOG_LEVELS, VoiceMetricsConfig, get_config, reload_config

logger = logging.getLogger(__name__)


class ReportApp:
    """Loads a snapshot of records, analyzes it and presents the result."""

    def __init__(self, config: Optional[VoiceMetricsConfig] = None,
                 console: Optional[Console] = None):
        """Initialize the app.

        Args:
            config: Configuration to use (default: the shared config from get_config)
            console: Console the report is printed to
        """
        self.config = config or get_config()
        self.console = console or Console()

    def load(self, input_files: Optional[List[str]] = None,
             data_dir: Optional[str] = None) -> List[TranscriptionRecord]:
        """Read records from explicit files, or from the configured data directory."""
        if input_files:
            records = []
            for path in input_files:
                records.extend(load_records(path))
            logger.info(f"Loaded {len(records)} records from {len(input_files)} input files")
            return records

        store = RecordStore(data_dir or self.config.get_data_directory())
        return store.load_all()

    def run(self, input_files: Optional[List[str]] = None,
            data_dir: Optional[str] = None, as_json: bool = False) -> None:
        records = self.load(input_files, data_dir)
        result = analyze(records)

        if as_json:
            # Plain print keeps the output machine readable
            print(result.to_json())
            return

        system_info = get_system_info() if self.config.get('report.show_system_info', True) else None
        PerformanceReport(result, system_info, console=self.console).render()


FILE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
CONSOLE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _make_handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(config, level: str = "INFO") -> None:
    """Route all logging to the configured file, plus warnings to stderr.

    Args:
        config: Loaded configuration (reads logging.file_path and logging.console_output)
        level: Root logger level name

    Raises:
        ConfigError: If level is not a known logging level name
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level {level!r}, expected one of: {', '.join(LOG_LEVELS)}")

    log_file = Path(config.get('logging.file_path', 'data/logs/voicemetrics.log'))
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handlers = [_make_handler(logging.FileHandler(log_file), logging.DEBUG, FILE_LOG_FORMAT)]
    if config.get('logging.console_output', True):
        # stdout carries the report and JSON output
        handlers.append(_make_handler(logging.StreamHandler(sys.stderr), logging.WARNING, CONSOLE_LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)

    logger.info(f"voicemetrics v{__version__} logging to {log_file} at {level}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="voicemetrics",
        description="voicemetrics - Performance analysis of transcription history",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file (default: looks for voicemetrics.yaml)"
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        help="Data directory holding a transcriptions/ folder (overrides config)"
    )

    parser.add_argument(
        "--input",
        type=str,
        action="append",
        dest="input_files",
        metavar="FILE",
        help="Read records from this .json/.jsonl file instead of the data directory (repeatable)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON instead of the report"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: from config, INFO)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"voicemetrics v{__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for voicemetrics."""
    args = build_parser().parse_args(argv)

    try:
        # Becomes the shared config that ReportApp picks up
        config = reload_config(args.config)
        # Command line overrides config
        log_level = args.log_level or config.get('logging.level', 'INFO')
        setup_logging(config, log_level)

        ReportApp().run(args.input_files, args.data_dir, as_json=args.json)
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    except (VoiceMetricsError, FileNotFoundError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        logger.error(f"Application error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
