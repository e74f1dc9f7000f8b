"""Terminal performance analysis report."""

import logging
from typing import Optional
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text
from rich.table import Table
from rich.align import Align

from ..models.analysis import AnalysisResult, SystemInfo


logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """Format seconds as abbreviated minutes and seconds, e.g. "1m 5s".

    Zero-valued units are dropped; zero overall is "0s".
    """
    total = int(max(seconds, 0.0) + 0.5)
    minutes, secs = divmod(total, 60)
    if minutes and secs:
        return f"{minutes}m {secs}s"
    if minutes:
        return f"{minutes}m"
    return f"{secs}s"


def format_processing_time(seconds: float) -> str:
    return f"{seconds:.2f} s"


def format_speed_factor(speed_factor: float) -> str:
    return f"{speed_factor:.1f}x faster"


def format_file_count(file_count: int) -> str:
    return f"{file_count} transcripts"


class PerformanceReport:
    """Read-only rendering of an AnalysisResult.

    Model sections are left out entirely when their model list is empty.
    """

    def __init__(self, result: AnalysisResult,
                 system_info: Optional[SystemInfo] = None,
                 console: Optional[Console] = None):
        """Initialize report.

        Args:
            result: Analysis to render
            system_info: Host descriptors; the system section is skipped if None
            console: Console to print to (default: a new stdout console)
        """
        self.result = result
        self.system_info = system_info
        self.console = console or Console()

    def create_header(self) -> Panel:
        title = Text("📊 Performance Analysis", style="bold blue")
        return Panel(Align.center(title), style="bright_blue")

    def create_summary_table(self) -> Table:
        table = Table(title="Summary", show_header=True, header_style="bold magenta", expand=True)
        table.add_column("Total Transcripts", justify="center", style="bold")
        table.add_column("Analyzable", justify="center", style="bold")
        table.add_column("Enhanced", justify="center", style="bold")
        table.add_column("Total Audio", justify="center", style="bold")

        table.add_row(
            str(self.result.total_transcripts),
            str(self.result.total_with_transcription_data),
            str(self.result.total_enhanced_files),
            format_duration(self.result.total_audio_duration),
        )
        return table

    def create_system_info_table(self) -> Table:
        table = Table(title="System Information", show_header=True, header_style="bold magenta", expand=True)
        table.add_column("Device", style="white")
        table.add_column("Processor", style="white")
        table.add_column("Memory", style="white")

        table.add_row(self.system_info.device, self.system_info.processor, self.system_info.memory)
        return table

    def create_transcription_table(self) -> Table:
        table = Table(title="Transcription Models", show_header=True, header_style="bold magenta", expand=True)
        table.add_column("Model", style="cyan")
        table.add_column("Transcripts", style="dim")
        table.add_column("Avg. Transcript Duration", style="blue")
        table.add_column("Avg. Transcription Time", style="green")
        table.add_column("Speed Factor", style="bright_green")

        for stat in self.result.transcription_models:
            table.add_row(
                stat.name,
                format_file_count(stat.file_count),
                format_duration(stat.avg_audio_duration),
                format_processing_time(stat.avg_processing_time),
                format_speed_factor(stat.speed_factor),
            )
        return table

    def create_enhancement_table(self) -> Table:
        table = Table(title="Enhancement Models", show_header=True, header_style="bold magenta", expand=True)
        table.add_column("Model", style="cyan")
        table.add_column("Transcripts", style="dim")
        table.add_column("Avg. Enhancement Time", style="blue")

        for stat in self.result.enhancement_models:
            table.add_row(
                stat.name,
                format_file_count(stat.file_count),
                format_processing_time(stat.avg_processing_time),
            )
        return table

    def build(self) -> Group:
        """Assemble all visible sections in display order."""
        sections = [self.create_header(), self.create_summary_table()]
        if self.system_info is not None:
            sections.append(self.create_system_info_table())
        if self.result.transcription_models:
            sections.append(self.create_transcription_table())
        if self.result.enhancement_models:
            sections.append(self.create_enhancement_table())
        return Group(*sections)

    def render(self) -> None:
        """Print the report to the console."""
        logger.debug(
            f"Rendering report: {len(self.result.transcription_models)} transcription models, "
            f"{len(self.result.enhancement_models)} enhancement models")
        self.console.print(self.build())
