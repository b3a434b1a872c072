# core/export_pipeline.py
"""Feeds LIMS documents into an exporter in arrival order."""

from typing import Iterable, List, Optional

from lims_export.config import Config
from lims_export.exporters import BaseExporter, create_exporter
from lims_export.logger.logger import Logger
from lims_export.utils.progress_tracker import ProgressTracker

from .document import Document
from .types import ExportResult


class ExportPipeline:
    """Owns one export session: header once per workbook, then one row per document."""

    def __init__(
            self,
            config: Config,
            exporter: Optional[BaseExporter] = None,
            tracker: Optional[ProgressTracker] = None
    ):
        """Initialize pipeline components."""
        self.config = config
        self.tracker = tracker or ProgressTracker()
        self.exporter = exporter or create_exporter(config, self.tracker)

        # Statistics
        self.rows_written = 0
        self.failures = 0

    @property
    def session(self):
        return self.exporter.session

    def start(self) -> ExportResult:
        """Start the backend and open the first workbook."""
        result = self.exporter.start_session()
        if not result:
            self.failures += 1
            return result
        return self.new_workbook()

    def new_workbook(self) -> ExportResult:
        """Open a new workbook; the header is written again before its first row."""
        result = self.exporter.create_workbook()
        if not result:
            self.failures += 1
        return result

    def process(self, document: Document) -> ExportResult:
        """
        Export one document.

        Args:
            document: Document snapshot

        Returns:
            Result of the row append, or of the header write if that failed
        """
        if not self.session.headers_written:
            header = self.exporter.write_header(document)
            if not header:
                self.failures += 1
                return header

        result = self.exporter.append_row(document)
        if result:
            self.rows_written += 1
        else:
            self.failures += 1
        return result

    def shutdown(self) -> ExportResult:
        """Release the backend."""
        result = self.exporter.shutdown()
        if not result:
            self.failures += 1
        return result

    def run(self, documents: Iterable[Document]) -> List[ExportResult]:
        """
        Execute a complete export run.

        Args:
            documents: Documents in arrival order

        Returns:
            Result of every exporter call made
        """
        self.tracker.print_header(f"LIMS Export ({self.exporter.display_name})")

        started = self.start()
        results = [started]
        if not started:
            if self.session.started or self.session.holds_handles:
                results.append(self.shutdown())
            return results

        try:
            with self.tracker.create_progress_bar() as progress:
                task = progress.add_task("[blue]Exporting measuring data", total=None)

                for document in documents:
                    results.append(self.process(document))
                    progress.advance(task)
        finally:
            results.append(self.shutdown())

        self._print_summary()
        return results

    def _print_summary(self):
        """Print final execution summary."""
        Logger.info(f"Export finished: {self.rows_written} rows, {self.failures} failures")
        self.tracker.print_info("\n📊 [bold]Export Summary:[/bold]")
        self.tracker.print_info(f"   • Rows written: [green]{self.rows_written:,}[/green]")
        if self.session.target_path:
            self.tracker.print_info(f"   • File: [bold]{self.session.target_path}[/bold]")
        if self.failures:
            self.tracker.print_warning(f"   • Failed operations: {self.failures}")

