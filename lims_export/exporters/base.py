# exporters/base.py
"""Base exporter interface."""

import os
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

from lims_export.core.document import Document
from lims_export.core.session import ExportSession
from lims_export.core.types import ExportResult, ExportStage, SessionState
from lims_export.logger.logger import Logger
from lims_export.utils.date_manager import DateManager
from lims_export.utils.progress_tracker import ProgressTracker


class ShutdownError(Exception):
    """Raised when one or more handles could not be released."""

    def __init__(self, failures: List[Tuple[str, Exception]]):
        self.failures = failures
        self.errors = [f"{name}: {error}" for name, error in failures]
        super().__init__("Releasing failed for " + "; ".join(self.errors))


class BaseExporter(ABC):
    """
    Abstract base class for spreadsheet exporters.

    Public operations never raise. Each one runs inside a single failure
    boundary that logs a fixed failure message and the exception, shows the
    exception message to the user and returns a failed ``ExportResult``.
    """

    name = "base"
    display_name = "Excel"

    def __init__(self, tracker: Optional[ProgressTracker] = None):
        """
        Initialize exporter.

        Args:
            tracker: Console used for user-facing error messages
        """
        self.tracker = tracker or ProgressTracker()
        self.session = ExportSession()

    def start_session(self) -> ExportResult:
        """Start the backend (launch the application or prepare the output)."""
        def action():
            if self.session.started or self.session.holds_handles:
                raise RuntimeError(
                    f"{self.display_name} session is still open, shut it down before starting again"
                )
            Logger.debug(f"Starting {self.display_name}.")
            self.session = ExportSession()
            self._start_session()
            self.session.state = SessionState.STARTED
            Logger.debug(f"Started {self.display_name}.")

        return self._guard(ExportStage.START, f"Starting {self.display_name} failed!", action)

    def create_workbook(self) -> ExportResult:
        """Create a new workbook and select its active sheet."""
        def action():
            Logger.debug("Creating new workbook.")
            self._create_workbook()
            self.session.headers_written = False
            self.session.state = SessionState.WORKBOOK_OPEN
            Logger.debug("Created new workbook.")

        return self._guard(ExportStage.CREATE_WORKBOOK, "Creating workbook failed!", action)

    def write_header(self, document: Document) -> ExportResult:
        """Write the summary block and the channel title row."""
        def action():
            Logger.debug(f"Adding Header. {document.describe()}")
            self._write_header(document)
            self.session.headers_written = True
            self.session.state = SessionState.HEADER_WRITTEN
            Logger.debug("Added Header successfully.")

        return self._guard(ExportStage.WRITE_HEADER, "Adding Header failed!", action)

    def append_row(self, document: Document) -> ExportResult:
        """Append one row of channel readings below the last used row."""
        def action():
            Logger.debug(f"Adding Measuring Data. {document.describe()}")
            row = self._append_row(document)
            Logger.debug(f"Added Measuring Data successfully (row {row}).")
            return row

        return self._guard(ExportStage.APPEND_ROW, "Adding Measuring Data failed!", action)

    def shutdown(self) -> ExportResult:
        """
        Release every handle in reverse acquisition order.

        Every release is attempted even when an earlier one fails; the
        failures are reported together.
        """
        def action():
            Logger.debug(f"Disposing {self.display_name}.")
            failures = []

            try:
                self._before_release()
            except Exception as e:
                failures.append(("session", e))

            for name, handle in self.session.release_order():
                if handle is None:
                    continue
                try:
                    self._release(name, handle)
                except Exception as e:
                    failures.append((name, e))
                finally:
                    self.session.clear(name)

            self.session.state = SessionState.DISPOSED
            if failures:
                raise ShutdownError(failures)
            Logger.debug(f"Disposed {self.display_name} successfully.")

        return self._guard(ExportStage.SHUTDOWN, "Disposing failed!", action)

    def _guard(
            self,
            stage: ExportStage,
            failure_message: str,
            action: Callable[[], Any]
    ) -> ExportResult:
        """Run an operation, turning any exception into a failed result."""
        try:
            row = action()
        except Exception as e:
            Logger.failure(failure_message)
            Logger.exception(e)
            self.tracker.show_error_message(str(e))
            return ExportResult.failed(stage, str(e), getattr(e, "errors", None))

        return ExportResult(stage=stage, row=row)

    @abstractmethod
    def _start_session(self):
        pass

    @abstractmethod
    def _create_workbook(self):
        pass

    @abstractmethod
    def _write_header(self, document: Document):
        pass

    @abstractmethod
    def _append_row(self, document: Document) -> int:
        """Write the row and return its 1-based row number."""
        pass

    def _before_release(self):
        """Hook run before the handles are released."""

    def _release(self, name: str, handle: Any):
        """Release a single handle."""


class FileExporter(BaseExporter):
    """Base class for backends that write files instead of driving an application."""

    def __init__(self, output_dir: str, prefix: str, tracker: Optional[ProgressTracker] = None):
        """
        Initialize file exporter.

        Args:
            output_dir: Directory for exported files
            prefix: File name prefix
            tracker: Console used for user-facing error messages
        """
        super().__init__(tracker)
        self.output_dir = output_dir
        self.prefix = prefix

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Get file extension for this exporter."""
        pass

    def _start_session(self):
        self._ensure_directory()

    def _ensure_directory(self):
        """Create output directory if it doesn't exist."""
        os.makedirs(self.output_dir, exist_ok=True)

    def get_full_path(self, filename: str) -> str:
        """
        Get full file path with extension.

        Args:
            filename: Base filename

        Returns:
            Complete file path
        """
        return os.path.join(
            self.output_dir,
            f"{filename}.{self.file_extension}"
        )

    def new_target_path(self) -> str:
        """Pick an unused file path for a new workbook."""
        filename = f"{self.prefix}_{DateManager.format_filename_date(datetime.now())}"
        path = self.get_full_path(filename)

        counter = 1
        while os.path.exists(path):
            path = self.get_full_path(f"{filename}_{counter}")
            counter += 1
        return path
