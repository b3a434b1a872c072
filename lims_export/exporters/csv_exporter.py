# exporters/csv_exporter.py
"""CSV export implementation."""

from typing import List, Optional

import pandas as pd

from lims_export.core.document import Document
from lims_export.core.layout import (
    CHANNEL_HEADER_ROW,
    channel_titles,
    header_block,
    measuring_values,
    row_timestamp,
)
from lims_export.utils.progress_tracker import ProgressTracker

from .base import FileExporter


class CSVExporter(FileExporter):
    """Appends measuring rows to a CSV file using the sheet layout."""

    name = "csv"
    display_name = "CSV file"

    def __init__(self, output_dir: str, prefix: str = "measuring_data", tracker: Optional[ProgressTracker] = None):
        """
        Initialize CSV exporter.

        Args:
            output_dir: Output directory path
            prefix: File name prefix
            tracker: Console used for user-facing error messages
        """
        super().__init__(output_dir, prefix, tracker)
        self._used_rows = 0

    @property
    def file_extension(self) -> str:
        """CSV file extension."""
        return "csv"

    @property
    def used_rows(self) -> int:
        """Number of lines written to the current file."""
        return self._used_rows

    def _create_workbook(self):
        path = self.new_target_path()
        with open(path, "w", encoding="utf-8", newline=""):
            pass

        self.session.target_path = path
        self.session.workbook = path
        self._used_rows = 0

    def _write_header(self, document: Document):
        path = self.session.target_path
        block = header_block(document)

        pd.DataFrame(block).to_csv(
            path, mode='a', header=False, index=False, lineterminator="\n"
        )
        self._used_rows += len(block)

        # Blank rows up to the title row
        with open(path, "a", encoding="utf-8", newline="") as f:
            while self._used_rows < CHANNEL_HEADER_ROW - 1:
                f.write("\n")
                self._used_rows += 1

        pd.DataFrame(columns=channel_titles(document)).to_csv(
            path, mode='a', index=False, lineterminator="\n"
        )
        self._used_rows += 1

    def _append_row(self, document: Document) -> int:
        row = self._used_rows + 1
        values: List = [row_timestamp(document)] + measuring_values(document)

        pd.DataFrame([values]).to_csv(
            self.session.target_path, mode='a', header=False, index=False,
            lineterminator="\n"
        )
        self._used_rows = row
        return row
