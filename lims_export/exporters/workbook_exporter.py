# exporters/workbook_exporter.py
"""Excel file export implementation that saves after every write."""

from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Border, Font, Side
from openpyxl.utils import get_column_letter

from lims_export.core.document import Document
from lims_export.core.layout import (
    CHANNEL_HEADER_ROW,
    FIRST_VALUE_COLUMN,
    channel_titles,
    header_block,
    measuring_values,
    row_timestamp,
)
from lims_export.utils.progress_tracker import ProgressTracker

from .base import FileExporter

SHEET_TITLE = "Measuring Data"


def _border(style: str) -> Border:
    side = Side(style=style)
    return Border(left=side, right=side, top=side, bottom=side)


class WorkbookExporter(FileExporter):
    """Writes the sheet layout into an .xlsx file with openpyxl."""

    name = "workbook"
    display_name = "workbook file"

    def __init__(self, output_dir: str, prefix: str = "measuring_data", tracker: Optional[ProgressTracker] = None):
        """
        Initialize workbook exporter.

        Args:
            output_dir: Output directory path
            prefix: File name prefix
            tracker: Console used for user-facing error messages
        """
        super().__init__(output_dir, prefix, tracker)

    @property
    def file_extension(self) -> str:
        """Excel file extension."""
        return "xlsx"

    def _create_workbook(self):
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = SHEET_TITLE

        self.session.workbook = workbook
        self.session.worksheet = worksheet
        self.session.target_path = self.new_target_path()
        self._save()

    def _write_header(self, document: Document):
        worksheet = self.session.worksheet
        medium = _border("medium")

        for row, (label, value) in enumerate(header_block(document), start=1):
            for column, text in enumerate((label, value), start=1):
                cell = worksheet.cell(row=row, column=column, value=text)
                cell.border = medium

        bold = Font(bold=True)
        for column, title in enumerate(channel_titles(document), start=1):
            cell = worksheet.cell(row=CHANNEL_HEADER_ROW, column=column, value=title)
            cell.font = bold
            cell.border = medium
            self._fit_column(column, title)

        # Rows above the first data row stay visible while scrolling
        worksheet.freeze_panes = f"A{CHANNEL_HEADER_ROW + 1}"
        self._save()

    def _append_row(self, document: Document) -> int:
        worksheet = self.session.worksheet
        thin = _border("thin")
        row = worksheet.max_row + 1

        timestamp = row_timestamp(document)
        cell = worksheet.cell(row=row, column=1, value=timestamp)
        cell.border = thin
        self._fit_column(1, timestamp)

        for column, value in enumerate(measuring_values(document), start=FIRST_VALUE_COLUMN):
            cell = worksheet.cell(row=row, column=column, value=value)
            cell.border = thin
            self._fit_column(column, str(value))

        self._save()
        return row

    def _fit_column(self, column: int, text: str):
        """Widen a column so the text fits (never shrinks)."""
        dimension = self.session.worksheet.column_dimensions[get_column_letter(column)]
        width = float(len(text) + 2)
        if dimension.width is None or dimension.width < width:
            dimension.width = width

    def _save(self):
        self.session.workbook.save(self.session.target_path)

    def _before_release(self):
        if self.session.workbook is not None and self.session.target_path:
            self._save()

    def _release(self, name: str, handle):
        if name == "workbook":
            handle.close()
