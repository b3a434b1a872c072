# exporters/excel_exporter.py
"""Live Excel export through the Office automation interface."""

from typing import Optional

from lims_export.config import Config
from lims_export.core.document import Document
from lims_export.core.interop import ExcelInterop
from lims_export.core.layout import (
    CHANNEL_HEADER_ROW,
    LABEL_BLOCK_RANGE,
    channel_titles,
    header_block,
    measuring_values,
    row_timestamp,
)
from lims_export.utils.progress_tracker import ProgressTracker

from .base import BaseExporter


class ExcelExporter(BaseExporter):
    """Writes the header and the measuring rows into a running Excel instance."""

    name = "excel"
    display_name = "Excel"

    def __init__(
            self,
            config: Config,
            interop: Optional[ExcelInterop] = None,
            tracker: Optional[ProgressTracker] = None
    ):
        """
        Initialize Excel exporter.

        Args:
            config: Configuration instance
            interop: Automation surface, created from config if omitted
            tracker: Console used for user-facing error messages
        """
        super().__init__(tracker)
        self.config = config
        self.interop = interop or ExcelInterop(config)

    def _start_session(self):
        # Record the handle before configuring it
        application = self.interop.create_application()
        self.session.application = application
        application.Visible = self.config.excel_visible
        application.UserControl = False

    def _create_workbook(self):
        # A new workbook replaces the handles of the previous one
        for name in ("range", "worksheet", "workbook"):
            handle = getattr(self.session, name)
            if handle is not None:
                self.session.clear(name)
                self.interop.release(handle)

        workbook = self.session.application.Workbooks.Add(self.interop.missing)
        self.session.workbook = workbook
        self.session.worksheet = self.interop.as_worksheet(workbook.ActiveSheet)

    def _write_header(self, document: Document):
        worksheet = self.session.worksheet

        for row, (label, value) in enumerate(header_block(document), start=1):
            worksheet.Cells[row, 1] = label
            worksheet.Cells[row, 2] = value

        worksheet.get_Range(*LABEL_BLOCK_RANGE).Borders.Weight = self.interop.border_medium

        titles = channel_titles(document)
        anchor = f"A{CHANNEL_HEADER_ROW}"
        header = self._select(
            worksheet.get_Range(anchor, anchor).get_Resize(self.interop.missing, len(titles))
        )
        header.Value2 = self.interop.to_array(titles)
        header.Font.Bold = True
        header.EntireColumn.AutoFit()
        header.Borders.Weight = self.interop.border_medium

        # Keep the title row visible while scrolling
        window = worksheet.Application.ActiveWindow
        window.SplitRow = CHANNEL_HEADER_ROW
        window.FreezePanes = True

    def _append_row(self, document: Document) -> int:
        application = self.session.application
        workbook = self.session.workbook
        worksheet = self.session.worksheet
        values = measuring_values(document)

        application.ScreenUpdating = False
        try:
            row = worksheet.UsedRange.Rows.Count + 1
            workbook.Activate()
            worksheet.Activate()

            cell = f"A{row}"
            timestamp = self._select(worksheet.get_Range(cell, cell))
            timestamp.Value2 = row_timestamp(document)

            if values:
                cell = f"B{row}"
                readings = self._select(
                    worksheet.get_Range(cell, cell).get_Resize(self.interop.missing, len(values))
                )
                readings.Value2 = self.interop.to_array(values, numeric=True)

            cell = f"A{row}"
            written = self._select(
                worksheet.get_Range(cell, cell).get_Resize(self.interop.missing, len(values) + 1)
            )
            written.EntireColumn.AutoFit()
            written.Borders.Weight = self.interop.border_thin
        finally:
            application.ScreenUpdating = True

        # Display and focus the new row
        workbook.Activate()
        worksheet.Activate()
        written.Activate()
        return row

    def _select(self, new_range):
        """Hold a new range handle, releasing the one it replaces."""
        previous = self.session.range
        self.session.range = new_range
        if previous is not None:
            self.interop.release(previous)
        return new_range

    def _before_release(self):
        # Give the user control of Excel's lifetime
        if self.session.application is not None:
            self.session.application.UserControl = True

    def _release(self, name: str, handle):
        self.interop.release(handle)
