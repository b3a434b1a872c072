"""Spreadsheet export backends."""

from typing import Optional

from lims_export.config import Config
from lims_export.utils.progress_tracker import ProgressTracker

from .base import BaseExporter, FileExporter, ShutdownError
from .csv_exporter import CSVExporter
from .excel_exporter import ExcelExporter
from .workbook_exporter import WorkbookExporter


def create_exporter(config: Config, tracker: Optional[ProgressTracker] = None) -> BaseExporter:
    """Build the exporter selected by ``config.backend``."""
    if config.backend == "excel":
        return ExcelExporter(config, tracker=tracker)
    if config.backend == "workbook":
        return WorkbookExporter(config.excel_dir, config.file_prefix, tracker=tracker)
    if config.backend == "csv":
        return CSVExporter(config.csv_dir, config.file_prefix, tracker=tracker)
    raise ValueError(f"Unknown export backend: {config.backend}")


__all__ = [
    "BaseExporter",
    "FileExporter",
    "ShutdownError",
    "CSVExporter",
    "ExcelExporter",
    "WorkbookExporter",
    "create_exporter",
]
