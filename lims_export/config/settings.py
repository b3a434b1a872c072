# config/settings.py
"""Configuration management for the LIMS spreadsheet export."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

BACKENDS = ("excel", "workbook", "csv")


class Config:
    """Centralized configuration management."""

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()
        self._validate_environment()

    @property
    def backend(self) -> str:
        """Name of the export backend (excel, workbook or csv)."""
        return os.getenv("EXPORT_BACKEND", "excel").strip().lower()

    @property
    def base_dir(self) -> str:
        """Base directory path."""
        return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    @property
    def output_dir(self) -> str:
        """Output directory for exported files."""
        return os.getenv(
            "EXPORT_OUTPUT_DIR", os.path.join(self.base_dir, "exported_data")
        )

    @property
    def excel_dir(self) -> str:
        """Workbook output directory."""
        return os.path.join(self.output_dir, "excel")

    @property
    def csv_dir(self) -> str:
        """CSV output directory."""
        return os.path.join(self.output_dir, "csv")

    @property
    def file_prefix(self) -> str:
        """Prefix of exported file names."""
        return os.getenv("EXPORT_FILE_PREFIX", "measuring_data")

    @property
    def excel_visible(self) -> bool:
        """Whether the Excel window is shown to the user."""
        return os.getenv("EXCEL_VISIBLE", "true").strip().lower() in ("1", "true", "yes", "on")

    @property
    def interop_assembly(self) -> str:
        """Excel primary interop assembly name or path."""
        return os.getenv("EXCEL_INTEROP_ASSEMBLY", "Microsoft.Office.Interop.Excel")

    @property
    def log_level(self) -> int:
        """Logging level."""
        return logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())

    @property
    def log_file(self) -> Optional[str]:
        """Optional log file path."""
        return os.getenv("LOG_FILE") or None

    def _validate_environment(self):
        """Validate environment variables."""
        if self.backend not in BACKENDS:
            raise RuntimeError(
                f"Unsupported EXPORT_BACKEND '{self.backend}', "
                f"expected one of: {', '.join(BACKENDS)}"
            )

        level = self.log_level
        if not isinstance(level, int):
            raise RuntimeError(f"Invalid LOG_LEVEL: {os.getenv('LOG_LEVEL')}")
