"""Utility modules for the LIMS spreadsheet export."""

from .date_manager import DateManager
from .progress_tracker import ProgressTracker

__all__ = [
    'DateManager',
    'ProgressTracker',
]
