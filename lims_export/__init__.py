"""LIMS Export - measuring data export into spreadsheets."""

__version__ = "1.0.0"
__description__ = "Live export of LIMS measuring data into Excel, xlsx or CSV"

from .core.export_pipeline import ExportPipeline

__all__ = ['ExportPipeline']
