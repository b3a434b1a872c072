# core/__init__.py
"""Core export components."""

from .document import Document, DocumentError
from .document_source import load_documents
from .interop import ExcelInterop
from .session import ExportSession
from .types import ExportResult, ExportStage, SessionState

__all__ = [
    'Document',
    'DocumentError',
    'load_documents',
    'ExcelInterop',
    'ExportSession',
    'ExportResult',
    'ExportStage',
    'SessionState',
]
