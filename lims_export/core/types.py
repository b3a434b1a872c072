"""Shared type definitions to avoid circular imports."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ExportStage(Enum):
    """Exporter operations, used to tag results."""
    START = "start"
    CREATE_WORKBOOK = "create_workbook"
    WRITE_HEADER = "write_header"
    APPEND_ROW = "append_row"
    SHUTDOWN = "shutdown"


class SessionState(Enum):
    """Lifecycle of an export session."""
    NOT_STARTED = "not_started"
    STARTED = "started"
    WORKBOOK_OPEN = "workbook_open"
    HEADER_WRITTEN = "header_written"
    DISPOSED = "disposed"


@dataclass
class ExportResult:
    """Result of a single exporter operation."""
    stage: ExportStage
    success: bool = True
    error_message: Optional[str] = None
    errors: List[str] = field(default_factory=list)
    row: Optional[int] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def failed(cls, stage: ExportStage, error_message: str, errors: Optional[List[str]] = None) -> "ExportResult":
        return cls(
            stage=stage,
            success=False,
            error_message=error_message,
            errors=list(errors) if errors else [error_message],
        )
