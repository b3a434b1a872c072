# core/session.py
"""Handles owned by one export run."""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from .types import SessionState


@dataclass
class ExportSession:
    """
    Application, workbook, worksheet and range handles of one export run.

    ``headers_written`` is reset by every new workbook and is consulted by
    the caller to decide whether the header goes in before the next row.
    """
    application: Optional[Any] = None
    workbook: Optional[Any] = None
    worksheet: Optional[Any] = None
    range: Optional[Any] = None
    target_path: Optional[str] = None
    headers_written: bool = False
    state: SessionState = SessionState.NOT_STARTED

    @property
    def started(self) -> bool:
        return self.state not in (SessionState.NOT_STARTED, SessionState.DISPOSED)

    @property
    def holds_handles(self) -> bool:
        return any(handle is not None for _, handle in self.release_order())

    def release_order(self) -> Iterator[Tuple[str, Any]]:
        """Yield handles in reverse acquisition order: range, worksheet, workbook, application."""
        yield "range", self.range
        yield "worksheet", self.worksheet
        yield "workbook", self.workbook
        yield "application", self.application

    def clear(self, name: str):
        """Drop the handle with the given name."""
        setattr(self, name, None)
