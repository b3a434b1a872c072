"""
Pytest configuration and shared fixtures for the LIMS export tests.
"""
import io
import logging
from datetime import datetime
from typing import Optional, Sequence

import pytest
from rich.console import Console

from lims_export.core.document import (
    ActiveProduct,
    Channel,
    Device,
    Document,
    Line,
    MeasuringData,
    MeasuringValue,
    Product,
    ProductType,
    Summary,
    Timestamp,
    Unit,
)
from lims_export.logger.logger import Logger
from lims_export.utils.progress_tracker import ProgressTracker

LOGGER_NAME = "lims_export_tests"
MISSING = object()


class FakeComError(Exception):
    """Stands in for a COM exception raised by Excel."""


# ---------------------------------------------------------------------------
# Fake Excel automation surface
# ---------------------------------------------------------------------------

def _split_address(address: str):
    letters = "".join(c for c in address if c.isalpha())
    digits = "".join(c for c in address if c.isdigit())
    column = 0
    for letter in letters:
        column = column * 26 + (ord(letter.upper()) - ord("A") + 1)
    return int(digits), column


class FakeBorders:
    def __init__(self, owner: "FakeRange"):
        self._owner = owner
        self._weight = None

    @property
    def Weight(self):
        return self._weight

    @Weight.setter
    def Weight(self, value):
        self._weight = value
        self._owner.sheet.borders.append((self._owner.address, value))


class FakeFont:
    def __init__(self, owner: "FakeRange"):
        self._owner = owner

    @property
    def Bold(self):
        return self._owner.address in self._owner.sheet.bold

    @Bold.setter
    def Bold(self, value):
        if value:
            self._owner.sheet.bold.append(self._owner.address)


class FakeColumns:
    def __init__(self, owner: "FakeRange"):
        self._owner = owner

    def AutoFit(self):
        columns = tuple(range(self._owner.column, self._owner.column + self._owner.columns))
        self._owner.sheet.autofit.append(columns)


class FakeRange:
    kind = "range"

    def __init__(self, sheet: "FakeSheet", row: int, column: int, rows: int = 1, columns: int = 1):
        self.sheet = sheet
        self.row = row
        self.column = column
        self.rows = rows
        self.columns = columns
        self.Borders = FakeBorders(self)
        self.Font = FakeFont(self)
        self.EntireColumn = FakeColumns(self)

    @property
    def address(self):
        return (self.row, self.column, self.rows, self.columns)

    def get_Resize(self, rows, columns):
        rows = self.rows if rows is MISSING else rows
        return FakeRange(self.sheet, self.row, self.column, rows, columns)

    @property
    def Value2(self):
        return self.sheet.cells.get((self.row, self.column))

    @Value2.setter
    def Value2(self, value):
        if isinstance(value, (list, tuple)):
            if len(value) != self.columns:
                raise FakeComError("array size does not match range")
            for offset, item in enumerate(value):
                self.sheet.write(self.row, self.column + offset, item)
        else:
            self.sheet.write(self.row, self.column, value)

    def Activate(self):
        self.sheet.calls.append(("activate_range", self.address))


class FakeCells:
    def __init__(self, sheet: "FakeSheet"):
        self._sheet = sheet

    def __setitem__(self, key, value):
        row, column = key
        self._sheet.write(row, column, value)

    def __getitem__(self, key):
        row, column = key
        return FakeRange(self._sheet, row, column)


class FakeRows:
    def __init__(self, sheet: "FakeSheet"):
        self._sheet = sheet

    @property
    def Count(self):
        # Excel reports one used row for an empty sheet
        if not self._sheet.cells:
            return 1
        return max(row for row, _ in self._sheet.cells)


class FakeUsedRange:
    def __init__(self, sheet: "FakeSheet"):
        self.Rows = FakeRows(sheet)


class FakeSheet:
    kind = "worksheet"

    def __init__(self, application: "FakeApplication"):
        self.Application = application
        self.calls = application.calls
        self.cells = {}
        self.writes = []
        self.borders = []
        self.bold = []
        self.autofit = []
        self.Cells = FakeCells(self)
        self.fail_writes = False

    @property
    def UsedRange(self):
        return FakeUsedRange(self)

    def write(self, row: int, column: int, value):
        if self.fail_writes:
            raise FakeComError("Exception from HRESULT: 0x800A03EC")
        self.cells[(row, column)] = value
        self.writes.append((row, column, value))

    def get_Range(self, first: str, last: Optional[str] = None):
        row, column = _split_address(first)
        last_row, last_column = _split_address(last or first)
        return FakeRange(self, row, column, last_row - row + 1, last_column - column + 1)

    def Activate(self):
        self.calls.append(("activate_sheet",))

    def row_values(self, row: int):
        columns = sorted(column for r, column in self.cells if r == row)
        return [self.cells[(row, column)] for column in columns]


class FakeWorkbook:
    kind = "workbook"

    def __init__(self, application: "FakeApplication"):
        self.ActiveSheet = FakeSheet(application)
        self._calls = application.calls

    def Activate(self):
        self._calls.append(("activate_workbook",))


class FakeWorkbooks:
    def __init__(self, application: "FakeApplication"):
        self._application = application
        self.added = []

    def Add(self, template):
        if template is not MISSING:
            raise FakeComError("unexpected template argument")
        workbook = FakeWorkbook(self._application)
        self.added.append(workbook)
        return workbook


class FakeWindow:
    def __init__(self):
        self.SplitRow = 0
        self.FreezePanes = False


class FakeApplication:
    kind = "application"

    def __init__(self, fail_configure: bool = False):
        self.calls = []
        self.Visible = False
        self._user_control = True
        self._fail_configure = fail_configure
        self.screen_updating = []
        self.Workbooks = FakeWorkbooks(self)
        self.ActiveWindow = FakeWindow()

    @property
    def UserControl(self):
        return self._user_control

    @UserControl.setter
    def UserControl(self, value):
        if self._fail_configure and not value:
            raise FakeComError("Exception from HRESULT: 0x800AC472")
        self._user_control = value

    @property
    def ScreenUpdating(self):
        return self.screen_updating[-1] if self.screen_updating else True

    @ScreenUpdating.setter
    def ScreenUpdating(self, value):
        self.screen_updating.append(value)


class FakeInterop:
    """Replaces ExcelInterop: no assembly load, plain lists instead of .NET arrays."""

    missing = MISSING
    border_medium = "xlMedium"
    border_thin = "xlThin"

    def __init__(self):
        self.application = None
        self.released = []
        self.fail_release = set()
        self.fail_start = False
        self.fail_configure = False

    def create_application(self):
        if self.fail_start:
            raise FakeComError("Retrieving the COM class factory failed")
        self.application = FakeApplication(fail_configure=self.fail_configure)
        return self.application

    def to_array(self, values: Sequence, numeric: bool = False):
        return [float(v) for v in values] if numeric else [str(v) for v in values]

    def as_worksheet(self, sheet):
        return sheet

    def release(self, handle):
        self.released.append(handle.kind)
        if handle.kind in self.fail_release:
            raise FakeComError(f"cannot release {handle.kind}")


class RecordingTracker(ProgressTracker):
    """Tracker that records user-facing error messages instead of printing them."""

    def __init__(self):
        super().__init__(console=Console(file=io.StringIO(), force_terminal=False))
        self.messages = []

    def show_error_message(self, message: str):
        self.messages.append(message)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def test_logger():
    """Route exporter logging to a dedicated DEBUG logger per test."""
    Logger.reset()
    Logger.setup(name=LOGGER_NAME, level=logging.DEBUG)
    yield
    Logger.reset()


@pytest.fixture
def fake_interop():
    return FakeInterop()


@pytest.fixture
def tracker():
    return RecordingTracker()


def make_document(
        values: Sequence[Optional[float]] = (21.5, None, 3.25),
        timestamp: datetime = datetime(2025, 3, 7, 13, 5, 9, 42000),
        channels: Optional[Sequence[tuple]] = None
) -> Document:
    """Build a document with one channel per value."""
    if channels is None:
        channels = [("Temperature", "°C"), ("Moisture", "%"), ("Density", "g/cm³")][:len(values)]
    return Document(
        summary=Summary(
            device=Device(id="DEV-0042"),
            line=Line(name="Line 3"),
            active_product=ActiveProduct(
                product=Product(name="Gouda 48+", product_type=ProductType(name="Cheese"))
            ),
        ),
        measuring_data=MeasuringData(
            timestamp=Timestamp(instant=timestamp),
            channels=[
                Channel(name=name, unit=Unit(name=unit), measuring_value=MeasuringValue(value))
                for (name, unit), value in zip(channels, values)
            ],
        ),
    )


@pytest.fixture
def document():
    return make_document()


@pytest.fixture
def document_dict():
    return {
        "summary": {
            "device": {"id": "DEV-0042"},
            "line": {"name": "Line 3"},
            "active_product": {
                "product": {"name": "Gouda 48+", "product_type": {"name": "Cheese"}}
            },
        },
        "measuring_data": {
            "timestamp": "2025-03-07T13:05:09.042",
            "channels": [
                {"name": "Temperature", "unit": {"name": "°C"}, "measuring_value": {"value": 21.5}},
                {"name": "Moisture", "unit": {"name": "%"}, "measuring_value": {"value": None}},
            ],
        },
    }


def error_records(caplog):
    """Split ERROR records of the test logger into (failure messages, exception records)."""
    records = [r for r in caplog.records if r.name == LOGGER_NAME and r.levelno == logging.ERROR]
    failures = [r.getMessage() for r in records if r.exc_info is None]
    exceptions = [r for r in records if r.exc_info is not None]
    return failures, exceptions
