# core/interop.py
"""Excel automation surface reached through pythonnet."""

from typing import Any, Sequence

from lims_export.config import Config


class ExcelInterop:
    """Loads the Excel interop assembly and wraps the .NET calls the exporter needs."""

    def __init__(self, config: Config):
        """
        Initialize interop wrapper.

        Args:
            config: Configuration instance
        """
        self.config = config
        self._loaded = False

    def load(self):
        """Load the Excel primary interop assembly."""
        if not self._loaded:
            import clr

            clr.AddReference(self.config.interop_assembly)
            self._loaded = True

    def create_application(self):
        """Launch a new Excel process and return its Application object."""
        self.load()
        from Microsoft.Office.Interop.Excel import ApplicationClass

        return ApplicationClass()

    @property
    def missing(self):
        """Value passed for omitted optional COM arguments."""
        from System.Reflection import Missing

        return Missing.Value

    @property
    def border_medium(self):
        from Microsoft.Office.Interop.Excel import XlBorderWeight

        return XlBorderWeight.xlMedium

    @property
    def border_thin(self):
        from Microsoft.Office.Interop.Excel import XlBorderWeight

        return XlBorderWeight.xlThin

    def to_array(self, values: Sequence[Any], numeric: bool = False):
        """
        Convert a Python sequence to a .NET array for Range.Value2.

        Args:
            values: Cell values in column order
            numeric: Build a Double[] instead of a String[]

        Returns:
            .NET array instance
        """
        from System import Array, Double, String

        if numeric:
            return Array[Double]([float(v) for v in values])
        return Array[String]([str(v) for v in values])

    def as_worksheet(self, sheet):
        """Cast ActiveSheet (a plain COM object) to the worksheet interface."""
        from Microsoft.Office.Interop.Excel import _Worksheet

        return _Worksheet(sheet)

    def release(self, handle):
        """Release a COM object reference."""
        from System.Runtime.InteropServices import Marshal

        Marshal.ReleaseComObject(handle)
