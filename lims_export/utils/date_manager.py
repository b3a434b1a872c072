# utils/date_manager.py
"""Timestamp conversion and formatting utilities."""

from datetime import datetime


class DateManager:
    """Formats measuring timestamps for spreadsheet rows and file names."""

    @staticmethod
    def to_local(moment: datetime) -> datetime:
        """
        Convert a timestamp to local time.

        Args:
            moment: Aware datetime, or naive datetime already in local time

        Returns:
            Naive datetime in local time
        """
        if moment.tzinfo is None:
            return moment
        return moment.astimezone().replace(tzinfo=None)

    @staticmethod
    def format_short_date(moment: datetime) -> str:
        """
        Format date like "3/7/2025" (no zero padding).

        Args:
            moment: Datetime to format

        Returns:
            Formatted date string
        """
        return f"{moment.month}/{moment.day}/{moment.year}"

    @staticmethod
    def format_long_time(moment: datetime) -> str:
        """
        Format time like "1:05:09 PM" (12-hour clock).

        Args:
            moment: Datetime to format

        Returns:
            Formatted time string
        """
        hour = moment.hour % 12 or 12
        suffix = "AM" if moment.hour < 12 else "PM"
        return f"{hour}:{moment.minute:02d}:{moment.second:02d} {suffix}"

    @classmethod
    def format_row_timestamp(cls, moment: datetime) -> str:
        """
        Format a local timestamp for the first column of a data row.

        Args:
            moment: Local datetime

        Returns:
            String like "3/7/2025 1:05:09 PM.042"
        """
        millisecond = moment.microsecond // 1000
        return (
            f"{cls.format_short_date(moment)} "
            f"{cls.format_long_time(moment)}.{millisecond:03d}"
        )

    @staticmethod
    def format_filename_date(moment: datetime) -> str:
        """
        Format a datetime for file names.

        Args:
            moment: Datetime to format

        Returns:
            Formatted string like "2025_03_07_130509"
        """
        return moment.strftime("%Y_%m_%d_%H%M%S")
