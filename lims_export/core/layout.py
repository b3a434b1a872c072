# core/layout.py
"""Fixed sheet layout shared by every export backend."""

from typing import List, Tuple

from lims_export.utils.date_manager import DateManager
from .document import Document

TIMESTAMP_TITLE = "Timestamp"

# Label block occupies A1:B4, channel titles go into row 6
LABEL_BLOCK_RANGE = ("A1", "B4")
CHANNEL_HEADER_ROW = 6
FIRST_VALUE_COLUMN = 2


def header_block(document: Document) -> List[Tuple[str, str]]:
    """
    Build the label/value pairs of the summary block.

    Args:
        document: Document snapshot

    Returns:
        Four (label, value) pairs in row order
    """
    product = document.summary.active_product.product
    return [
        ("Device Name:", document.summary.device.id),
        ("Line Name:", document.summary.line.name),
        ("Product Type:", product.product_type.name),
        ("Product Name:", product.name),
    ]


def channel_titles(document: Document) -> List[str]:
    """
    Build the column titles of the data table.

    Args:
        document: Document snapshot

    Returns:
        "Timestamp" followed by "<name> [<unit>]" per channel
    """
    titles = [TIMESTAMP_TITLE]
    for channel in document.channels:
        titles.append(f"{channel.name} [{channel.unit.name}]")
    return titles


def measuring_values(document: Document) -> List[float]:
    """Channel readings in channel order, absent readings as 0.0."""
    values = []
    for channel in document.channels:
        value = channel.measuring_value.value
        values.append(0.0 if value is None else float(value))
    return values


def row_timestamp(document: Document) -> str:
    """Formatted local timestamp for column A of a data row."""
    return DateManager.format_row_timestamp(document.measuring_data.timestamp.local)
