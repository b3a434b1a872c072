# core/document.py
"""LIMS document snapshot consumed by the exporters."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from lims_export.utils.date_manager import DateManager


class DocumentError(ValueError):
    """Raised when a document mapping cannot be decoded."""


def _require(data: Dict[str, Any], key: str, path: str) -> Any:
    """Fetch a required key, naming the full path when it is missing."""
    if not isinstance(data, dict) or key not in data:
        raise DocumentError(f"Missing document field: {path}{key}")
    return data[key]


@dataclass(frozen=True)
class Device:
    id: str


@dataclass(frozen=True)
class Line:
    name: str


@dataclass(frozen=True)
class ProductType:
    name: str


@dataclass(frozen=True)
class Product:
    name: str
    product_type: ProductType


@dataclass(frozen=True)
class ActiveProduct:
    product: Product


@dataclass(frozen=True)
class Summary:
    """Device, line and product the measurement belongs to."""
    device: Device
    line: Line
    active_product: ActiveProduct


@dataclass(frozen=True)
class Unit:
    name: str


@dataclass(frozen=True)
class MeasuringValue:
    value: Optional[float] = None


@dataclass(frozen=True)
class Channel:
    """A named measurement stream and its reading at the current sample."""
    name: str
    unit: Unit
    measuring_value: MeasuringValue = field(default_factory=MeasuringValue)


@dataclass(frozen=True)
class Timestamp:
    """
    Sample instant as decoded from the document.

    Aware values are converted to local time by ``local``; naive values
    are already local and pass through unchanged.
    """
    instant: datetime

    @property
    def local(self) -> datetime:
        return DateManager.to_local(self.instant)


@dataclass(frozen=True)
class MeasuringData:
    timestamp: Timestamp
    channels: List[Channel] = field(default_factory=list)


@dataclass(frozen=True)
class Document:
    """Snapshot of one measuring sample of a device."""
    summary: Summary
    measuring_data: MeasuringData

    @property
    def channels(self) -> List[Channel]:
        return self.measuring_data.channels

    def describe(self) -> str:
        """Short description used in log messages."""
        return (
            f"Device: '{self.summary.device.id}' "
            f"Line: '{self.summary.line.name}' "
            f"Product: '{self.summary.active_product.product.name}'"
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Document":
        """
        Create a document from its JSON mapping.

        Args:
            data: Decoded JSON object

        Returns:
            Document instance

        Raises:
            DocumentError: If a required field is missing or malformed
        """
        summary = _require(data, "summary", "")
        device = _require(summary, "device", "summary.")
        line = _require(summary, "line", "summary.")
        active = _require(summary, "active_product", "summary.")
        product = _require(active, "product", "summary.active_product.")
        product_type = _require(product, "product_type", "summary.active_product.product.")

        measuring = _require(data, "measuring_data", "")
        raw_timestamp = _require(measuring, "timestamp", "measuring_data.")
        raw_channels = measuring.get("channels", [])
        if not isinstance(raw_channels, list):
            raise DocumentError("measuring_data.channels must be a list")

        channels = []
        for index, raw in enumerate(raw_channels):
            path = f"measuring_data.channels[{index}]."
            unit = _require(raw, "unit", path)
            measuring_value = raw.get("measuring_value") or {}
            if not isinstance(measuring_value, dict):
                raise DocumentError(f"{path}measuring_value must be an object")
            raw_value = measuring_value.get("value")
            channels.append(
                Channel(
                    name=str(_require(raw, "name", path)),
                    unit=Unit(name=str(_require(unit, "name", path + "unit."))),
                    measuring_value=MeasuringValue(
                        value=None if raw_value is None else _to_float(raw_value, path)
                    ),
                )
            )

        return cls(
            summary=Summary(
                device=Device(id=str(_require(device, "id", "summary.device."))),
                line=Line(name=str(_require(line, "name", "summary.line."))),
                active_product=ActiveProduct(
                    product=Product(
                        name=str(_require(product, "name", "summary.active_product.product.")),
                        product_type=ProductType(
                            name=str(_require(
                                product_type, "name",
                                "summary.active_product.product.product_type."
                            ))
                        ),
                    )
                ),
            ),
            measuring_data=MeasuringData(
                timestamp=Timestamp(instant=_parse_timestamp(raw_timestamp)),
                channels=channels,
            ),
        )


def _to_float(value: Any, path: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise DocumentError(f"Invalid measuring value at {path}measuring_value: {value!r}") from e


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise DocumentError(f"Invalid timestamp: {value!r}")

    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise DocumentError(f"Invalid timestamp: {value!r}") from e
