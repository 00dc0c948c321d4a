"""Payloads returned by device actions."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .device import DeviceInfo
from .errors import AscotError
from .strings import MiniString


class PayloadKind(enum.Enum):
    """Payload kinds."""

    EMPTY = "Empty"
    SERIAL = "Serial"
    INFO = "Info"
    STREAM = "Stream"


class EmptyPayload:
    """A payload holding only a short description; too long texts become empty."""

    def __init__(self, description: str) -> None:
        try:
            self.description = MiniString(description)
        except AscotError:
            self.description = MiniString()

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {"description": str(self.description)}


class SerialPayload:
    """A payload carrying serializable data, flattened when serialized."""

    def __init__(self, data: Any) -> None:
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        """Serialize the data into a dictionary."""
        data = self.data
        if hasattr(data, "to_dict"):
            return dict(data.to_dict())
        if dataclasses.is_dataclass(data) and not isinstance(data, type):
            return dataclasses.asdict(data)
        if isinstance(data, Mapping):
            return dict(data)
        raise TypeError(f"cannot flatten {type(data).__name__} into a payload")


class InfoPayload:
    """A payload carrying information on a device."""

    def __init__(self, data: DeviceInfo) -> None:
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        """Serialize the device information into a dictionary."""
        return self.data.to_dict()


@dataclass(frozen=True)
class StreamPayload:
    """A payload describing a stream of bytes."""

    stream_type: tuple[str, str]
    headers: Optional[tuple[tuple[str, str], ...]] = None