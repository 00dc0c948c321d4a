"""Device description data."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from .collection import OutputCollection
from .economy import Economy
from .energy import Energy
from .route import RouteConfig


class DeviceKind(enum.Enum):
    """A device kind, valued by its serialized name."""

    UNKNOWN = "Unknown"
    LIGHT = "Light"
    FRIDGE = "Fridge"
    CAMERA = "Camera"


@dataclass
class DeviceInfo:
    """Energy and economy information of a device."""

    energy: Energy = field(default_factory=Energy)
    economy: Economy = field(default_factory=Economy)

    def is_empty(self) -> bool:
        """Check whether no information is present."""
        return self.energy.is_empty() and self.economy.is_empty()

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary, leaving out empty sections."""
        data: dict[str, Any] = {}
        if not self.energy.is_empty():
            data["energy"] = self.energy.to_dict()
        if not self.economy.is_empty():
            data["economy"] = self.economy.to_dict()
        return data


@dataclass
class DeviceData:
    """Serializable description of a device and its routes."""

    kind: DeviceKind
    main_route: str
    route_configs: OutputCollection[RouteConfig] = field(default_factory=OutputCollection)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {
            "kind": self.kind.value,
            "main route": self.main_route,
            "route_configs": self.route_configs.to_list(),
        }