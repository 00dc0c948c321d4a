"""Energy information of a device."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from .collection import OutputCollection


class EnergyClass(enum.Enum):
    """Energy efficiency class."""

    A_PLUS_PLUS_PLUS = "A+++"
    A_PLUS_PLUS = "A++"
    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    def __str__(self) -> str:
        return self.value


def _clamp_percentage(percentage: int) -> int:
    return max(-100, min(100, percentage))


@dataclass(frozen=True)
class EnergyEfficiency:
    """Energy saved (negative) or consumed (positive) for an energy class.

    The percentage is clamped to the [-100, 100] interval.
    """

    percentage: int
    energy_class: EnergyClass

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", _clamp_percentage(self.percentage))

    def decimal_percentage(self) -> float:
        """Return the percentage as a decimal value."""
        return self.percentage / 100.0

    def __str__(self) -> str:
        verb = "saves" if self.percentage < 0 else "consumes"
        return (
            f"The device {verb} a {abs(self.percentage)}% of energy "
            f'for the "{self.energy_class}" efficiency class'
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {"percentage": self.percentage, "energy-class": str(self.energy_class)}


@dataclass(frozen=True)
class CarbonFootprint:
    """Greenhouse gases removed (negative) or added (positive) for an energy class.

    The percentage is clamped to the [-100, 100] interval.
    """

    percentage: int
    energy_class: EnergyClass

    def __post_init__(self) -> None:
        object.__setattr__(self, "percentage", _clamp_percentage(self.percentage))

    def decimal_percentage(self) -> float:
        """Return the percentage as a decimal value."""
        return self.percentage / 100.0

    def __str__(self) -> str:
        verb = "removes from" if self.percentage < 0 else "adds to"
        return (
            f"The device {verb} the atmosphere a {abs(self.percentage)}% of "
            f'greenhouse gases for the "{self.energy_class}" efficiency class'
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {"percentage": self.percentage, "energy-class": str(self.energy_class)}


@dataclass
class WaterUseEfficiency:
    """Water-use efficiency metrics."""

    gpp: Optional[float] = None
    penman_monteith_equation: Optional[float] = None
    wer: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary; missing metrics become None."""
        return {
            "gross-primary-productivity": self.gpp,
            "penman-monteith-equation": self.penman_monteith_equation,
            "water-equivalent-ratio": self.wer,
        }


@dataclass
class Energy:
    """Energy information of a device."""

    energy_efficiencies: Optional[OutputCollection[EnergyEfficiency]] = None
    carbon_footprints: Optional[OutputCollection[CarbonFootprint]] = None
    water_use_efficiency: Optional[WaterUseEfficiency] = None

    def is_empty(self) -> bool:
        """Check whether no energy information is present."""
        return (
            self.energy_efficiencies is None
            and self.carbon_footprints is None
            and self.water_use_efficiency is None
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary, leaving out missing sections."""
        data: dict[str, Any] = {}
        if self.energy_efficiencies is not None:
            data["energy-efficiencies"] = self.energy_efficiencies.to_list()
        if self.carbon_footprints is not None:
            data["carbon-footprints"] = self.carbon_footprints.to_list()
        if self.water_use_efficiency is not None:
            data["water-use-efficiency"] = self.water_use_efficiency.to_dict()
        return data