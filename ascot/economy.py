"""Economic information of a device: costs and return on investments."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from .collection import OutputCollection
from .energy import EnergyClass

_MINIMUM_ROI_YEARS = 1
_MAXIMUM_ROI_YEARS = 30


class CostTimespan(enum.Enum):
    """Timespan for a cost computation, valued by its serialized name."""

    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"

    def __str__(self) -> str:
        return self.value.lower()


@dataclass(frozen=True)
class Cost:
    """A device cost: negative amounts are savings, positive are expenses."""

    usd_currency: int
    timespan: CostTimespan

    def __str__(self) -> str:
        verb = "saves" if self.usd_currency < 0 else "spends"
        return (
            f"The device {verb} {abs(self.usd_currency)} USD "
            f"in a {self.timespan} timespan"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {"usd": self.usd_currency, "timespan": self.timespan.value}


@dataclass(frozen=True)
class Roi:
    """Return on investments over a number of years for an energy class.

    A value of 0 years becomes 1, values above 30 become 30.
    """

    years: int
    energy_class: EnergyClass

    def __post_init__(self) -> None:
        if self.years < 0:
            raise ValueError("years must not be negative")
        years = max(_MINIMUM_ROI_YEARS, min(_MAXIMUM_ROI_YEARS, self.years))
        object.__setattr__(self, "years", years)

    def __str__(self) -> str:
        unit = "years" if self.years > 1 else "year"
        return (
            "The device has a Return on Investments (Roi) for the "
            f"`{self.energy_class}` energy efficiency class over a timespan "
            f"of {self.years} {unit}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {"years": self.years, "energy-class": str(self.energy_class)}


@dataclass
class Economy:
    """Economy data for a device."""

    costs: Optional[OutputCollection[Cost]] = None
    roi: Optional[OutputCollection[Roi]] = None

    def is_empty(self) -> bool:
        """Check whether no economy information is present."""
        return self.costs is None and self.roi is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary, leaving out missing sections."""
        data: dict[str, Any] = {}
        if self.costs is not None:
            data["costs"] = self.costs.to_list()
        if self.roi is not None:
            data["roi"] = self.roi.to_list()
        return data