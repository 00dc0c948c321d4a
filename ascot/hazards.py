"""Hazards that the execution of a device task may cause."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional


class Hazard(enum.Enum):
    """All possible hazards for a device task, valued by their identifier."""

    AIR_POISONING = 0
    ASPHYXIA = 1
    AUDIO_VIDEO_RECORD_AND_STORE = 2
    AUDIO_VIDEO_STREAM = 3
    ELECTRIC_ENERGY_CONSUMPTION = 4
    EXPLOSION = 5
    FIRE_HAZARD = 6
    GAS_CONSUMPTION = 7
    LOG_ENERGY_CONSUMPTION = 8
    LOG_USAGE_TIME = 9
    PAY_SUBSCRIPTION_FEE = 10
    POWER_OUTAGE = 11
    POWER_SURGE = 12
    RECORD_ISSUED_COMMANDS = 13
    RECORD_USER_PREFERENCES = 14
    SPEND_MONEY = 15
    SPOILED_FOOD = 16
    TAKE_DEVICE_SCREENSHOTS = 17
    TAKE_PICTURES = 18
    UNAUTHORISED_PHYSICAL_ACCESS = 19
    WATER_CONSUMPTION = 20
    WATER_FLOODING = 21

    def id(self) -> int:
        """Return the hazard identifier."""
        return self.value

    def title(self) -> str:
        """Return the hazard name."""
        return _HAZARD_DETAILS[self][0]

    def description(self) -> str:
        """Return the hazard description."""
        return _HAZARD_DETAILS[self][1]

    def category(self) -> Category:
        """Return the single category the hazard belongs to."""
        return _HAZARD_DETAILS[self][2]

    @classmethod
    def from_id(cls, hazard_id: int) -> Optional[Hazard]:
        """Return the hazard with the given identifier, or None if unknown."""
        try:
            return cls(hazard_id)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.title()


class Category(enum.Enum):
    """Hazard categories."""

    FINANCIAL = "Financial"
    PRIVACY = "Privacy"
    SAFETY = "Safety"

    def title(self) -> str:
        """Return the category name."""
        return self.value

    def description(self) -> str:
        """Return the category description."""
        return _CATEGORY_DESCRIPTIONS[self]

    def hazards(self) -> tuple[Hazard, ...]:
        """Return all hazards belonging to this category."""
        return tuple(hazard for hazard in Hazard if hazard.category() is self)

    def __str__(self) -> str:
        return self.title()


_CATEGORY_DESCRIPTIONS = {
    Category.FINANCIAL: "Category which includes all the financial-related hazards.",
    Category.PRIVACY: "Category which includes all the privacy-related hazards.",
    Category.SAFETY: "Category which includes all the safety-related hazards.",
}

_HAZARD_DETAILS: dict[Hazard, tuple[str, str, Category]] = {
    Hazard.AIR_POISONING: (
        "Air Poisoning",
        "The execution may release toxic gases.",
        Category.SAFETY,
    ),
    Hazard.ASPHYXIA: (
        "Asphyxia",
        "The execution may cause oxygen deficiency by gaseous substances.",
        Category.SAFETY,
    ),
    Hazard.AUDIO_VIDEO_RECORD_AND_STORE: (
        "Audio Video Record And Store",
        "The execution authorises the app to record and save a video with "
        "audio on persistent storage.",
        Category.PRIVACY,
    ),
    Hazard.AUDIO_VIDEO_STREAM: (
        "Audio Video Stream",
        "The execution authorises the app to obtain a video stream with audio.",
        Category.PRIVACY,
    ),
    Hazard.ELECTRIC_ENERGY_CONSUMPTION: (
        "Electric Energy Consumption",
        "The execution enables a device that consumes electricity.",
        Category.FINANCIAL,
    ),
    Hazard.EXPLOSION: (
        "Explosion",
        "The execution may cause an explosion.",
        Category.SAFETY,
    ),
    Hazard.FIRE_HAZARD: (
        "Fire Hazard",
        "The execution may cause fire.",
        Category.SAFETY,
    ),
    Hazard.GAS_CONSUMPTION: (
        "Gas Consumption",
        "The execution enables a device that consumes gas.",
        Category.FINANCIAL,
    ),
    Hazard.LOG_ENERGY_CONSUMPTION: (
        "Log Energy Consumption",
        "The execution authorises the app to get and save information about "
        "the app's energy impact on the device the app runs on.",
        Category.PRIVACY,
    ),
    Hazard.LOG_USAGE_TIME: (
        "Log Usage Time",
        "The execution authorises the app to get and save information about "
        "the app's duration of use.",
        Category.PRIVACY,
    ),
    Hazard.PAY_SUBSCRIPTION_FEE: (
        "Pay Subscription Fee",
        "The execution authorises the app to use payment information and "
        "make a periodic payment.",
        Category.FINANCIAL,
    ),
    Hazard.POWER_OUTAGE: (
        "Power Outage",
        "The execution may cause an interruption in the supply of electricity.",
        Category.SAFETY,
    ),
    Hazard.POWER_SURGE: (
        "Power Surge",
        "The execution may lead to exposure to high voltages.",
        Category.SAFETY,
    ),
    Hazard.RECORD_ISSUED_COMMANDS: (
        "Record Issued Commands",
        "The execution authorises the app to get and save user inputs.",
        Category.PRIVACY,
    ),
    Hazard.RECORD_USER_PREFERENCES: (
        "Record User Preferences",
        "The execution authorises the app to get and save information about "
        "the user's preferences.",
        Category.PRIVACY,
    ),
    Hazard.SPEND_MONEY: (
        "Spend Money",
        "The execution authorises the app to use payment information and "
        "make a payment transaction.",
        Category.FINANCIAL,
    ),
    Hazard.SPOILED_FOOD: (
        "Spoiled Food",
        "The execution may lead to rotten food.",
        Category.SAFETY,
    ),
    Hazard.TAKE_DEVICE_SCREENSHOTS: (
        "Take Device Screenshots",
        "The execution authorises the app to read the display output and "
        "take screenshots of it.",
        Category.PRIVACY,
    ),
    Hazard.TAKE_PICTURES: (
        "Take Pictures",
        "The execution authorises the app to use a camera and take photos.",
        Category.PRIVACY,
    ),
    Hazard.UNAUTHORISED_PHYSICAL_ACCESS: (
        "Unauthorised Physical Access",
        "The execution disables a protection mechanism and unauthorised "
        "individuals may physically enter home.",
        Category.SAFETY,
    ),
    Hazard.WATER_CONSUMPTION: (
        "Water Consumption",
        "The execution enables a device that consumes water.",
        Category.FINANCIAL,
    ),
    Hazard.WATER_FLOODING: (
        "Water Flooding",
        "The execution allows water usage which may lead to flood.",
        Category.SAFETY,
    ),
}


@dataclass(frozen=True, eq=False)
class CategoryData:
    """Serializable hazard category; identity is given by its name."""

    name: str
    description: str

    @classmethod
    def from_hazard(cls, hazard: Hazard) -> CategoryData:
        """Build the category data of a hazard."""
        category = hazard.category()
        return cls(category.title(), category.description())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CategoryData):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True, eq=False)
class HazardData:
    """Serializable hazard; identity is given by its identifier."""

    id: int
    name: str
    description: str
    category: CategoryData

    @classmethod
    def from_hazard(cls, hazard: Hazard) -> HazardData:
        """Build the data of a hazard."""
        return cls(
            hazard.id(),
            hazard.title(),
            hazard.description(),
            CategoryData.from_hazard(hazard),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HazardData):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.to_dict(),
        }