"""A smart home fridge."""

from __future__ import annotations

from typing import Any, Callable

from ..device import DeviceKind
from ..hazards import Hazard
from .actions import DeviceAction, MandatoryAction
from .device import Device
from .errors import WebError, WebErrorKind

FRIDGE_MAIN_ROUTE = "/fridge"

INCREASE_TEMPERATURE = (Hazard.ELECTRIC_ENERGY_CONSUMPTION, Hazard.SPOILED_FOOD)
DECREASE_TEMPERATURE = Hazard.ELECTRIC_ENERGY_CONSUMPTION

ALLOWED_HAZARDS = (Hazard.ELECTRIC_ENERGY_CONSUMPTION, Hazard.SPOILED_FOOD)


class Fridge:
    """A smart home fridge whose main route defaults to ``/fridge``.

    The increase-temperature action must be given first, then the
    decrease-temperature action; only afterwards can further actions be
    added and the device built.
    """

    def __init__(self, state: Any = None) -> None:
        self._device = Device(DeviceKind.FRIDGE, state).with_main_route(
            FRIDGE_MAIN_ROUTE
        )
        self._increase_temperature = MandatoryAction.empty()
        self._decrease_temperature = MandatoryAction.empty()
        self.allowed_hazards: tuple[Hazard, ...] = ALLOWED_HAZARDS

    @classmethod
    def with_state(cls, state: Any) -> Fridge:
        """Create a fridge holding a state."""
        return cls(state)

    def _require(self, increase: bool, decrease: bool, operation: str) -> None:
        current = (self._increase_temperature.is_set, self._decrease_temperature.is_set)
        if current != (increase, decrease):
            raise RuntimeError(
                f"`{operation}` is not allowed at this stage of the fridge"
            )

    def increase_temperature(
        self, increase_temperature: Callable[[Any], MandatoryAction]
    ) -> Fridge:
        """Set the mandatory increase-temperature action.

        It must carry both the electric energy consumption and the spoiled
        food hazards.
        """
        self._require(False, False, "increase_temperature")
        action = increase_temperature(self._device.state)
        if action.device_action.miss_hazards(INCREASE_TEMPERATURE):
            raise WebError(
                WebErrorKind.FRIDGE,
                "No electric energy consumption or spoiled food hazards "
                "for the `increase_temperature` route",
            )
        self._increase_temperature = action.confirmed()
        return self

    def decrease_temperature(
        self, decrease_temperature: Callable[[Any], MandatoryAction]
    ) -> Fridge:
        """Set the mandatory decrease-temperature action.

        It must carry the electric energy consumption hazard.
        """
        self._require(True, False, "decrease_temperature")
        action = decrease_temperature(self._device.state)
        if action.device_action.miss_hazard(DECREASE_TEMPERATURE):
            raise WebError(
                WebErrorKind.FRIDGE,
                "No electric energy consumption hazard for the "
                "`decrease_temperature` route",
            )
        self._decrease_temperature = action.confirmed()
        return self

    def with_main_route(self, main_route: str) -> Fridge:
        """Set a new main route."""
        self._require(True, True, "with_main_route")
        self._device.with_main_route(main_route)
        return self

    def add_action(self, fridge_action: Callable[[Any], DeviceAction]) -> Fridge:
        """Add an action whose hazards must all be allowed for a fridge."""
        self._require(True, True, "add_action")
        action = fridge_action(self._device.state)
        for hazard in action.hazards():
            if hazard not in self.allowed_hazards:
                raise WebError(
                    WebErrorKind.FRIDGE, f"{hazard} hazard is not allowed for fridge"
                )
        self._device.add_device_action(action)
        return self

    def add_info_action(
        self, fridge_info_action: Callable[[Any, Any], DeviceAction]
    ) -> Fridge:
        """Add an informative action."""
        self._require(True, True, "add_info_action")
        self._device.add_device_action(fridge_info_action(self._device.state, None))
        return self

    def into_device(self) -> Device:
        """Build the device, appending the mandatory actions."""
        self._require(True, True, "into_device")
        return self._device.add_device_action(
            self._increase_temperature.device_action
        ).add_device_action(self._decrease_temperature.device_action)