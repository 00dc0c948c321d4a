"""A smart home light."""

from __future__ import annotations

from typing import Any, Callable

from ..device import DeviceKind
from ..hazards import Hazard
from .actions import DeviceAction, MandatoryAction
from .device import Device
from .errors import WebError, WebErrorKind

LIGHT_MAIN_ROUTE = "/light"

TURN_LIGHT_ON = Hazard.FIRE_HAZARD

ALLOWED_HAZARDS = (Hazard.FIRE_HAZARD, Hazard.ELECTRIC_ENERGY_CONSUMPTION)


class Light:
    """A smart home light whose main route defaults to ``/light``.

    The turn-on action must be given first, then the turn-off action;
    only afterwards can further actions be added and the device built.
    """

    def __init__(self, state: Any = None) -> None:
        self._device = Device(DeviceKind.LIGHT, state).with_main_route(LIGHT_MAIN_ROUTE)
        self._turn_light_on = MandatoryAction.empty()
        self._turn_light_off = MandatoryAction.empty()
        self.allowed_hazards: tuple[Hazard, ...] = ALLOWED_HAZARDS

    @classmethod
    def with_state(cls, state: Any) -> Light:
        """Create a light holding a state."""
        return cls(state)

    def _require(self, on: bool, off: bool, operation: str) -> None:
        current = (self._turn_light_on.is_set, self._turn_light_off.is_set)
        if current != (on, off):
            raise RuntimeError(f"`{operation}` is not allowed at this stage of the light")

    def turn_light_on(
        self, turn_light_on: Callable[[Any], MandatoryAction]
    ) -> Light:
        """Set the mandatory turn-on action, which must carry a fire hazard."""
        self._require(False, False, "turn_light_on")
        action = turn_light_on(self._device.state)
        if action.device_action.miss_hazard(TURN_LIGHT_ON):
            raise WebError(
                WebErrorKind.LIGHT, "No fire hazard for the `turn_light_on` route"
            )
        self._turn_light_on = action.confirmed()
        return self

    def turn_light_off(
        self, turn_light_off: Callable[[Any], MandatoryAction]
    ) -> Light:
        """Set the mandatory turn-off action."""
        self._require(True, False, "turn_light_off")
        self._turn_light_off = turn_light_off(self._device.state).confirmed()
        return self

    def with_main_route(self, main_route: str) -> Light:
        """Set a new main route."""
        self._require(True, True, "with_main_route")
        self._device.with_main_route(main_route)
        return self

    def add_action(self, light_action: Callable[[Any], DeviceAction]) -> Light:
        """Add an action whose hazards must all be allowed for a light."""
        self._require(True, True, "add_action")
        action = light_action(self._device.state)
        for hazard in action.hazards():
            if hazard not in self.allowed_hazards:
                raise WebError(
                    WebErrorKind.LIGHT, f"{hazard} hazard is not allowed for light"
                )
        self._device.add_device_action(action)
        return self

    def add_info_action(
        self, light_info_action: Callable[[Any, Any], DeviceAction]
    ) -> Light:
        """Add an informative action."""
        self._require(True, True, "add_info_action")
        self._device.add_device_action(light_info_action(self._device.state, None))
        return self

    def into_device(self) -> Device:
        """Build the device, appending the mandatory actions."""
        self._require(True, True, "into_device")
        return self._device.add_device_action(
            self._turn_light_on.device_action
        ).add_device_action(self._turn_light_off.device_action)