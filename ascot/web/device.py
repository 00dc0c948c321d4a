"""A general device exposing its actions through a web server."""

from __future__ import annotations

import logging
from typing import Any, Callable

from aiohttp import web

from ..collection import Collection, OutputCollection
from ..device import DeviceData, DeviceKind
from ..route import RouteConfig, RouteHazards
from .actions import DeviceAction

logger = logging.getLogger(__name__)

DEFAULT_MAIN_ROUTE = "/device"

ActionFactory = Callable[[Any], DeviceAction]
InfoActionFactory = Callable[[Any, Any], DeviceAction]


class Device:
    """A device with a kind, a main route, a state and its actions."""

    def __init__(self, kind: DeviceKind = DeviceKind.UNKNOWN, state: Any = None) -> None:
        self.kind = kind
        self.state = state
        self.main_route = DEFAULT_MAIN_ROUTE
        self._routes_hazards: Collection[RouteHazards] = Collection()
        self._actions: list[DeviceAction] = []

    @classmethod
    def with_state(cls, state: Any) -> Device:
        """Create an unknown device holding a state."""
        return cls(DeviceKind.UNKNOWN, state)

    def with_main_route(self, main_route: str) -> Device:
        """Set a new main route."""
        self.main_route = main_route
        return self

    def add_action(self, device_action: ActionFactory) -> Device:
        """Add an action built from the device state."""
        return self.add_device_action(device_action(self.state))

    def add_info_action(self, device_info_action: InfoActionFactory) -> Device:
        """Add an informative action built from the device state."""
        return self.add_device_action(device_info_action(self.state, None))

    def add_device_action(self, device_action: DeviceAction) -> Device:
        """Add an already built action."""
        self._actions.append(device_action)
        self._routes_hazards.add(device_action.route_hazards)
        return self

    @property
    def routes_hazards(self) -> tuple[RouteHazards, ...]:
        """All routes of the device with their hazards."""
        return tuple(self._routes_hazards)

    def serialize_data(self) -> DeviceData:
        """Build the serializable description of the device."""
        route_configs: OutputCollection[RouteConfig] = OutputCollection()
        for route_hazards in self._routes_hazards:
            logger.info(
                'Device route: [%s, "%s%s"]',
                route_hazards.route.kind(),
                self.main_route,
                route_hazards.route.path(),
            )
            route_configs.add(route_hazards.serialize_data())
        return DeviceData(self.kind, self.main_route, route_configs)

    def route_definitions(self) -> list[web.RouteDef]:
        """Return the server route definitions nested under the main route."""
        return [
            definition
            for action in self._actions
            for definition in action.route_definitions(self.main_route)
        ]

    def __repr__(self) -> str:
        return f"Device({self.kind}, {self.main_route!r})"