"""Device actions: routes bound to handlers, with their hazards."""

from __future__ import annotations

import functools
import inspect
import re
from typing import Any, Callable, Iterable, Optional

from aiohttp import web

from ..actions import ActionError
from ..collection import Collection
from ..hazards import Hazard
from ..payloads import EmptyPayload, InfoPayload, SerialPayload
from ..route import Route, RouteHazards, RouteMode

_INPUT_SYMBOL = ":"
_NOT_IDENTIFIER = re.compile(r"[^0-9A-Za-z_]")
_PAYLOAD_TYPES = (EmptyPayload, SerialPayload, InfoPayload)

Handler = Callable[..., Any]


def payload_response(payload: Any) -> web.Response:
    """Turn a payload into a successful JSON response."""
    if not isinstance(payload, _PAYLOAD_TYPES):
        raise TypeError(f"{type(payload).__name__} is not a payload")
    return web.json_response(payload.to_dict(), status=200)


def error_response(error: ActionError) -> web.Response:
    """Turn an action error into an internal server error JSON response."""
    return web.json_response(error.to_dict(), status=500)


def _segment(segment: str) -> str:
    if segment.startswith(_INPUT_SYMBOL) and len(segment) > 1:
        name = _NOT_IDENTIFIER.sub("_", segment[1:])
        if name[0].isdigit():
            name = "_" + name
        return "{" + name + "}"
    return segment


def _server_path(prefix: str, path: str) -> str:
    full = f"{prefix}{path}"
    if not full:
        return "/"
    if not full.startswith("/"):
        full = "/" + full
    return "/".join(_segment(segment) for segment in full.split("/"))


def _endpoint(handler: Handler, leading: tuple) -> Callable[[web.Request], Any]:
    async def endpoint(request: web.Request) -> web.Response:
        try:
            result = handler(*leading, request)
            if inspect.isawaitable(result):
                result = await result
        except ActionError as error:
            return error_response(error)
        return payload_response(result)

    return endpoint


class DeviceAction:
    """A route of a device bound to its handler and its hazards."""

    def __init__(
        self,
        route_hazards: RouteHazards,
        endpoint: Optional[Callable[[web.Request], Any]] = None,
    ) -> None:
        self.route_hazards = route_hazards
        self._endpoint = endpoint

    @classmethod
    def stateful(
        cls, route_hazards: RouteHazards, handler: Handler, state: Any
    ) -> DeviceAction:
        """Create an action whose handler is called with the state and the request."""
        route_hazards.route.join_inputs(RouteMode.LINEAR, _INPUT_SYMBOL)
        return cls(route_hazards, _endpoint(handler, (state,)))

    @classmethod
    def stateless(cls, route_hazards: RouteHazards, handler: Handler) -> DeviceAction:
        """Create an action whose handler is called with the request only."""
        route_hazards.route.join_inputs(RouteMode.LINEAR, _INPUT_SYMBOL)
        return cls(route_hazards, _endpoint(handler, ()))

    @classmethod
    def empty(cls) -> DeviceAction:
        """Create a placeholder action without any route handler."""
        return cls(RouteHazards(Route.get("")))

    def miss_hazard(self, hazard: Hazard) -> bool:
        """Check whether the action does not define the given hazard."""
        return hazard not in self.route_hazards.hazards

    def miss_hazards(self, hazards: Iterable[Hazard]) -> bool:
        """Check whether the action does not define all the given hazards."""
        return not all(hazard in self.route_hazards.hazards for hazard in hazards)

    def hazards(self) -> Collection[Hazard]:
        """Return the hazards associated with the action."""
        return self.route_hazards.hazards

    def route_definitions(self, prefix: str = "") -> list[web.RouteDef]:
        """Return the server route definitions, nested under a prefix."""
        if self._endpoint is None:
            return []
        route = self.route_hazards.route
        method = route.kind().name
        return [web.route(method, _server_path(prefix, route.path()), self._endpoint)]

    def __repr__(self) -> str:
        return f"DeviceAction({self.route_hazards!r})"


class MandatoryAction:
    """A device action that a specific device must provide."""

    def __init__(self, device_action: DeviceAction, is_set: bool = False) -> None:
        self.device_action = device_action
        self.is_set = is_set

    @classmethod
    def empty(cls) -> MandatoryAction:
        """Create a mandatory action not yet provided."""
        return cls(DeviceAction.empty())

    def confirmed(self) -> MandatoryAction:
        """Return the same action marked as provided."""
        return type(self)(self.device_action, True)


def _checked(handler: Handler, payload_type: type) -> Handler:
    if not callable(handler):
        raise TypeError("an action handler must be callable")

    @functools.wraps(handler)
    async def checked(*args: Any) -> Any:
        result = handler(*args)
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, payload_type):
            raise TypeError(
                f"handler returned {type(result).__name__}, "
                f"expected {payload_type.__name__}"
            )
        return result

    return checked


def empty_stateful(route_hazards: RouteHazards, handler: Handler):
    """Create a stateful action factory returning an empty payload."""
    checked = _checked(handler, EmptyPayload)
    return lambda state: DeviceAction.stateful(route_hazards, checked, state)


def empty_stateless(route_hazards: RouteHazards, handler: Handler):
    """Create a stateless action factory returning an empty payload."""
    checked = _checked(handler, EmptyPayload)
    return lambda _state: DeviceAction.stateless(route_hazards, checked)


def mandatory_empty_stateful(route_hazards: RouteHazards, handler: Handler):
    """Create a mandatory stateful action factory returning an empty payload."""
    checked = _checked(handler, EmptyPayload)
    return lambda state: MandatoryAction(
        DeviceAction.stateful(route_hazards, checked, state)
    )


def mandatory_empty_stateless(route_hazards: RouteHazards, handler: Handler):
    """Create a mandatory stateless action factory returning an empty payload."""
    checked = _checked(handler, EmptyPayload)
    return lambda _state: MandatoryAction(DeviceAction.stateless(route_hazards, checked))


def serial_stateful(route_hazards: RouteHazards, handler: Handler):
    """Create a stateful action factory returning a serial payload."""
    checked = _checked(handler, SerialPayload)
    return lambda state: DeviceAction.stateful(route_hazards, checked, state)


def serial_stateless(route_hazards: RouteHazards, handler: Handler):
    """Create a stateless action factory returning a serial payload."""
    checked = _checked(handler, SerialPayload)
    return lambda _state: DeviceAction.stateless(route_hazards, checked)


def mandatory_serial_stateful(route_hazards: RouteHazards, handler: Handler):
    """Create a mandatory stateful action factory returning a serial payload."""
    checked = _checked(handler, SerialPayload)
    return lambda state: MandatoryAction(
        DeviceAction.stateful(route_hazards, checked, state)
    )


def mandatory_serial_stateless(route_hazards: RouteHazards, handler: Handler):
    """Create a mandatory stateless action factory returning a serial payload."""
    checked = _checked(handler, SerialPayload)
    return lambda _state: MandatoryAction(DeviceAction.stateless(route_hazards, checked))


def info_stateful(route_hazards: RouteHazards, handler: Handler):
    """Create a stateful informative action factory."""
    checked = _checked(handler, InfoPayload)
    return lambda state, _info: DeviceAction.stateful(route_hazards, checked, state)


def info_stateless(route_hazards: RouteHazards, handler: Handler):
    """Create a stateless informative action factory."""
    checked = _checked(handler, InfoPayload)
    return lambda _state, _info: DeviceAction.stateless(route_hazards, checked)