"""Server routes, their inputs and their hazards."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from .collection import MAXIMUM_ELEMENTS, Collection, OutputCollection
from .errors import AscotError
from .hazards import Hazard, HazardData
from .inputs import Input, InputData
from .strings import MiniString


class RouteMode(enum.Enum):
    """How route inputs are written into a route."""

    LINEAR = "linear"

    def _join_input(self, route: MiniString, text: str, symbol: Optional[str]) -> None:
        if self is RouteMode.LINEAR:
            route.push("/")
            if symbol is not None:
                route.push(symbol)
            route.push(text)


class RestKind(enum.Enum):
    """Kind of a REST API, valued by its serialized name."""

    GET = "Get"
    PUT = "Put"
    POST = "Post"
    DELETE = "Delete"

    def __str__(self) -> str:
        return self.name


@dataclass
class RouteData:
    """Serializable route data."""

    name: str
    description: Optional[str] = None
    stateless: bool = False
    inputs: OutputCollection[InputData] = field(default_factory=OutputCollection)

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary; inputs are left out when empty."""
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "stateless": self.stateless,
        }
        if not self.inputs.is_empty():
            data["inputs"] = self.inputs.to_list()
        return data


@dataclass(eq=False)
class RouteConfig:
    """A server route configuration; identity is its name and REST kind."""

    data: RouteData
    rest_kind: RestKind
    hazards: OutputCollection[HazardData] = field(default_factory=OutputCollection)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteConfig):
            return NotImplemented
        return self.data.name == other.data.name and self.rest_kind == other.rest_kind

    def __hash__(self) -> int:
        return hash((self.data.name, self.rest_kind))

    def to_dict(self) -> dict[str, Any]:
        """Serialize into a dictionary with the route data flattened."""
        data = self.data.to_dict()
        data["REST kind"] = self.rest_kind.value
        if not self.hazards.is_empty():
            data["hazards"] = self.hazards.to_list()
        return data


class Route:
    """A REST API which runs a task on a device when invoked."""

    def __init__(self, rest_kind: RestKind, route: str) -> None:
        self._route = route
        self._rest_kind = rest_kind
        self.description: Optional[str] = None
        self.stateless = False
        self._inputs: Collection[Input] = Collection()
        self._inputs_route = MiniString()

    @classmethod
    def get(cls, route: str) -> Route:
        """Create a GET route."""
        return cls(RestKind.GET, route)

    @classmethod
    def put(cls, route: str) -> Route:
        """Create a PUT route."""
        return cls(RestKind.PUT, route)

    @classmethod
    def post(cls, route: str) -> Route:
        """Create a POST route."""
        return cls(RestKind.POST, route)

    @classmethod
    def delete(cls, route: str) -> Route:
        """Create a DELETE route."""
        return cls(RestKind.DELETE, route)

    def with_description(self, description: str) -> Route:
        """Set the route description."""
        self.description = description
        return self

    def as_stateless(self) -> Route:
        """Mark the route as not modifying the device state."""
        self.stateless = True
        return self

    def input(self, item: Input) -> Route:
        """Add a single input."""
        self._inputs.add(item)
        return self

    def inputs(self, items: Iterable[Input]) -> Route:
        """Add several inputs, considering at most the maximum number of elements."""
        for position, item in enumerate(items):
            if position >= MAXIMUM_ELEMENTS:
                break
            self._inputs.add(item)
        return self

    @property
    def route_inputs(self) -> tuple[Input, ...]:
        """The inputs attached to the route."""
        return tuple(self._inputs)

    def join_inputs(self, route_mode: RouteMode, symbol: Optional[str] = None) -> None:
        """Write the inputs into the route, only for GET routes.

        The route stays unchanged for other kinds, when already joined,
        or when the joined route does not fit.
        """
        if self._rest_kind is not RestKind.GET or not self._inputs_route.is_empty():
            return
        try:
            self._inputs_route.push(self._route)
        except AscotError:
            return
        for item in self._inputs:
            try:
                route_mode._join_input(self._inputs_route, item.name, symbol)
            except AscotError:
                self._inputs_route = MiniString()
                break

    def path(self) -> str:
        """Return the route, with its inputs if they have been joined."""
        if self._inputs_route.is_empty():
            return self._route
        return str(self._inputs_route)

    def kind(self) -> RestKind:
        """Return the REST kind."""
        return self._rest_kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return self._route == other._route and self._rest_kind == other._rest_kind

    def __hash__(self) -> int:
        return hash((self._route, self._rest_kind))

    def __repr__(self) -> str:
        return f"Route({self._rest_kind}, {self._route!r})"


class RouteHazards:
    """A route with its associated hazards; identity is given by the route."""

    def __init__(self, route: Route, hazards: Optional[Collection[Hazard]] = None) -> None:
        self.route = route
        self.hazards: Collection[Hazard] = hazards if hazards is not None else Collection()

    @classmethod
    def no_hazards(cls, route: Route) -> RouteHazards:
        """Create a route without hazards."""
        return cls(route)

    @classmethod
    def single_hazard(cls, route: Route, hazard: Hazard) -> RouteHazards:
        """Create a route with a single hazard."""
        return cls(route, Collection([hazard]))

    @classmethod
    def with_hazards(cls, route: Route, hazards: Iterable[Hazard]) -> RouteHazards:
        """Create a route with several hazards."""
        return cls(route, Collection(hazards))

    def serialize_data(self) -> RouteConfig:
        """Build the serializable configuration of the route."""
        return RouteConfig(
            data=RouteData(
                name=self.route.path(),
                description=self.route.description,
                stateless=self.route.stateless,
                inputs=OutputCollection.convert(self.route._inputs, InputData.from_input),
            ),
            rest_kind=self.route.kind(),
            hazards=OutputCollection.convert(self.hazards, HazardData.from_hazard),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteHazards):
            return NotImplemented
        return self.route == other.route

    def __hash__(self) -> int:
        return hash(self.route)

    def __repr__(self) -> str:
        return f"RouteHazards({self.route!r}, {list(self.hazards)!r})"