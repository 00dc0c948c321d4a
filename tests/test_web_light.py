import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient, TestServer

from ascot.device import DeviceInfo, DeviceKind
from ascot.hazards import Hazard
from ascot.inputs import Input
from ascot.payloads import EmptyPayload, InfoPayload, SerialPayload
from ascot.route import Route, RouteHazards
from ascot.web.actions import (
    empty_stateful,
    empty_stateless,
    info_stateful,
    mandatory_empty_stateful,
    mandatory_empty_stateless,
    mandatory_serial_stateful,
    mandatory_serial_stateless,
    serial_stateful,
    serial_stateless,
)
from ascot.web.errors import WebError, WebErrorKind
from ascot.web.light import Light


class LightState:
    pass


async def turn_light_on(state, request):
    inputs = await request.json()
    return SerialPayload(
        {"brightness": inputs["brightness"], "save-energy": inputs["save-energy"]}
    )


async def turn_light_on_stateless(request):
    inputs = await request.json()
    return SerialPayload(
        {"brightness": inputs["brightness"], "save-energy": inputs["save-energy"]}
    )


async def turn_light_off(state, request):
    return EmptyPayload("Turn light off worked perfectly")


async def turn_light_off_stateless(request):
    return EmptyPayload("Turn light off worked perfectly")


async def toggle(state, request):
    return EmptyPayload("Toggle worked perfectly")


async def toggle_stateless(request):
    return EmptyPayload("Toggle worked perfectly")


async def info(state, request):
    return InfoPayload(DeviceInfo())


def light_inputs():
    return [
        Input.range_f64("brightness", (0.0, 20.0, 0.1, 0.0)),
        Input.boolean("save-energy", False),
    ]


def create_routes():
    return {
        "on": RouteHazards.single_hazard(
            Route.put("/on").with_description("Turn light on.").inputs(light_inputs()),
            Hazard.FIRE_HAZARD,
        ),
        "on_post": RouteHazards.no_hazards(
            Route.post("/on").with_description("Turn light on.").inputs(light_inputs())
        ),
        "off": RouteHazards.no_hazards(Route.put("/off").with_description("Turn light off.")),
        "toggle": RouteHazards.no_hazards(
            Route.put("/toggle").with_description("Toggle a light.")
        ),
    }


def route_list(device):
    return [
        (config.data.name, config.rest_kind.name)
        for config in device.serialize_data().route_configs
    ]


def test_complete_with_state():
    routes = create_routes()
    device = (
        Light.with_state(LightState())
        .turn_light_on(mandatory_serial_stateful(routes["on"], turn_light_on))
        .turn_light_off(mandatory_empty_stateful(routes["off"], turn_light_off))
        .add_action(serial_stateful(routes["on_post"], turn_light_on))
        .add_action(empty_stateful(routes["toggle"], toggle))
        .into_device()
    )
    assert device.kind is DeviceKind.LIGHT
    assert device.main_route == "/light"
    assert route_list(device) == [
        ("/on", "POST"),
        ("/toggle", "PUT"),
        ("/on", "PUT"),
        ("/off", "PUT"),
    ]


def test_without_action_with_state():
    routes = create_routes()
    device = (
        Light.with_state(LightState())
        .turn_light_on(mandatory_serial_stateful(routes["on"], turn_light_on))
        .turn_light_off(mandatory_empty_stateful(routes["off"], turn_light_off))
        .into_device()
    )
    assert route_list(device) == [("/on", "PUT"), ("/off", "PUT")]


def test_stateless_action_with_state():
    routes = create_routes()
    device = (
        Light.with_state(LightState())
        .turn_light_on(mandatory_serial_stateful(routes["on"], turn_light_on))
        .turn_light_off(mandatory_empty_stateful(routes["off"], turn_light_off))
        .add_action(serial_stateful(routes["on_post"], turn_light_on))
        .add_action(empty_stateless(routes["toggle"], toggle_stateless))
        .into_device()
    )
    assert len(device.serialize_data().route_configs) == 4


def test_complete_without_state():
    routes = create_routes()
    device = (
        Light()
        .turn_light_on(mandatory_serial_stateless(routes["on"], turn_light_on_stateless))
        .turn_light_off(mandatory_empty_stateless(routes["off"], turn_light_off_stateless))
        .add_action(serial_stateless(routes["on_post"], turn_light_on_stateless))
        .add_action(empty_stateless(routes["toggle"], toggle_stateless))
        .into_device()
    )
    assert device.state is None
    assert len(device.serialize_data().route_configs) == 4


def test_without_action_and_state():
    routes = create_routes()
    device = (
        Light()
        .turn_light_on(mandatory_serial_stateless(routes["on"], turn_light_on_stateless))
        .turn_light_off(mandatory_empty_stateless(routes["off"], turn_light_off_stateless))
        .into_device()
    )
    assert route_list(device) == [("/on", "PUT"), ("/off", "PUT")]


def test_turn_light_on_hazards_are_serialized():
    routes = create_routes()
    device = (
        Light()
        .turn_light_on(mandatory_serial_stateless(routes["on"], turn_light_on_stateless))
        .turn_light_off(mandatory_empty_stateless(routes["off"], turn_light_off_stateless))
        .into_device()
    )
    on_config = device.serialize_data().route_configs.to_list()[0]
    assert [hazard["id"] for hazard in on_config["hazards"]] == [Hazard.FIRE_HAZARD.id()]


def test_turn_light_on_requires_fire_hazard():
    routes = create_routes()
    light = Light()
    with pytest.raises(WebError) as excinfo:
        light.turn_light_on(
            mandatory_serial_stateless(routes["on_post"], turn_light_on_stateless)
        )
    assert excinfo.value.kind is WebErrorKind.LIGHT
    assert str(excinfo.value) == "light error: No fire hazard for the `turn_light_on` route"


def test_add_action_rejects_disallowed_hazard():
    routes = create_routes()
    light = (
        Light()
        .turn_light_on(mandatory_serial_stateless(routes["on"], turn_light_on_stateless))
        .turn_light_off(mandatory_empty_stateless(routes["off"], turn_light_off_stateless))
    )
    risky = RouteHazards.single_hazard(Route.put("/risky"), Hazard.SPOILED_FOOD)
    with pytest.raises(WebError) as excinfo:
        light.add_action(empty_stateless(risky, toggle_stateless))
    assert str(excinfo.value) == "light error: Spoiled Food hazard is not allowed for light"


def test_add_action_accepts_allowed_hazard():
    routes = create_routes()
    allowed = RouteHazards.single_hazard(
        Route.put("/bright"), Hazard.ELECTRIC_ENERGY_CONSUMPTION
    )
    device = (
        Light()
        .turn_light_on(mandatory_serial_stateless(routes["on"], turn_light_on_stateless))
        .turn_light_off(mandatory_empty_stateless(routes["off"], turn_light_off_stateless))
        .add_action(empty_stateless(allowed, toggle_stateless))
        .into_device()
    )
    assert route_list(device)[0] == ("/bright", "PUT")


def test_mandatory_actions_must_come_in_order():
    routes = create_routes()
    light = Light()
    with pytest.raises(RuntimeError):
        light.turn_light_off(mandatory_empty_stateless(routes["off"], turn_light_off_stateless))
    with pytest.raises(RuntimeError):
        light.into_device()
    with pytest.raises(RuntimeError):
        light.add_action(empty_stateless(routes["toggle"], toggle_stateless))


def test_turn_light_on_cannot_be_set_twice():
    routes = create_routes()
    light = Light().turn_light_on(
        mandatory_serial_stateless(routes["on"], turn_light_on_stateless)
    )
    with pytest.raises(RuntimeError):
        light.turn_light_on(mandatory_serial_stateless(routes["on"], turn_light_on_stateless))


def test_main_route_and_info_action():
    routes = create_routes()
    device = (
        Light.with_state(LightState())
        .turn_light_on(mandatory_serial_stateful(routes["on"], turn_light_on))
        .turn_light_off(mandatory_empty_stateful(routes["off"], turn_light_off))
        .with_main_route("/kitchen-light")
        .add_info_action(info_stateful(RouteHazards.no_hazards(Route.get("/info")), info))
        .into_device()
    )
    assert device.main_route == "/kitchen-light"
    paths = [d.path for d in device.route_definitions()]
    assert paths == ["/kitchen-light/info", "/kitchen-light/on", "/kitchen-light/off"]


@pytest.mark.asyncio
async def test_light_routes_answer_requests():
    routes = create_routes()
    device = (
        Light.with_state(LightState())
        .turn_light_on(mandatory_serial_stateful(routes["on"], turn_light_on))
        .turn_light_off(mandatory_empty_stateful(routes["off"], turn_light_off))
        .into_device()
    )
    app = web.Application()
    app.add_routes(device.route_definitions())
    async with TestClient(TestServer(app)) as client:
        response = await client.put(
            "/light/on", json={"brightness": 4.0, "save-energy": True}
        )
        assert await response.json() == {"brightness": 4.0, "save-energy": True}
        response = await client.put("/light/off")
        assert response.status == 200
        assert await response.json() == {"description": "Turn light off worked perfectly"}