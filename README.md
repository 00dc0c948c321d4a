# ascot

`ascot` describes smart home devices: what they can do, which inputs they
accept, and which hazards each operation carries. It also turns such a
description into an aiohttp web application.

Install it with its test extras:

```
pip install ascot[test]
```

## Describing a device

The core modules model everything a device publishes about itself:

- `ascot.route`: `Route`, `RestKind`, `RouteMode`, `RouteHazards`,
  `RouteData`, `RouteConfig`
- `ascot.inputs`: `Input`, `InputType`, `InputData`, `Range`
- `ascot.hazards`: `Hazard`, `Category`, `HazardData`, `CategoryData`
- `ascot.energy`: `EnergyClass`, `EnergyEfficiency`, `CarbonFootprint`,
  `WaterUseEfficiency`, `Energy`
- `ascot.economy`: `Cost`, `CostTimespan`, `Roi`, `Economy`
- `ascot.device`: `DeviceKind`, `DeviceInfo`, `DeviceData`
- `ascot.payloads`: `EmptyPayload`, `SerialPayload`, `InfoPayload`,
  `StreamPayload`, `PayloadKind`
- `ascot.actions`: `ActionError`, `ActionErrorKind`
- `ascot.strings`: `MiniString`, `ShortString`, `LongString`
- `ascot.collection`: `Collection`, `OutputCollection`
- `ascot.errors`: `AscotError`, `ErrorKind`

A route joined with the hazards its execution may cause:

```python
from ascot.hazards import Hazard
from ascot.inputs import Input
from ascot.route import Route, RouteHazards

fire = Hazard.from_id(6)
print(fire.title(), "-", fire.category())   # Fire Hazard - Safety

light_on = RouteHazards.single_hazard(
    Route.put("/on")
    .with_description("Turn light on.")
    .inputs([
        Input.range_f64("brightness", (0.0, 20.0, 0.1, 0.0)),
        Input.boolean("save-energy", False),
    ]),
    fire,
)

print(light_on.serialize_data().to_dict())
```

Some facts worth knowing:

- Every hazard belongs to exactly one category (financial, privacy or
  safety); `Category.hazards()` lists the members of each.
  `Hazard.from_id` returns `None` for an unknown identifier.
- `Collection` and `OutputCollection` keep insertion order and ignore
  duplicates. They hold at most eight elements: `add` on a full collection
  is ignored, while `merge` raises `OverflowError` if the union would be
  larger.
- `MiniString`, `ShortString` and `LongString` hold at most 32, 64 and 128
  bytes of UTF-8 text and raise `AscotError` when that limit would be
  exceeded.
- `EnergyEfficiency` and `CarbonFootprint` clamp their percentage to
  [-100, 100]; `Roi` turns 0 years into 1 and anything above 30 into 30.
- `Route.join_inputs` writes the inputs into the path (e.g.
  `/on/:brightness`) for `GET` routes only; the path is left unchanged if
  the result does not fit in 32 bytes.
- `ActionError` and `EmptyPayload` replace a description that is too long
  with an empty one.

Every serializable object has a `to_dict()` (or `to_list()` for
collections) producing plain JSON-ready data.

## Serving a device

`ascot.web` builds an aiohttp application from a device.

- `ascot.web.actions` wraps handlers into `DeviceAction`s through
  `serial_stateful`, `serial_stateless`, `empty_stateful`,
  `empty_stateless`, `info_stateful`, `info_stateless` and the
  `mandatory_*` variants. A stateful handler is called with the device
  state and the `aiohttp` request, a stateless one with the request only;
  it may be a coroutine. It must return the matching payload
  (`SerialPayload`, `EmptyPayload` or `InfoPayload`), which is sent as
  JSON with status 200. An `ActionError` raised by the handler is sent as
  JSON with status 500.
- `ascot.web.device.Device` collects actions for a general device under
  its main route (`/device` by default).
- `ascot.web.light.Light` and `ascot.web.fridge.Fridge` enforce the
  actions a device of that kind must provide, in order, and the hazards
  each may carry. A light's turn-on action must declare the fire hazard,
  and extra actions may only declare fire hazard or electric energy
  consumption. A fridge's increase-temperature action must declare
  electric energy consumption and spoiled food, its decrease-temperature
  action electric energy consumption, and extra actions may only declare
  those two. A missing or disallowed hazard raises `WebError`; calling a
  step out of order raises `RuntimeError`.
- `ascot.web.service.ServiceConfig` holds the discovery settings of a
  device: instance name, host name, domain name, service type and up to
  eight properties.
- `ascot.web.server.AscotServer` builds the application: the device
  description at `/`, a redirect from the well-known URI
  (`/.well-known/server` by default) to `/`, and every action under the
  device's main route. `run()` serves it on the configured address
  (`0.0.0.0` by default) and port (3000 by default) until cancelled.

```python
import asyncio

from ascot.hazards import Hazard
from ascot.payloads import EmptyPayload, SerialPayload
from ascot.route import Route, RouteHazards
from ascot.web.actions import mandatory_empty_stateful, mandatory_serial_stateful
from ascot.web.light import Light
from ascot.web.server import AscotServer
from ascot.web.service import ServiceConfig


async def turn_on(state, request):
    body = await request.json()
    state["brightness"] = body["brightness"]
    return SerialPayload({"brightness": state["brightness"]})


async def turn_off(state, request):
    state["brightness"] = 0.0
    return EmptyPayload("Light turned off")


light_on = RouteHazards.single_hazard(Route.put("/on"), Hazard.FIRE_HAZARD)
light_off = RouteHazards.no_hazards(Route.put("/off"))

device = (
    Light.with_state({"brightness": 0.0})
    .turn_light_on(mandatory_serial_stateful(light_on, turn_on))
    .turn_light_off(mandatory_empty_stateful(light_off, turn_off))
    .into_device()
)

server = (
    AscotServer(device)
    .with_port(3000)
    .with_service(ServiceConfig.mdns_sd("light").with_hostname("light"))
)

asyncio.run(server.run())
```

`server.build_app()` returns the `aiohttp.web.Application` without
starting it, for use with aiohttp's own runners or test client.

## What the package does not do

- It does not announce devices on the local network. A `ServiceConfig`
  given to `AscotServer` is only logged; `AscotServer.service_properties()`
  returns the properties it would announce, with the server's `scheme` and
  `path` added.
- It ships no command-line program; a device is served by writing a short
  script like the one above.