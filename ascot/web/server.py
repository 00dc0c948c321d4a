"""The web server exposing a device."""

from __future__ import annotations

import asyncio
import dataclasses
import ipaddress
import json
import logging
from typing import Any, Optional, Union

from aiohttp import web

from .device import Device
from .errors import WebError, WebErrorKind
from .service import ServiceConfig

logger = logging.getLogger(__name__)

DEFAULT_HTTP_ADDRESS = ipaddress.IPv4Address("0.0.0.0")
DEFAULT_SERVER_PORT = 3000
DEFAULT_SCHEME = "http"
WELL_KNOWN_URI = "/.well-known/server"


class AscotServer:
    """A server running a device, reachable on an IPv4 address and a port."""

    def __init__(self, device: Device) -> None:
        self.device = device
        self.address = DEFAULT_HTTP_ADDRESS
        self.port = DEFAULT_SERVER_PORT
        self.scheme = DEFAULT_SCHEME
        self.well_known_uri = WELL_KNOWN_URI
        self.service_config: Optional[ServiceConfig] = None

    def with_address(
        self, address: Union[str, ipaddress.IPv4Address]
    ) -> AscotServer:
        """Set the server IPv4 address."""
        self.address = ipaddress.IPv4Address(address)
        return self

    def with_port(self, port: int) -> AscotServer:
        """Set the server port."""
        if isinstance(port, bool) or not isinstance(port, int):
            raise TypeError("port must be an integer")
        if not 0 <= port <= 65535:
            raise ValueError("port must be in the range 0-65535")
        self.port = port
        return self

    def with_scheme(self, scheme: str) -> AscotServer:
        """Set the server scheme."""
        self.scheme = scheme
        return self

    def with_well_known_uri(self, well_known_uri: str) -> AscotServer:
        """Set the well-known URI."""
        self.well_known_uri = well_known_uri
        return self

    def with_service(self, service_config: ServiceConfig) -> AscotServer:
        """Set the discovery service configuration."""
        self.service_config = service_config
        return self

    def _announced_service(self) -> Optional[ServiceConfig]:
        if self.service_config is None:
            return None
        config = dataclasses.replace(
            self.service_config, properties=dict(self.service_config.properties)
        )
        return config.property("scheme", self.scheme).property(
            "path", self.well_known_uri
        )

    def service_properties(self) -> dict[str, str]:
        """Return the properties the service announces, server ones included.

        Empty when no service is configured.
        """
        config = self._announced_service()
        return {} if config is None else dict(config.properties)

    def build_app(self) -> web.Application:
        """Build the web application routing the device."""
        device_info: Any = self.device.serialize_data().to_dict()
        try:
            json.dumps(device_info)
        except (TypeError, ValueError) as error:
            raise WebError(WebErrorKind.SERIALIZATION, str(error)) from error

        logger.info('Server route: [GET, "/"]')
        logger.info('Server route: [GET, "%s"]', self.well_known_uri)

        service = self._announced_service()
        if service is not None:
            logger.info(
                "Service instance name: %s, type: %s, properties: %s",
                service.instance_name,
                service.service_type,
                service.properties,
            )

        async def root(_request: web.Request) -> web.Response:
            return web.json_response(device_info)

        async def well_known(_request: web.Request) -> web.Response:
            raise web.HTTPSeeOther("/")

        app = web.Application()
        app.router.add_get("/", root)
        app.router.add_get(self.well_known_uri, well_known)
        app.add_routes(self.device.route_definitions())
        return app

    async def run(self) -> None:
        """Run the device on the server until cancelled."""
        listener = f"{self.address}:{self.port}"
        app = self.build_app()
        logger.info("Device reachable at this HTTP address: %s", listener)
        runner = web.AppRunner(app)
        await runner.setup()
        try:
            site = web.TCPSite(runner, str(self.address), self.port)
            try:
                await site.start()
            except OSError as error:
                raise WebError(WebErrorKind.NOT_FOUND_ADDRESS, str(error)) from error
            logger.info("Starting server...")
            await asyncio.Event().wait()
        finally:
            await runner.cleanup()