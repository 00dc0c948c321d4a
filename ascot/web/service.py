"""Configuration of the discovery service announcing a device."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

MAXIMUM_PROPERTIES = 8

SERVICE_TYPE = "General Device"


@dataclass
class ServiceConfig:
    """Configuration of an mDNS-SD service."""

    instance_name: str
    hostname: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    domain_name: Optional[str] = None
    service_type: str = SERVICE_TYPE
    disable_ipv6: bool = False
    disable_docker: bool = False

    def __post_init__(self) -> None:
        if not self.hostname:
            self.hostname = self.instance_name

    @classmethod
    def mdns_sd(cls, instance_name: str) -> ServiceConfig:
        """Create a configuration whose host name is the instance name."""
        return cls(instance_name)

    def property(self, key: Any, value: Any) -> ServiceConfig:
        """Set a property; an existing key keeps its place, a full map ignores new keys."""
        key, value = str(key), str(value)
        if key in self.properties or len(self.properties) < MAXIMUM_PROPERTIES:
            self.properties[key] = value
        return self

    def with_hostname(self, hostname: str) -> ServiceConfig:
        """Set the service host name."""
        self.hostname = hostname
        return self

    def with_domain_name(self, domain_name: str) -> ServiceConfig:
        """Set the service domain name."""
        self.domain_name = domain_name
        return self

    def with_service_type(self, service_type: str) -> ServiceConfig:
        """Set the service type, which identifies the kind of firmware."""
        self.service_type = service_type
        return self

    def without_ipv6(self) -> ServiceConfig:
        """Disable IPv6 addresses."""
        self.disable_ipv6 = True
        return self

    def without_docker(self) -> ServiceConfig:
        """Disable the docker bridge."""
        self.disable_docker = True
        return self