"""
Normalized routing-table model, independent of the platform it came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

DEFAULT_DESTINATIONS = ("default", "0.0.0.0", "::/0")

_FIELDS = ("destination", "gateway", "flags", "interface", "genmask", "expire")


class IpVersion(Enum):
    V4 = "ipv4"
    V6 = "ipv6"

    @property
    def label(self) -> str:
        return "IPv4" if self is IpVersion.V4 else "IPv6"


@dataclass(frozen=True)
class RouteEntry:
    """One row of the kernel routing table.

    ``genmask`` is only set by the Linux parser and ``expire`` only by the
    macOS parser.
    """

    destination: str
    gateway: str
    flags: str
    interface: str
    ip_version: IpVersion
    genmask: Optional[str] = None
    expire: Optional[str] = None

    def get_field(self, name: str) -> Optional[str]:
        """Return the named column, or None for unknown names and unset fields."""
        if name not in _FIELDS:
            return None
        return getattr(self, name)


@dataclass
class RouteTable:
    ipv4_routes: List[RouteEntry] = field(default_factory=list)
    ipv6_routes: List[RouteEntry] = field(default_factory=list)

    def add_route(self, route: RouteEntry) -> None:
        self.routes_for(route.ip_version).append(route)

    def routes_for(self, ip_version: IpVersion) -> List[RouteEntry]:
        if ip_version is IpVersion.V4:
            return self.ipv4_routes
        return self.ipv6_routes

    def get_default_gateway(self, ip_version: IpVersion) -> Optional[RouteEntry]:
        """Return the first default route for *ip_version*, in parse order."""
        for route in self.routes_for(ip_version):
            if route.destination in DEFAULT_DESTINATIONS:
                return route
        return None

    def __len__(self) -> int:
        return len(self.ipv4_routes) + len(self.ipv6_routes)
