"""
Local network interface / address info.

Interfaces come from ``psutil.net_if_addrs()``; the main outbound IPv4
address is found with a connected UDP socket (no packet is sent).
"""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass
from typing import List, Optional

import psutil
from rich.console import Console
from rich.text import Text

from netview.config import LOCAL_IP_PROBE
from netview.core.errors import InterfaceError, LocalIPError
from netview.core.route_table import IpVersion
from netview.core.utils import console

_FAMILIES = {
    socket.AF_INET: IpVersion.V4,
    socket.AF_INET6: IpVersion.V6,
}


@dataclass(frozen=True)
class InterfaceAddress:
    name: str
    ip_version: IpVersion
    address: str
    netmask: Optional[str] = None

    def describe(self) -> str:
        prefix = "IPv4" if self.ip_version is IpVersion.V4 else "IPv6"
        return f"{prefix}: {self.address}/{self.netmask or '?'}"


def get_local_ip() -> str:
    """Return the IPv4 address this host would use to reach the internet."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.bind(("0.0.0.0", 0))
            sock.connect(LOCAL_IP_PROBE)
            addr = sock.getsockname()
    except OSError as exc:
        raise LocalIPError(f"Error getting IP address: {exc}") from exc

    if ipaddress.ip_address(addr[0]).version != 4:
        raise LocalIPError("IPv6 not supported")
    return addr[0]


def get_ip_interfaces() -> List[InterfaceAddress]:
    """All IPv4/IPv6 interface addresses, sorted by interface name."""
    try:
        raw = psutil.net_if_addrs()
    except OSError as exc:
        raise InterfaceError(f"Could not enumerate interfaces: {exc}") from exc

    interfaces: list[InterfaceAddress] = []
    for name, addrs in raw.items():
        for addr in addrs:
            version = _FAMILIES.get(addr.family)
            if version is None:
                continue  # link-layer
            interfaces.append(InterfaceAddress(name, version, addr.address, addr.netmask))

    if not interfaces:
        raise InterfaceError("No network interfaces found.")
    interfaces.sort(key=lambda iface: iface.name)
    return interfaces


def display_ip_interfaces(protocol: str, out: Optional[Console] = None) -> int:
    """Print interface addresses matching *protocol*; return how many were shown.

    ``"ipv4"`` and ``"ipv6"`` filter by family, any other value shows all.
    """
    out = out or console
    interfaces = get_ip_interfaces()
    width = max(len(iface.name) for iface in interfaces)

    displayed = 0
    for iface in interfaces:
        if protocol in ("ipv4", "ipv6") and iface.ip_version.value != protocol:
            continue
        line = Text()
        line.append(iface.name.ljust(width), style="bold blue")
        line.append(": ")
        line.append(iface.describe(), style="yellow")
        out.print(line, soft_wrap=True)
        displayed += 1

    out.print(Text("=" * 44, style="green"))
    out.print(f"Found {len(interfaces)} network interfaces (displaying {displayed})", highlight=False)
    return displayed
