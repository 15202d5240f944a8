"""
Parsers for ``netstat -rn`` output on Linux and macOS.

Each parser is a small line-oriented state machine.  The ``*_step``
functions are pure: they take the current state and one line and return the
next state plus the entry that line produced, if any.  Lines with too few
columns yield no entry and are dropped without error.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Tuple

from netview.core.route_table import IpVersion, RouteEntry, RouteTable

HEADER_PREFIX = "Destination"
IPV4_SECTION = "Internet:"
IPV6_SECTION = "Internet6:"
EXPIRE_HEADER = "Expire"

LINUX_MIN_COLUMNS = 5  # destination gateway genmask flags ... iface
MACOS_MIN_COLUMNS = 4  # destination gateway flags netif [expire]


# ── Linux ─────────────────────────────────────────────────────────────────────


class LinuxState(Enum):
    AWAITING_HEADER = "awaiting_header"
    IN_TABLE = "in_table"


def parse_linux_line(line: str) -> Optional[RouteEntry]:
    """Turn one Linux table row into an IPv4 entry, or None if it is too short."""
    parts = line.split()
    if len(parts) < LINUX_MIN_COLUMNS:
        return None
    return RouteEntry(
        destination=parts[0],
        gateway=parts[1],
        genmask=parts[2],
        flags=parts[3],
        interface=parts[-1],
        ip_version=IpVersion.V4,
    )


def linux_step(state: LinuxState, line: str) -> Tuple[LinuxState, Optional[RouteEntry]]:
    stripped = line.strip()
    if not stripped:
        return state, None
    if stripped.startswith(HEADER_PREFIX):
        return LinuxState.IN_TABLE, None
    if state is LinuxState.AWAITING_HEADER:
        return state, None
    return state, parse_linux_line(stripped)


def parse_linux_output(output: str) -> RouteTable:
    """Parse Linux ``netstat -rn`` output into a :class:`RouteTable`."""
    table = RouteTable()
    state = LinuxState.AWAITING_HEADER
    for line in output.splitlines():
        state, entry = linux_step(state, line)
        if entry is not None:
            table.add_route(entry)
    return table


# ── macOS ─────────────────────────────────────────────────────────────────────


class MacSection(Enum):
    NO_SECTION = "no_section"
    IN_IPV4_SECTION = "ipv4"
    IN_IPV6_SECTION = "ipv6"


_SECTION_VERSIONS = {
    MacSection.IN_IPV4_SECTION: IpVersion.V4,
    MacSection.IN_IPV6_SECTION: IpVersion.V6,
}


class MacState(NamedTuple):
    section: MacSection = MacSection.NO_SECTION
    header_parsed: bool = False


def _expire_marker(token: str) -> Optional[str]:
    if token == EXPIRE_HEADER:
        return token
    if token.isascii() and token.isdigit():
        return token
    return None


def parse_macos_line(line: str, ip_version: IpVersion) -> Optional[RouteEntry]:
    """Turn one macOS table row into an entry, or None if it is too short."""
    parts = line.split()
    if len(parts) < MACOS_MIN_COLUMNS:
        return None
    return RouteEntry(
        destination=parts[0],
        gateway=parts[1],
        flags=parts[2],
        interface=parts[3],
        expire=_expire_marker(parts[-1]),
        ip_version=ip_version,
    )


def macos_step(state: MacState, line: str) -> Tuple[MacState, Optional[RouteEntry]]:
    stripped = line.strip()
    if not stripped:
        return state, None

    # Section banners switch protocol and wait for that section's header.
    if stripped.startswith(IPV4_SECTION):
        return MacState(MacSection.IN_IPV4_SECTION, False), None
    if stripped.startswith(IPV6_SECTION):
        return MacState(MacSection.IN_IPV6_SECTION, False), None

    if state.section is MacSection.NO_SECTION:
        return state, None
    if stripped.startswith(HEADER_PREFIX):
        return state._replace(header_parsed=True), None
    if not state.header_parsed:
        return state, None
    return state, parse_macos_line(stripped, _SECTION_VERSIONS[state.section])


def parse_macos_output(output: str) -> RouteTable:
    """Parse macOS ``netstat -rn`` output (both sections) into a :class:`RouteTable`."""
    table = RouteTable()
    state = MacState()
    for line in output.splitlines():
        state, entry = macos_step(state, line)
        if entry is not None:
            table.add_route(entry)
    return table

