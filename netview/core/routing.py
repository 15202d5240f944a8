"""
Routing table viewer — cross-platform.

Collects the table through the platform's :class:`RouteSource`
(``netstat -rn`` on Linux / macOS) and prints it as aligned columns per
protocol, followed by the default gateway.  On Windows the output of
``route print`` is shown verbatim.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from rich.console import Console
from rich.text import Text

from netview.core.errors import NetviewError
from netview.core.route_source import RouteSource, select_source
from netview.core.route_table import IpVersion, RouteEntry, RouteTable
from netview.core.utils import (
    SectionResult,
    Status,
    check_tool_available,
    console,
    err_console,
    print_error,
    tool_missing_result,
)

TITLE = "Routing Table"

# (field, extra padding, style)
_COLUMNS = (
    ("destination", 0, "yellow"),
    ("gateway", 2, ""),
    ("flags", 2, ""),
    ("interface", 2, ""),
    ("expire", 0, "dim"),
)


def get_max_len(routes: List[RouteEntry], name: str) -> int:
    """Longest value of column *name* across *routes* (0 when none is set)."""
    return max((len(route.get_field(name) or "") for route in routes), default=0)


def _banner(text: str, out: Console) -> None:
    out.print(Text(text, style="green"), soft_wrap=True)


def _headings(routes: List[RouteEntry]) -> Dict[str, str]:
    # Linux rows carry a genmask, macOS rows an optional expiry
    linux = any(route.genmask is not None for route in routes)
    return {
        "destination": "Destination",
        "gateway": "Gateway",
        "flags": "Flags",
        "interface": "Iface" if linux else "Netif",
        "expire": "" if linux else "Expire",
    }


def _format_row(values: List[str], styles: List[str], widths: List[int]) -> Text:
    row = Text()
    for i, (value, style, width) in enumerate(zip(values, styles, widths)):
        if i:
            row.append(" ")
        row.append(value.ljust(width), style=style)
    return row


def _render_protocol(table: RouteTable, version: IpVersion, out: Console) -> None:
    routes = table.routes_for(version)
    headings = _headings(routes)
    widths = [max(get_max_len(routes, name), len(headings[name])) + pad for name, pad, _ in _COLUMNS]
    names = [name for name, _, _ in _COLUMNS]
    styles = [style for _, _, style in _COLUMNS]

    _banner(f"================ {version.label} Routes ================", out)
    if routes:
        heading_row = _format_row([headings[name] for name in names], ["bold blue"] * len(names), widths)
        out.print(heading_row, soft_wrap=True)
    for route in routes:
        values = [route.get_field(name) or "" for name in names]
        out.print(_format_row(values, styles, widths), soft_wrap=True)

    _banner(f"============ {version.label} Default Gateway ===========", out)
    gateway = table.get_default_gateway(version)
    if gateway is not None:
        line = Text()
        line.append(f"{version.label} Default Gateway: ", style="bold blue")
        line.append(gateway.gateway, style="yellow")
        line.append(" via ")
        line.append(gateway.interface, style="bold")
        out.print(line, soft_wrap=True)
        out.print()


def render_route_table(table: RouteTable, protocol: str, out: Optional[Console] = None) -> None:
    """Print the IPv4 and/or IPv6 routes selected by *protocol*.

    *protocol* is ``"ipv4"``, ``"ipv6"`` or ``"all"``; any other value prints
    only the title.
    """
    out = out or console
    out.print()
    out.print(Text("Local Network Routes Table", style="bold green"), soft_wrap=True)
    for version in (IpVersion.V4, IpVersion.V6):
        if protocol in (version.value, "all"):
            _render_protocol(table, version, out)


def _print_raw(source: RouteSource, out: Console) -> SectionResult:
    raw = source.raw_output()
    out.print("Route table:", style="bold green")
    out.print(raw, markup=False, highlight=False, soft_wrap=True)
    return SectionResult(
        title=TITLE,
        status=Status.PARTIAL,
        summary=f"Raw output of '{' '.join(source.command)}' (not parsed on {source.name}).",
    )


# ── Public API ────────────────────────────────────────────────────────────────


def routing_table(
    protocol: str,
    source: Optional[RouteSource] = None,
    out: Optional[Console] = None,
    err: Optional[Console] = None,
) -> SectionResult:
    """Retrieve and display the local routing table.

    When no *source* is given, the platform source is picked and its command
    must be on PATH.  Collection errors are reported on *err* and returned as
    a failed result; they are never raised to the caller.
    """
    out = out or console
    err = err or err_console

    try:
        if source is None:
            source = select_source()
            if not check_tool_available(source.tool):
                result = tool_missing_result(source.tool, TITLE)
                print_error(result.summary, err)
                return result
        if not source.can_parse:
            return _print_raw(source, out)
        table = source.collect()
    except NetviewError as exc:
        print_error(str(exc), err)
        return SectionResult(title=TITLE, status=Status.ERROR, summary=str(exc))

    render_route_table(table, protocol, out)

    details: list[str] = []
    for version in (IpVersion.V4, IpVersion.V6):
        gateway = table.get_default_gateway(version)
        if gateway is not None:
            details.append(f"{version.label} default gateway: {gateway.gateway} via {gateway.interface}")
    return SectionResult(
        title=TITLE,
        status=Status.SUCCESS,
        summary=f"{len(table.ipv4_routes)} IPv4 and {len(table.ipv6_routes)} IPv6 route entries retrieved.",
        details=details,
    )
