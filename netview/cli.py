"""
CLI entry-point for netview.

  • ``netview``                — main IP, interfaces and IPv4 routes
  • ``netview -p all``         — same, for IPv4 and IPv6
  • ``netview --ip``           — print only the main outbound IP
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from rich.text import Text

from netview import __app_name__, __version__
from netview.config import DEFAULT_PROTOCOL, PROTOCOLS
from netview.core.errors import NetviewError
from netview.core.utils import SectionResult, Status, console, print_error


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="netview",
        description=f"{__app_name__} — display local network interfaces, IP addresses and routes.",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-p", "--protocol",
        choices=PROTOCOLS,
        default=DEFAULT_PROTOCOL,
        help=f"Protocol to show: all, ipv4 or ipv6 (default: {DEFAULT_PROTOCOL})",
    )
    p.add_argument("--ip", action="store_true", dest="only_ip",
                   help="Only show the main IP address of the machine")
    p.add_argument("--log-dir", default="",
                   help="Write a JSON-lines session log into this directory")
    return p


def _main_ip_section() -> SectionResult:
    from netview.core.net_info import get_local_ip

    title = "Main IP Address"
    try:
        ip = get_local_ip()
    except NetviewError as exc:
        print_error(str(exc))
        return SectionResult(title=title, status=Status.ERROR, summary=str(exc))

    line = Text()
    line.append("Main IP address: ", style="bold blue")
    line.append(ip, style="yellow")
    console.print(line)
    return SectionResult(title=title, status=Status.SUCCESS, summary=ip)


def _interfaces_section(protocol: str) -> SectionResult:
    from netview.core.net_info import display_ip_interfaces

    title = "Network Interfaces"
    try:
        shown = display_ip_interfaces(protocol)
    except NetviewError as exc:
        console.print(Text("=" * 44, style="red"))
        print_error(f"Failed to get network interfaces: {exc}")
        console.print(Text("=" * 44, style="red"))
        return SectionResult(title=title, status=Status.ERROR, summary=str(exc))
    return SectionResult(title=title, status=Status.SUCCESS, summary=f"{shown} address(es) shown.")


def run(protocol: str, only_ip: bool = False, log_dir: str = "") -> int:
    """Run the requested sections and return the process exit code."""
    from netview.core.net_info import get_local_ip
    from netview.core.routing import routing_table
    from netview.core.session_log import SessionLogger

    if only_ip:
        try:
            console.print(get_local_ip(), highlight=False)
        except NetviewError as exc:
            print_error(str(exc))
            return 1
        return 0

    logger = SessionLogger.get(log_dir)

    console.print(Text("Local Network Interfaces and IP Addresses", style="bold green"))
    logger.log(_main_ip_section())
    logger.log(_interfaces_section(protocol))
    console.print()
    logger.log(routing_table(protocol))

    if logger.enabled:
        console.print(logger.summary(), style="dim", highlight=False)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry-point called by the ``netview`` console script or ``python -m netview``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        code = run(args.protocol, only_ip=args.only_ip, log_dir=args.log_dir)
    except KeyboardInterrupt:
        print("\nAborted.")
        sys.exit(130)
    sys.exit(code)


if __name__ == "__main__":
    main()
