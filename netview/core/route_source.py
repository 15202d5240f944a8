"""
Route sources — one per platform that can report its routing table.

The source is picked once from the detected OS and handed to the report
layer, so parsing code never has to branch on the platform itself.

  • Linux   — ``netstat -rn``, Linux parser
  • macOS   — ``netstat -rn``, macOS parser (IPv4 + IPv6 sections)
  • Windows — ``route print``, raw text only
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from netview.config import PLATFORM
from netview.core.errors import UnsupportedPlatform
from netview.core.route_parsers import parse_linux_output, parse_macos_output
from netview.core.route_table import RouteTable
from netview.core.utils import run_command


class RouteSource:
    """Runs a platform command and turns its output into a :class:`RouteTable`."""

    name = "generic"
    command: Tuple[str, ...] = ()
    parser: Optional[Callable[[str], RouteTable]] = None

    @property
    def tool(self) -> str:
        return self.command[0]

    @property
    def can_parse(self) -> bool:
        return self.parser is not None

    def collect(self) -> RouteTable:
        if self.parser is None:
            raise NotImplementedError(f"Route table parsing is not implemented on {self.name}")
        output = run_command(self.command)
        return self.parser(output.text())

    def raw_output(self) -> str:
        """Command output decoded leniently, for printing as-is."""
        return run_command(self.command).display_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(command={' '.join(self.command)!r})"


class LinuxSource(RouteSource):
    name = "Linux"
    command = ("netstat", "-rn")
    parser = staticmethod(parse_linux_output)


class MacSource(RouteSource):
    name = "macOS"
    command = ("netstat", "-rn")
    parser = staticmethod(parse_macos_output)


class WindowsSource(RouteSource):
    """``route print`` is shown verbatim; it is never parsed into a table."""

    name = "Windows"
    command = ("route", "print")


_SOURCES = {
    "Linux": LinuxSource,
    "Darwin": MacSource,
    "Windows": WindowsSource,
}


def select_source(system: Optional[str] = None) -> RouteSource:
    """Return the route source for *system* (defaults to the running OS)."""
    if system is None:
        system = PLATFORM.system
    try:
        return _SOURCES[system]()
    except KeyError:
        raise UnsupportedPlatform(system) from None


def collect(source: Optional[RouteSource] = None) -> RouteTable:
    """Collect the routing table from *source* or from the running platform's source."""
    if source is None:
        source = select_source()
    return source.collect()
