"""
Exception hierarchy shared by the collectors.

Collectors raise; the report and CLI layers catch :class:`NetviewError`,
print it on the error console and carry on with the next section.
"""

from __future__ import annotations

from typing import Sequence


class NetviewError(Exception):
    """Base class for every error raised by netview."""


class RouteCollectionError(NetviewError):
    """Route-table collection failed for this invocation."""


class CommandSpawnFailed(RouteCollectionError):
    """The external command could not be started."""

    def __init__(self, cmd: Sequence[str], reason: str) -> None:
        self.cmd = list(cmd)
        self.reason = reason
        super().__init__(f"Error executing command '{' '.join(self.cmd)}': {reason}")


class CommandFailed(RouteCollectionError):
    """The external command started but exited with a nonzero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, stderr: str) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Error executing command '{' '.join(self.cmd)}': {stderr.strip()}")


class OutputDecodeFailed(RouteCollectionError):
    """Captured stdout was not valid UTF-8."""

    def __init__(self, cmd: Sequence[str], reason: str) -> None:
        self.cmd = list(cmd)
        self.reason = reason
        super().__init__(f"Output of '{' '.join(self.cmd)}' is not valid UTF-8: {reason}")


class UnsupportedPlatform(RouteCollectionError):
    def __init__(self, system: str) -> None:
        self.system = system
        super().__init__(f"Unsupported operating system: {system or 'unknown'}")


class LocalIPError(NetviewError):
    """The outbound IPv4 address could not be determined."""


class InterfaceError(NetviewError):
    """Local interfaces could not be enumerated."""
