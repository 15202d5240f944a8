"""
Centralised runtime configuration and OS-detection helpers.
"""

import platform
import shutil
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PlatformInfo:
    """Immutable snapshot of the host OS and available external tools."""

    system: str = field(default_factory=lambda: platform.system())  # Windows | Linux | Darwin

    # Paths to external tools (None if not found on PATH)
    netstat: Optional[str] = None
    route: Optional[str] = None

    def __post_init__(self) -> None:  # pragma: no cover — simple wiring
        for tool_name in ("netstat", "route"):
            object.__setattr__(self, tool_name, shutil.which(tool_name))


# Singleton — instantiated once at import time.
PLATFORM = PlatformInfo()

# Protocol selectors understood by the interface and route listings
PROTOCOLS = ("ipv4", "ipv6", "all")
DEFAULT_PROTOCOL = "ipv4"

# Remote endpoint used to discover the outbound address (nothing is sent)
LOCAL_IP_PROBE = ("8.8.8.8", 80)
