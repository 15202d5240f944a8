"""
Shared utilities: console handles, section results, subprocess runner.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from netview.config import PLATFORM
from netview.core.errors import CommandFailed, CommandSpawnFailed, OutputDecodeFailed

console = Console()
err_console = Console(stderr=True)


# ── Result types ──────────────────────────────────────────────────────────────


class Status(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    PARTIAL = "partial"
    ERROR = "error"


@dataclass
class SectionResult:
    """Outcome of one CLI section (main IP, interfaces, routes)."""

    title: str
    status: Status
    summary: str = ""
    details: List[str] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now().strftime("%Y-%m-%d %H:%M:%S"))


# ── Pretty printing ──────────────────────────────────────────────────────────


def print_error(message: str, out: Optional[Console] = None) -> None:
    """Write a one-line diagnostic to the error stream."""
    out = out or err_console
    line = Text()
    line.append("✘ ", style="bold red")
    line.append(message, style="red")
    out.print(line, soft_wrap=True)


# ── Subprocess wrapper ────────────────────────────────────────────────────────


@dataclass
class CommandOutput:
    """Raw bytes captured from a finished command."""

    cmd: List[str]
    returncode: int
    stdout: bytes
    stderr: bytes

    def text(self) -> str:
        """Strict UTF-8 decode of stdout, for parsers."""
        try:
            return self.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise OutputDecodeFailed(self.cmd, str(exc)) from exc

    def display_text(self) -> str:
        """Lenient decode of stdout, for verbatim display only."""
        return self.stdout.decode("utf-8", errors="replace")


def run_command(cmd: Sequence[str], timeout: Optional[int] = None) -> CommandOutput:
    """Run an external command and return its captured output.

    stdin is closed, stdout and stderr are captured separately and the child
    is always reaped.  There is no timeout unless the caller passes one.
    Raises :class:`CommandSpawnFailed` when the binary cannot be started and
    :class:`CommandFailed` (with the decoded stderr) on a nonzero exit.
    """
    argv = list(cmd)
    try:
        proc = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except FileNotFoundError:
        raise CommandSpawnFailed(argv, f"command not found: {argv[0]}")
    except subprocess.TimeoutExpired:
        raise CommandFailed(argv, -1, f"Command timed out after {timeout}s")
    except OSError as exc:
        raise CommandSpawnFailed(argv, str(exc)) from exc

    stdout = proc.stdout or b""
    stderr = proc.stderr or b""
    if proc.returncode != 0:
        raise CommandFailed(argv, proc.returncode, stderr.decode("utf-8", errors="replace"))
    return CommandOutput(argv, proc.returncode, stdout, stderr)


def check_tool_available(tool_attr: str) -> bool:
    """Return *True* if the platform tool is available."""
    return getattr(PLATFORM, tool_attr, None) is not None


def tool_missing_result(tool_name: str, action: str) -> SectionResult:
    """Return a standardised error result for a missing external tool."""
    return SectionResult(
        title=action,
        status=Status.ERROR,
        summary=f"Required tool '{tool_name}' was not found on PATH.",
        details=["Install the tool and ensure it is available in your system PATH."],
    )
