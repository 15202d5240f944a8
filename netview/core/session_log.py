"""
Session logger — records every SectionResult to a JSON-lines file.

The logger is a lightweight singleton.  Call ``SessionLogger.get(log_dir)``
to obtain the instance, then ``.log(result)`` after each section.  It only
touches the filesystem once a log directory has been configured.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import List, Optional

from netview.core.utils import SectionResult, Status


class SessionLogger:
    """Append-only JSON-lines logger for a single run."""

    _instance: Optional["SessionLogger"] = None

    def __init__(self, log_dir: str = "") -> None:
        self._results: list[SectionResult] = []
        self._log_path = ""
        self._enabled = bool(log_dir)
        if self._enabled:
            os.makedirs(log_dir, exist_ok=True)
            ts = datetime.now().strftime("%Y%m%d_%H%M%S")
            self._log_path = os.path.join(log_dir, f"session_{ts}.jsonl")

    # ── Singleton access ──────────────────────────────────────────────────

    @classmethod
    def get(cls, log_dir: str = "") -> "SessionLogger":
        """Return the global session logger (create on first call)."""
        if cls._instance is None:
            cls._instance = cls(log_dir)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Discard the singleton (for tests)."""
        cls._instance = None

    # ── Properties ────────────────────────────────────────────────────────

    @property
    def log_path(self) -> str:
        return self._log_path

    @property
    def results(self) -> List[SectionResult]:
        return list(self._results)

    @property
    def enabled(self) -> bool:
        return self._enabled

    # ── Core API ──────────────────────────────────────────────────────────

    def log(self, result: SectionResult) -> None:
        """Append a result to the in-memory list and flush to disk."""
        self._results.append(result)
        if not self._enabled:
            return
        entry = {
            "title": result.title,
            "status": result.status.value,
            "summary": result.summary,
            "details": result.details,
            "timestamp": result.timestamp,
        }
        try:
            with open(self._log_path, "a", encoding="utf-8") as fh:
                fh.write(json.dumps(entry, ensure_ascii=False) + "\n")
        except OSError:
            pass  # Best-effort — don't crash the tool for a log failure

    def summary(self) -> str:
        """Return a one-line summary of the current run."""
        total = len(self._results)
        if total == 0:
            return "No sections run."
        passed = sum(1 for r in self._results if r.status == Status.SUCCESS)
        failed = sum(1 for r in self._results if r.status in (Status.FAILURE, Status.ERROR))
        partial = total - passed - failed
        text = f"Session: {total} section(s) — {passed} ok, {failed} failed, {partial} partial."
        if self._enabled:
            text += f"  Log: {self._log_path}"
        return text
