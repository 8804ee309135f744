"""Scope logging controlled by a debug level."""

from __future__ import annotations

import contextlib
import enum
import sys
from typing import TextIO

__all__ = ["DebugLevel", "ScopeLog", "debug_scope"]


class DebugLevel(enum.IntEnum):
    """How much diagnostic output is produced."""

    DISABLED = 0
    MINIMAL = 1
    FULL = 2


class ScopeLog(contextlib.ContextDecorator):
    """Writes a line when a scope is entered and another when it is left."""

    def __init__(self, scope: str, stream: TextIO | None = None) -> None:
        self.scope = scope
        self._stream = stream

    def _write(self, marker: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"[{marker}] {self.scope}\n")
        stream.flush()

    def __enter__(self) -> ScopeLog:
        self._write("+")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._write("-")
        return False


def debug_scope(
    scope: str,
    level: DebugLevel = DebugLevel.DISABLED,
    threshold: DebugLevel = DebugLevel.MINIMAL,
    stream: TextIO | None = None,
):
    """Return a scope logger if ``level`` reaches ``threshold``, else a no-op context."""
    if level >= threshold:
        return ScopeLog(scope, stream)
    return contextlib.nullcontext()