"""
Diagnostic sinks.

Every skip, drop and demotion decision is reported as one human-readable line
to a sink: any callable taking a message. The engine never prints directly.
"""
from __future__ import annotations

import logging
from typing import Callable

from moran_abbrev.paths import logger

DiagnosticsSink = Callable[[str], None]


class LoggingDiagnostics:
    """Forward diagnostics to the package logger."""

    def __init__(self, level: int = logging.INFO, target: logging.Logger | None = None):
        self._level = level
        self._logger = target or logger

    def __call__(self, message: str) -> None:
        self._logger.log(self._level, message)


class CollectingDiagnostics:
    """Buffer diagnostics in memory, e.g. inside worker processes or tests."""

    def __init__(self, messages: list[str] | None = None):
        self.messages: list[str] = list(messages) if messages else []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)

    def replay(self, sink: DiagnosticsSink) -> None:
        """Send every buffered message to ``sink`` in arrival order."""
        for message in self.messages:
            sink(message)

    def clear(self) -> None:
        self.messages.clear()
