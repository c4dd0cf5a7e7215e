"""Diagnostic sinks: where degraded-path reports go.

The sink is the side channel that replaces direct console output. Every
Localization and Localizer takes one; the default logs through the standard
library ``logging`` module.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .codes import Diagnostic, DiagnosticCode
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = [
    "DiagnosticCollector",
    "DiagnosticSink",
    "LoggingSink",
    "default_sink",
]

type DiagnosticSink = Callable[[Diagnostic], None]
"""Callable receiving each diagnostic as it is produced."""


@dataclass(frozen=True, slots=True)
class LoggingSink:
    """Sink that writes diagnostics to a standard library logger.

    Warnings are logged at WARNING, errors at ERROR.

    Attributes:
        logger_name: Name passed to logging.getLogger
        formatter: Renders each diagnostic into the log line
    """

    logger_name: str = "nlsbundle"
    formatter: DiagnosticFormatter = field(
        default_factory=lambda: DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
    )

    def __call__(self, diagnostic: Diagnostic) -> None:
        level = logging.WARNING if diagnostic.severity == "warning" else logging.ERROR
        logging.getLogger(self.logger_name).log(level, "%s", self.formatter.format(diagnostic))


class DiagnosticCollector:
    """Sink that keeps every diagnostic in memory.

    Useful for tooling that reports stray lookups after exercising the UI:

        >>> collector = DiagnosticCollector()
        >>> l10n = Localization(sink=collector)
        >>> ...
        >>> for diagnostic in collector.by_code(DiagnosticCode.MESSAGE_NOT_EXTERNALIZED):
        ...     print(diagnostic.key)
    """

    __slots__ = ("_diagnostics",)

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def __len__(self) -> int:
        return len(self._diagnostics)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """All collected diagnostics in arrival order."""
        return tuple(self._diagnostics)

    @property
    def codes(self) -> tuple[DiagnosticCode, ...]:
        """Codes of all collected diagnostics in arrival order."""
        return tuple(d.code for d in self._diagnostics)

    def by_code(self, code: DiagnosticCode) -> tuple[Diagnostic, ...]:
        """Collected diagnostics with the given code."""
        return tuple(d for d in self._diagnostics if d.code == code)

    def clear(self) -> None:
        self._diagnostics.clear()


default_sink: DiagnosticSink = LoggingSink()
