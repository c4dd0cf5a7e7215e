"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup diagnostics (localize calls against a bundle)
        2000-2999: Loading diagnostics (bundle files and their shape)
        3000-3999: Configuration diagnostics (options parsing)
    """

    # Lookup (1000-1999)
    MESSAGE_NOT_EXTERNALIZED = 1001
    INDEX_OUT_OF_BOUNDS = 1002
    INVALID_LOCALIZE_KEY = 1003

    # Loading (2000-2999)
    BUNDLE_LOAD_FAILED = 2001
    BUNDLE_FORMAT_UNSUPPORTED = 2002

    # Configuration (3000-3999)
    OPTIONS_PARSE_FAILED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Diagnostics never interrupt the caller. They travel to an injectable
    sink (see ``nlsbundle.diagnostics.sink``) while the localize call still
    produces a best-effort string.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the problem
        resource: Resource name or resolved bundle path involved, if any
        key: Lookup key or index involved, rendered with repr()
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    resource: str | None = None
    key: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            warning[MESSAGE_NOT_EXTERNALIZED]: Message 'Hello' didn't get externalized correctly
              --> locales/main
              = key: 'greeting'
              = help: Add the key to the bundle or regenerate it

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
