"""nlsbundle exception hierarchy with structured diagnostics.

Exceptions are raised inside the library and converted into diagnostics at
the public entry points; callers of configure/load/localize never see them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class NlsError(Exception):
    """Base exception for all nlsbundle errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NlsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class OptionsParseError(NlsError):
    """Encoded options string is not valid JSON or not a JSON object.

    Fallback: prior configuration is kept unchanged.
    """


class BundleLoadError(NlsError):
    """Bundle file missing, unreadable, malformed, or of unsupported shape.

    Fallback: the bundle degrades to direct formatting of fallback messages.
    """
