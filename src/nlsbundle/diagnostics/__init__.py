"""Diagnostic system for nlsbundle.

Provides structured diagnostics with codes and hints, the exceptions that
carry them, and the sinks that receive them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import BundleLoadError, NlsError, OptionsParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .sink import DiagnosticCollector, DiagnosticSink, LoggingSink, default_sink
from .templates import ErrorTemplate

__all__ = [
    "BundleLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DiagnosticFormatter",
    "DiagnosticSink",
    "ErrorTemplate",
    "LoggingSink",
    "NlsError",
    "OptionsParseError",
    "OutputFormat",
    "default_sink",
]
