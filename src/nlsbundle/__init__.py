"""nlsbundle - runtime string localization from JSON message bundles.

Resolves the most specific ``<stem>.nls.<locale>.json`` bundle for a resource,
looks messages up by index or key, and formats ``{n}`` placeholders. Every
failure degrades to the caller's fallback message; nothing raises.

Public API:
    config - Configure the default context; returns load_message_bundle
    load_message_bundle - Load a bundle; returns a Localizer
    Localization - An isolated locale context
    Localizer - The localize callable: localize(key, message, *args)
    LocalizeInfo - Key with translator comments
    NlsOptions - Immutable options value
    format_message - Placeholder substitution (with optional pseudo-localization)

Exceptions:
    NlsError - Base exception class (raised internally, reported as diagnostics)

Submodules:
    nlsbundle.diagnostics - Diagnostic codes, formatter, sinks
    nlsbundle.localization - Resolver, loaders, facade
    nlsbundle.runtime - Options, formatter, lookup strategies
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import Diagnostic, DiagnosticCode, DiagnosticCollector, NlsError
from .enums import BundleShape, CacheScope
from .localization import Localization, config, load_message_bundle
from .runtime import LocalizeInfo, Localizer, NlsOptions, format_message

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("nlsbundle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BundleShape",
    "CacheScope",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "LocalizeInfo",
    "Localization",
    "Localizer",
    "NlsError",
    "NlsOptions",
    "__version__",
    "config",
    "format_message",
    "load_message_bundle",
]
