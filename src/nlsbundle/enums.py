"""Enumerations for nlsbundle type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class BundleShape(StrEnum):
    """Shape of a loaded message bundle, decided once at load time.

    StrEnum provides automatic string conversion: str(BundleShape.KEYED) == "keyed"
    """

    INDEXED = "indexed"
    """Ordered sequence of templates: ["Hello", "Bye"]"""

    STRUCTURED = "structured"
    """Parallel sequences: {"keys": [...], "messages": [...]}"""

    KEYED = "keyed"
    """Mapping from key to template: {"hello": "Hello"}"""

    DIRECT = "direct"
    """No bundle; the caller's fallback message is formatted directly."""


class LoadStatus(StrEnum):
    """Outcome of loading a single bundle file."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


class CacheScope(StrEnum):
    """Granularity of the resolved-language cache.

    GLOBAL keeps one suffix for every resource: once any resource resolved to
    ``.nls.de.json``, every later resource reuses that suffix without probing
    the filesystem. PER_RESOURCE remembers the suffix per resource stem.
    """

    GLOBAL = "global"
    PER_RESOURCE = "per_resource"


__all__ = [
    "BundleShape",
    "CacheScope",
    "LoadStatus",
]
