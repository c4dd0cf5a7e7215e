"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating load_message_bundle call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

__all__ = [
    "BundleSuffix",
    "ExistsCheck",
    "LocaleCode",
    "ResourceName",
    "ResourcePath",
]

type LocaleCode = str
"""Lower-cased, dash-separated locale tag (e.g., 'de', 'de-de', 'zh-tw')."""

type ResourceName = str
"""Resource identifier as passed to load_message_bundle (e.g., 'out/main', 'out/main.js')."""

type ResourcePath = str
"""Concrete bundle file path: stem plus suffix (e.g., 'out/main.nls.de.json')."""

type BundleSuffix = str
"""Resolved bundle suffix (e.g., '.nls.json', '.nls.de.json')."""

type ExistsCheck = Callable[[str], bool]
"""Predicate reporting whether a candidate bundle file exists."""
