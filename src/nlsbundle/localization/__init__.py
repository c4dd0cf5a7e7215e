"""Localization package: locale resolution, bundle loading, and the facade.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, ResourceName, ResourcePath, ...)
    loading      - BundleLoader protocol, JsonBundleLoader, BundleLoadResult
    resolver     - LocaleResolver (locale fallback and suffix cache)
    orchestrator - Localization facade and module-level config/load functions

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from nlsbundle.enums import CacheScope, LoadStatus
from nlsbundle.localization.loading import (
    BundleLoader,
    BundleLoadResult,
    JsonBundleLoader,
    load_bundle,
    path_exists,
)
from nlsbundle.localization.orchestrator import (
    LoadFunc,
    Localization,
    config,
    get_default_localization,
    load_message_bundle,
    set_default_localization,
)
from nlsbundle.localization.resolver import LocaleResolver, bundle_suffix, strip_extension
from nlsbundle.localization.types import (
    BundleSuffix,
    ExistsCheck,
    LocaleCode,
    ResourceName,
    ResourcePath,
)

__all__ = [
    # Facade
    "Localization",
    "LoadFunc",
    "config",
    "load_message_bundle",
    "get_default_localization",
    "set_default_localization",
    # Resolution
    "LocaleResolver",
    "CacheScope",
    "bundle_suffix",
    "strip_extension",
    # Loading
    "BundleLoader",
    "JsonBundleLoader",
    "BundleLoadResult",
    "LoadStatus",
    "load_bundle",
    "path_exists",
    # Type aliases for user code type annotations
    "BundleSuffix",
    "ExistsCheck",
    "LocaleCode",
    "ResourceName",
    "ResourcePath",
]
