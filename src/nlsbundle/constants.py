"""Shared constants for nlsbundle.

Centralizes the on-disk naming convention for message bundles and the
pseudo-localization markers. Placing constants here avoids circular imports
between the runtime and localization packages.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Bundle file naming
    "NLS_INFIX",
    "JSON_EXTENSION",
    "GENERIC_SUFFIX",
    "LOCALE_SEPARATOR",
    # Pseudo-localization
    "PSEUDO_LOCALE",
    "PSEUDO_OPEN",
    "PSEUDO_CLOSE",
    "PSEUDO_VOWELS",
    # Options wire format
    "OPTION_LOCALE",
    "OPTION_CACHE_LANGUAGE_RESOLUTION",
    "OPTION_CACHE_SCOPE",
]

# ============================================================================
# BUNDLE FILE NAMING
# ============================================================================
#
# Bundles live next to the resource they localize:
#     <stem>.nls.json            generic (untranslated) bundle
#     <stem>.nls.<locale>.json   locale-specific bundle, e.g. .nls.de.json
#
# <locale> is the configured locale or one of its dash-truncated prefixes.

NLS_INFIX: str = ".nls."
JSON_EXTENSION: str = ".json"
GENERIC_SUFFIX: str = ".nls.json"
LOCALE_SEPARATOR: str = "-"

# ============================================================================
# PSEUDO-LOCALIZATION
# ============================================================================

# Configuring this locale turns on pseudo-localization and always selects the
# generic bundle.
PSEUDO_LOCALE: str = "pseudo"

# Fullwidth square brackets (U+FF3B, U+FF3D) are visually distinct from ASCII
# brackets, so truncated or concatenated strings stand out in rendered UI.
PSEUDO_OPEN: str = "\uff3b"
PSEUDO_CLOSE: str = "\uff3d"

# Only lower-case vowels are doubled.
PSEUDO_VOWELS: str = "aouei"

# ============================================================================
# OPTIONS WIRE FORMAT
# ============================================================================

OPTION_LOCALE: str = "locale"
OPTION_CACHE_LANGUAGE_RESOLUTION: str = "cacheLanguageResolution"
OPTION_CACHE_SCOPE: str = "cacheScope"
