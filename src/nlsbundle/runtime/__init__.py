"""Runtime: options, message formatting, and bundle lookup.

Submodules:
    options   - NlsOptions and parse_options
    formatter - format_message and pseudo_localize
    lookup    - bundle variants, classify_bundle, Localizer

Python 3.13+. Zero external dependencies.
"""

from .formatter import format_message, pseudo_localize
from .lookup import (
    DirectBundle,
    IndexedBundle,
    KeyedBundle,
    LocalizeInfo,
    LocalizeKey,
    LocalizeResult,
    Localizer,
    MessageBundle,
    classify_bundle,
)
from .options import NlsOptions, OptionsInput, parse_options

__all__ = [
    "DirectBundle",
    "IndexedBundle",
    "KeyedBundle",
    "LocalizeInfo",
    "LocalizeKey",
    "LocalizeResult",
    "Localizer",
    "MessageBundle",
    "NlsOptions",
    "OptionsInput",
    "classify_bundle",
    "format_message",
    "parse_options",
    "pseudo_localize",
]
