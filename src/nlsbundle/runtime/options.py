"""Localization options: the configuration value threaded through nlsbundle.

Options are immutable. Configuring produces a new NlsOptions value by
merging an update into the current one; the resolver and every localizer
hold the value they were built with.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from nlsbundle.constants import (
    OPTION_CACHE_LANGUAGE_RESOLUTION,
    OPTION_CACHE_SCOPE,
    OPTION_LOCALE,
    PSEUDO_LOCALE,
)
from nlsbundle.diagnostics import ErrorTemplate, OptionsParseError
from nlsbundle.enums import CacheScope
from nlsbundle.locale_utils import normalize_locale

__all__ = [
    "NlsOptions",
    "OptionsInput",
    "parse_options",
]

type OptionsInput = NlsOptions | Mapping[str, Any] | str | None
"""Anything configure() accepts: a value, a mapping, or a JSON string."""

_SNAKE_CACHE_LANGUAGE_RESOLUTION = "cache_language_resolution"
_SNAKE_CACHE_SCOPE = "cache_scope"


@dataclass(frozen=True, slots=True)
class NlsOptions:
    """Immutable localization options.

    Attributes:
        locale: Lower-cased locale tag, or None for the generic bundle.
        cache_language_resolution: Reuse the resolved bundle suffix instead of
            probing the filesystem on every load (default: True).
        cache_scope: Whether the resolved suffix is shared by all resources
            (GLOBAL, default) or remembered per resource stem.

    Example:
        >>> options = NlsOptions().merge({"locale": "de-DE"})
        >>> options.locale
        'de-de'
        >>> NlsOptions(locale="pseudo").pseudo
        True
    """

    locale: str | None = None
    cache_language_resolution: bool = True
    cache_scope: CacheScope = CacheScope.GLOBAL

    @property
    def pseudo(self) -> bool:
        """True when the pseudo locale is configured."""
        return self.locale == PSEUDO_LOCALE

    def merge(self, update: Mapping[str, Any] | NlsOptions | None) -> NlsOptions:
        """Return a copy with the recognized fields of ``update`` applied.

        A string ``locale`` is lower-cased and replaces the current one. A
        boolean ``cacheLanguageResolution`` replaces the current flag. A
        ``cacheScope`` naming a CacheScope member replaces the scope. Absent
        fields, and fields of the wrong type, keep their current values.

        Args:
            update: Mapping using wire (camelCase) or snake_case keys, another
                NlsOptions (all of its fields win), or None.

        Returns:
            New NlsOptions (``self`` when nothing changes)
        """
        if update is None:
            return self
        if isinstance(update, NlsOptions):
            return update

        changes: dict[str, Any] = {}

        locale = update.get(OPTION_LOCALE)
        if isinstance(locale, str):
            changes["locale"] = normalize_locale(locale)

        cache = update.get(
            OPTION_CACHE_LANGUAGE_RESOLUTION, update.get(_SNAKE_CACHE_LANGUAGE_RESOLUTION)
        )
        if isinstance(cache, bool):
            changes["cache_language_resolution"] = cache

        scope = update.get(OPTION_CACHE_SCOPE, update.get(_SNAKE_CACHE_SCOPE))
        if isinstance(scope, str) and scope in CacheScope:
            changes["cache_scope"] = CacheScope(scope)

        if not changes:
            return self
        return replace(self, **changes)


def parse_options(raw: OptionsInput) -> Mapping[str, Any] | NlsOptions | None:
    """Decode the argument of configure() into something merge() accepts.

    Args:
        raw: NlsOptions, mapping, JSON object string, or None

    Returns:
        The decoded update (None means "no changes")

    Raises:
        OptionsParseError: If a string is not valid JSON or does not decode
            to a JSON object (or null)
    """
    if not isinstance(raw, str):
        return raw

    try:
        decoded = json.loads(raw)
    except ValueError as e:
        raise OptionsParseError(ErrorTemplate.options_parse_failed(raw, str(e))) from e

    if decoded is None or isinstance(decoded, dict):
        return decoded
    reason = f"expected a JSON object, got {type(decoded).__name__}"
    raise OptionsParseError(ErrorTemplate.options_parse_failed(raw, reason))
