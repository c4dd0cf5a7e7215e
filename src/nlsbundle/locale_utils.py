"""Locale utilities for bundle resolution.

Centralizes locale normalization and the dash-truncation fallback chain used
by the resolver, so every component agrees on which bundle suffixes a locale
can produce.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

from nlsbundle.constants import LOCALE_SEPARATOR

__all__ = [
    "get_system_locale",
    "iter_locale_fallbacks",
    "locale_fallback_chain",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Normalize a locale tag for bundle lookup.

    Locale tags are case-insensitive, while bundle file names are not. The
    configured locale is lower-cased and otherwise stored verbatim, so bundle
    files must use lower-case tags (``main.nls.de-de.json``).

    Args:
        locale_code: Locale tag (e.g., "de-DE", "zh-Hans-CN")

    Returns:
        Lower-cased tag (e.g., "de-de", "zh-hans-cn")

    Example:
        >>> normalize_locale("de-DE")
        'de-de'
        >>> normalize_locale("pseudo")
        'pseudo'
    """
    return locale_code.lower()


def iter_locale_fallbacks(locale_code: str) -> Iterator[str]:
    """Yield the locale and each shorter dash-truncated prefix.

    Truncation cuts at the last separator, and only when that separator is
    not the first character. Candidates strictly shrink.

    Example:
        >>> list(iter_locale_fallbacks("zh-hans-cn"))
        ['zh-hans-cn', 'zh-hans', 'zh']
    """
    locale = locale_code
    while locale:
        yield locale
        index = locale.rfind(LOCALE_SEPARATOR)
        if index <= 0:
            return
        locale = locale[:index]


def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Return the full fallback chain for a locale, most specific first.

    Args:
        locale_code: Locale tag, already normalized

    Returns:
        Tuple of candidate locales (empty for an empty tag)

    Example:
        >>> locale_fallback_chain("de-de")
        ('de-de', 'de')
    """
    return tuple(iter_locale_fallbacks(locale_code))


def get_system_locale() -> str | None:
    """Detect a locale tag from the environment.

    Detection order: LC_ALL, LC_MESSAGES, LANG. The encoding suffix is
    stripped, POSIX underscores become dashes, and the result is normalized,
    so ``de_DE.UTF-8`` becomes ``de-de``. "C" and "POSIX" are ignored.

    Not consulted automatically: pass the result to ``configure`` explicitly.

    Returns:
        Detected locale tag, or None if the environment names none.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de-de'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX"):
            # Strip encoding and modifier (e.g., ".UTF-8", "@euro")
            locale_code = value.split(".")[0].split("@")[0]
            if locale_code and locale_code not in ("C", "POSIX"):
                return normalize_locale(locale_code.replace("_", LOCALE_SEPARATOR))
    return None
