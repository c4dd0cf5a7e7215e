"""Locale resolution: which bundle file a resource loads.

Given ``out/main.js`` and locale ``de-de``, the resolver probes

    out/main.nls.de-de.json
    out/main.nls.de.json

and returns the first that exists, or ``out/main.nls.json`` when none does.
Pseudo-localization and an unset locale go straight to the generic bundle.

The resolved suffix is cached when ``cache_language_resolution`` is on. With
CacheScope.GLOBAL (the default) one suffix serves every resource: the first
resolution decides the language for the rest of the context's lifetime, and
later resources are never probed. CacheScope.PER_RESOURCE probes each stem
once.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import threading

from nlsbundle.constants import GENERIC_SUFFIX, JSON_EXTENSION, NLS_INFIX
from nlsbundle.enums import CacheScope
from nlsbundle.locale_utils import iter_locale_fallbacks
from nlsbundle.localization.loading import path_exists
from nlsbundle.localization.types import BundleSuffix, ExistsCheck, ResourceName, ResourcePath
from nlsbundle.runtime.options import NlsOptions

__all__ = ["LocaleResolver", "bundle_suffix", "strip_extension"]

logger = logging.getLogger(__name__)

# Cache key used for every stem under CacheScope.GLOBAL.
_GLOBAL_KEY = ""


def bundle_suffix(locale: str | None = None) -> BundleSuffix:
    """Bundle suffix for a locale, or the generic suffix for None.

    Example:
        >>> bundle_suffix("de")
        '.nls.de.json'
        >>> bundle_suffix()
        '.nls.json'
    """
    if not locale:
        return GENERIC_SUFFIX
    return f"{NLS_INFIX}{locale}{JSON_EXTENSION}"


def strip_extension(resource: ResourceName) -> str:
    """Drop the file extension of the last path component, if any.

    Names whose only dot is leading (``.hidden``) keep it.
    """
    stem, _ext = os.path.splitext(resource)
    return stem


class LocaleResolver:
    """Resolve resource names to concrete bundle paths.

    Holds an immutable NlsOptions value and the resolved-language cache.
    Cache access is serialized, so a resolver may be shared between threads.

    Args:
        options: Localization options
        exists: Existence check for candidate files (default: filesystem)
    """

    __slots__ = ("_cache", "_exists", "_lock", "_options")

    def __init__(
        self, options: NlsOptions | None = None, *, exists: ExistsCheck = path_exists
    ) -> None:
        self._options = options or NlsOptions()
        self._exists = exists
        self._cache: dict[str, BundleSuffix] = {}
        self._lock = threading.Lock()

    @property
    def options(self) -> NlsOptions:
        return self._options

    def with_options(self, options: NlsOptions) -> LocaleResolver:
        """Return a resolver for ``options``.

        The cache carries over unless the locale or cache scope changed.
        """
        resolver = LocaleResolver(options, exists=self._exists)
        if (options.locale, options.cache_scope) == (
            self._options.locale,
            self._options.cache_scope,
        ):
            with self._lock:
                resolver._cache = dict(self._cache)
        return resolver

    def cached_suffix(self, resource: ResourceName | None = None) -> BundleSuffix | None:
        """Return the cached suffix that a resolve() of ``resource`` would reuse.

        Under CacheScope.GLOBAL the resource is irrelevant.
        """
        key = self._cache_key(strip_extension(resource) if resource else _GLOBAL_KEY)
        with self._lock:
            return self._cache.get(key)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def resolve(self, resource: ResourceName) -> ResourcePath:
        """Return the bundle path to load for ``resource``.

        Args:
            resource: Resource name, with or without extension

        Returns:
            Stem plus resolved suffix
        """
        stem = strip_extension(resource)
        return stem + self.resolve_suffix(stem)

    def resolve_suffix(self, stem: str) -> BundleSuffix:
        """Return the bundle suffix for an extension-less stem."""
        options = self._options
        key = self._cache_key(stem)

        if options.cache_language_resolution:
            with self._lock:
                cached = self._cache.get(key)
            if cached is not None:
                return cached

        suffix = self._probe(stem)

        if options.cache_language_resolution:
            with self._lock:
                self._cache[key] = suffix
        return suffix

    def _cache_key(self, stem: str) -> str:
        if self._options.cache_scope == CacheScope.PER_RESOURCE:
            return stem
        return _GLOBAL_KEY

    def _probe(self, stem: str) -> BundleSuffix:
        options = self._options
        if options.pseudo or not options.locale:
            return GENERIC_SUFFIX

        for locale in iter_locale_fallbacks(options.locale):
            candidate = bundle_suffix(locale)
            if self._exists(stem + candidate):
                logger.debug("Resolved %s to %s", stem, candidate)
                return candidate

        logger.debug(
            "No bundle for locale %s at %s; using %s", options.locale, stem, GENERIC_SUFFIX
        )
        return GENERIC_SUFFIX
