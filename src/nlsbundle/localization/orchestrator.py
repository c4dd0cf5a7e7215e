"""Bundle loading facade: configure, resolve, load, dispatch.

Localization is one locale context. It owns an immutable NlsOptions value,
a LocaleResolver, a BundleLoader, and a diagnostic sink, and turns resource
names into Localizer callables:

    resource name -> LocaleResolver -> BundleLoader -> classify_bundle -> Localizer

Key architectural decisions:
- Never raise to the caller: every failure degrades to a DIRECT localizer
  (fallback messages formatted as-is) and a diagnostic on the sink.
- Options are immutable values; configure() swaps in a merged copy. Localizers
  keep the options they were created with.
- Several Localization instances can coexist in one process with different
  locales. The module-level config()/load_message_bundle() functions operate
  on a process-wide default instance.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from nlsbundle.constants import OPTION_LOCALE
from nlsbundle.diagnostics import (
    DiagnosticSink,
    ErrorTemplate,
    OptionsParseError,
    default_sink,
)
from nlsbundle.localization.loading import (
    BundleLoader,
    BundleLoadResult,
    JsonBundleLoader,
    load_bundle,
    path_exists,
)
from nlsbundle.localization.resolver import LocaleResolver
from nlsbundle.localization.types import ExistsCheck, ResourceName
from nlsbundle.runtime.lookup import DirectBundle, Localizer, classify_bundle
from nlsbundle.runtime.options import NlsOptions, OptionsInput, parse_options

__all__ = [
    "LoadFunc",
    "Localization",
    "config",
    "get_default_localization",
    "load_message_bundle",
    "set_default_localization",
]

logger = logging.getLogger(__name__)

type LoadFunc = Callable[..., Localizer]
"""Bound load_message_bundle returned by configure()."""


class Localization:
    """A locale context: options, resolver, loader, and diagnostic sink.

    Example:
        >>> l10n = Localization(NlsOptions(locale="de-de"))
        >>> localize = l10n.load_message_bundle("out/main")
        >>> localize(0, "Hello World")
        'Guten Tag Welt'

    Args:
        options: Initial options (default: NlsOptions())
        loader: Bundle loader (default: JsonBundleLoader())
        exists: Existence check used during locale fallback (default: filesystem)
        sink: Receives diagnostics (default: LoggingSink)
    """

    __slots__ = ("_exists", "_loader", "_resolver", "_sink")

    def __init__(
        self,
        options: NlsOptions | None = None,
        *,
        loader: BundleLoader | None = None,
        exists: ExistsCheck = path_exists,
        sink: DiagnosticSink = default_sink,
    ) -> None:
        self._loader: BundleLoader = loader or JsonBundleLoader()
        self._exists = exists
        self._resolver = LocaleResolver(options, exists=exists)
        self._sink = sink

    def __repr__(self) -> str:
        return f"Localization(options={self.options!r})"

    @property
    def options(self) -> NlsOptions:
        return self._resolver.options

    @property
    def resolver(self) -> LocaleResolver:
        return self._resolver

    @property
    def sink(self) -> DiagnosticSink:
        return self._sink

    def configure(self, options: OptionsInput = None) -> LoadFunc:
        """Apply an options update and return the bound loader.

        Accepts an NlsOptions value, a mapping, or a JSON string. A string
        that fails to parse is reported as OPTIONS_PARSE_FAILED and the
        current options stay in effect. Updating the locale (even to the
        same value) invalidates the resolved-language cache.

        Args:
            options: Options update (None changes nothing)

        Returns:
            This context's load_message_bundle
        """
        try:
            update = parse_options(options)
        except OptionsParseError as e:
            if e.diagnostic is not None:
                self._sink(e.diagnostic)
            return self.load_message_bundle

        current = self._resolver.options
        merged = current.merge(update)
        if _sets_locale(update):
            self._resolver = LocaleResolver(merged, exists=self._exists)
        elif merged != current:
            self._resolver = self._resolver.with_options(merged)
        logger.debug("Configured %r", merged)
        return self.load_message_bundle

    def load_result(self, resource: ResourceName) -> BundleLoadResult:
        """Resolve and load ``resource`` without building a localizer.

        Args:
            resource: Resource name, with or without extension

        Returns:
            BundleLoadResult describing the attempt
        """
        resolved = self._resolver.resolve(resource)
        return load_bundle(self._loader, resource, resolved)

    def load_message_bundle(self, resource: ResourceName | None = None) -> Localizer:
        """Return a localize function for ``resource``.

        Without a resource, or when loading fails, or when the bundle has an
        unsupported shape, the result formats the caller's fallback messages
        directly. Never raises.

        Args:
            resource: Resource name (path without the ``.nls`` suffix; an
                extension such as ``.js`` is stripped)

        Returns:
            Localizer
        """
        pseudo = self.options.pseudo
        if not resource:
            return Localizer(DirectBundle(), pseudo=pseudo, sink=self._sink)

        result = self.load_result(resource)
        if not result.is_success:
            if result.error is not None and result.error.diagnostic is not None:
                self._sink(result.error.diagnostic)
            return Localizer(DirectBundle(), pseudo=pseudo, sink=self._sink, resource=resource)

        bundle = classify_bundle(result.data)
        if bundle is None:
            self._sink(
                ErrorTemplate.bundle_format_unsupported(resource, result.resolved_path, result.data)
            )
            return Localizer(DirectBundle(), pseudo=pseudo, sink=self._sink, resource=resource)

        logger.debug("Bundle %s loaded as %s", result.resolved_path, bundle.shape)
        return Localizer(
            bundle,
            pseudo=pseudo,
            sink=self._sink,
            resource=resource,
            resolved_path=result.resolved_path,
        )


def _sets_locale(update: object) -> bool:
    if isinstance(update, NlsOptions):
        return update.locale is not None
    return isinstance(update, Mapping) and isinstance(update.get(OPTION_LOCALE), str)


# ============================================================================
# PROCESS-WIDE DEFAULT CONTEXT
# ============================================================================

_default_localization = Localization()


def get_default_localization() -> Localization:
    """Return the context used by config() and load_message_bundle()."""
    return _default_localization


def set_default_localization(localization: Localization) -> Localization:
    """Replace the process-wide default context.

    Returns:
        The previous default, so callers (tests in particular) can restore it
    """
    global _default_localization  # noqa: PLW0603
    previous = _default_localization
    _default_localization = localization
    return previous


def config(options: OptionsInput = None) -> LoadFunc:
    """Configure the default context and return its loader.

    Example:
        >>> localize = config({"locale": "de-DE"})("out/main")
    """
    return _default_localization.configure(options)


def load_message_bundle(resource: ResourceName | None = None) -> Localizer:
    """Load a bundle through the default context."""
    return _default_localization.load_message_bundle(resource)
