"""Bundle lookup strategies and the Localizer callable.

A loaded bundle is classified once, at load time, into one of three
variants. Each variant implements ``lookup`` over its own backing data:

    IndexedBundle  - sequence of templates, looked up by integer index
                     (flat arrays and structured {keys, messages} bundles)
    KeyedBundle    - mapping of key to template, looked up by string key
    DirectBundle   - no data; formats the caller's fallback message

Lookups return a LocalizeResult: the text (or None) plus the diagnostics
produced on the way. Localizer turns that into the public contract: return
the best-effort string, hand diagnostics to the sink, never raise.

Bundles are read-only after construction and safe to share between threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from nlsbundle.diagnostics import Diagnostic, DiagnosticSink, ErrorTemplate, default_sink
from nlsbundle.enums import BundleShape
from nlsbundle.runtime.formatter import format_message

__all__ = [
    "DirectBundle",
    "IndexedBundle",
    "KeyedBundle",
    "LocalizeInfo",
    "LocalizeKey",
    "LocalizeResult",
    "Localizer",
    "MessageBundle",
    "classify_bundle",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocalizeInfo:
    """Key with translator comments.

    Extraction tooling reads ``comment``; at runtime only ``key`` matters.

    Attributes:
        key: Message key
        comment: Notes for translators
    """

    key: str
    comment: tuple[str, ...] = ()


type LocalizeKey = str | int | LocalizeInfo
"""First argument of a localize call."""


@dataclass(frozen=True, slots=True)
class LocalizeResult:
    """Outcome of one localize call.

    Attributes:
        text: Formatted message, or None when no message could be produced
        diagnostics: Problems found while producing it
    """

    text: str | None
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """True when a message was produced."""
        return self.text is not None


def _format(message: object, args: Sequence[object], pseudo: bool) -> str | None:
    if not isinstance(message, str):
        return None
    return format_message(message, args, pseudo=pseudo)


def _not_externalized(
    key: object, message: str | None, args: Sequence[object], pseudo: bool
) -> LocalizeResult:
    return LocalizeResult(
        _format(message, args, pseudo),
        (ErrorTemplate.message_not_externalized(str(message), key),),
    )


def _as_index(key: object) -> int | float | None:
    """Numeric value of an index key, or None when ``key`` is not a number.

    Integral floats count as indexes. Other floats (fractions, NaN,
    infinities) are returned as-is so they land out of bounds.
    """
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, float):
        return int(key) if key.is_integer() else key
    return None


@dataclass(frozen=True, slots=True)
class IndexedBundle:
    """Templates addressed by position.

    Structured bundles keep their ``keys`` for tooling, but lookups always go
    by index into ``messages``; a string key never matches ``keys``.

    Attributes:
        messages: Templates in bundle order
        keys: Source keys of a structured bundle (None for flat arrays)
    """

    messages: tuple[Any, ...]
    keys: tuple[Any, ...] | None = None

    @property
    def shape(self) -> BundleShape:
        return BundleShape.INDEXED if self.keys is None else BundleShape.STRUCTURED

    def lookup(
        self, key: object, message: str | None, args: Sequence[object], *, pseudo: bool
    ) -> LocalizeResult:
        index = _as_index(key)
        if index is not None:
            if not isinstance(index, int) or not 0 <= index < len(self.messages):
                return LocalizeResult(
                    None, (ErrorTemplate.index_out_of_bounds(index, len(self.messages)),)
                )
            template = self.messages[index]
            if not isinstance(template, str):
                return _not_externalized(key, message, args, pseudo)
            return LocalizeResult(format_message(template, args, pseudo=pseudo))

        if isinstance(message, str):
            return _not_externalized(key, message, args, pseudo)
        return LocalizeResult(None, (ErrorTemplate.invalid_localize_key(key),))


@dataclass(frozen=True, slots=True)
class KeyedBundle:
    """Templates addressed by string key.

    Attributes:
        messages: Read-only mapping of key to template
    """

    messages: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def shape(self) -> BundleShape:
        return BundleShape.KEYED

    def lookup(
        self, key: object, message: str | None, args: Sequence[object], *, pseudo: bool
    ) -> LocalizeResult:
        if isinstance(key, LocalizeInfo):
            key = key.key
        if not isinstance(key, str):
            return LocalizeResult(None, (ErrorTemplate.invalid_localize_key(key),))

        template = self.messages.get(key)
        if not isinstance(template, str):
            return _not_externalized(key, message, args, pseudo)
        return LocalizeResult(format_message(template, args, pseudo=pseudo))


@dataclass(frozen=True, slots=True)
class DirectBundle:
    """No bundle: the fallback message is the message."""

    @property
    def shape(self) -> BundleShape:
        return BundleShape.DIRECT

    def lookup(
        self, key: object, message: str | None, args: Sequence[object], *, pseudo: bool
    ) -> LocalizeResult:
        del key  # unused: there is nothing to look up
        return LocalizeResult(_format(message, args, pseudo))


type MessageBundle = IndexedBundle | KeyedBundle | DirectBundle


def classify_bundle(data: object) -> MessageBundle | None:
    """Pick the lookup variant for parsed bundle content.

    Args:
        data: Parsed JSON content

    Returns:
        IndexedBundle for a list, or for an object with ``messages`` (a list)
        and a ``keys`` entry, which may be null; KeyedBundle for any other
        object; None for content of unsupported shape.
    """
    match data:
        case list():
            return IndexedBundle(tuple(data))
        case {"messages": list() as messages, "keys": keys}:
            source_keys = tuple(keys) if isinstance(keys, list) else ()
            return IndexedBundle(tuple(messages), keys=source_keys)
        case dict():
            return KeyedBundle(MappingProxyType(dict(data)))
        case _:
            return None


class Localizer:
    """The localize function returned by load_message_bundle.

    Call it with a key (or index, or LocalizeInfo), the fallback message, and
    positional arguments:

        >>> localize = load_message_bundle("locales/main")
        >>> localize("greeting", "Hello {0}", "Ada")
        'Hallo Ada'

    Never raises. Returns None when no message can be produced (out-of-range
    index, misuse, or a None fallback); diagnostics go to the sink.

    Attributes:
        bundle: Lookup variant backing this localizer
        resource: Resource name it was loaded for (None for direct)
        resolved_path: Bundle file it was loaded from (None when degraded)
        pseudo: Pseudo-localization flag captured at load time
    """

    __slots__ = ("_sink", "bundle", "pseudo", "resolved_path", "resource")

    def __init__(
        self,
        bundle: MessageBundle,
        *,
        pseudo: bool = False,
        sink: DiagnosticSink = default_sink,
        resource: str | None = None,
        resolved_path: str | None = None,
    ) -> None:
        self.bundle = bundle
        self.pseudo = pseudo
        self.resource = resource
        self.resolved_path = resolved_path
        self._sink = sink

    def __repr__(self) -> str:
        return f"Localizer(shape={self.shape}, resource={self.resource!r})"

    @property
    def shape(self) -> BundleShape:
        return self.bundle.shape

    def __call__(self, key: LocalizeKey, message: str | None = None, *args: object) -> str | None:
        result = self.localize_result(key, message, *args)
        for diagnostic in result.diagnostics:
            self._sink(diagnostic)
        return result.text

    def localize_result(
        self, key: LocalizeKey, message: str | None = None, *args: object
    ) -> LocalizeResult:
        """Look up and format without reporting diagnostics."""
        result = self.bundle.lookup(key, message, args, pseudo=self.pseudo)
        if result.diagnostics:
            logger.debug(
                "Localize %r in %s produced %d diagnostic(s)",
                key,
                self.resource or "<direct>",
                len(result.diagnostics),
            )
        if self.resource is not None and result.diagnostics:
            result = LocalizeResult(
                result.text,
                tuple(
                    d if d.resource else replace(d, resource=self.resolved_path or self.resource)
                    for d in result.diagnostics
                ),
            )
        return result

