"""Tests for bundle lookup strategies, classify_bundle, and Localizer."""

from __future__ import annotations

import pytest

from nlsbundle.diagnostics import DiagnosticCode, DiagnosticCollector
from nlsbundle.enums import BundleShape
from nlsbundle.runtime.lookup import (
    DirectBundle,
    IndexedBundle,
    KeyedBundle,
    LocalizeInfo,
    LocalizeResult,
    Localizer,
    classify_bundle,
)


class TestClassifyBundle:
    """Choosing the variant from parsed content."""

    def test_list_is_indexed(self) -> None:
        """Arrays become IndexedBundle."""
        bundle = classify_bundle(["a", "b"])
        assert isinstance(bundle, IndexedBundle)
        assert bundle.shape == BundleShape.INDEXED
        assert bundle.messages == ("a", "b")

    def test_keys_and_messages_is_structured(self) -> None:
        """Objects with keys and messages become structured IndexedBundle."""
        bundle = classify_bundle({"keys": ["k1", "k2"], "messages": ["a", "b"]})
        assert isinstance(bundle, IndexedBundle)
        assert bundle.shape == BundleShape.STRUCTURED
        assert bundle.keys == ("k1", "k2")

    def test_messages_without_keys_is_keyed(self) -> None:
        """Both keys and messages are required for the structured shape."""
        bundle = classify_bundle({"messages": ["a"]})
        assert isinstance(bundle, KeyedBundle)

    def test_null_keys_is_structured(self) -> None:
        """A null keys entry still counts as present."""
        bundle = classify_bundle({"keys": None, "messages": ["a", "b"]})
        assert isinstance(bundle, IndexedBundle)
        assert bundle.shape == BundleShape.STRUCTURED
        assert bundle.lookup(1, None, (), pseudo=False).text == "b"

    def test_plain_object_is_keyed(self) -> None:
        """Other objects become KeyedBundle."""
        bundle = classify_bundle({"hello": "Hallo"})
        assert isinstance(bundle, KeyedBundle)
        assert bundle.shape == BundleShape.KEYED

    @pytest.mark.parametrize("data", ["text", 42, 1.5, True, None])
    def test_unsupported(self, data: object) -> None:
        """Scalars and null are unsupported."""
        assert classify_bundle(data) is None

    def test_keyed_bundle_is_read_only(self) -> None:
        """The mapping cannot be mutated after load."""
        source = {"hello": "Hallo"}
        bundle = classify_bundle(source)
        assert isinstance(bundle, KeyedBundle)
        source["hello"] = "changed"
        assert bundle.messages["hello"] == "Hallo"
        with pytest.raises(TypeError):
            bundle.messages["hello"] = "x"  # type: ignore[index]


class TestIndexedBundle:
    """Lookup by position."""

    bundle = IndexedBundle(("Guten Tag {0}", "Auf Wiedersehen"))

    def test_index_lookup(self) -> None:
        """An in-range index formats the template."""
        result = self.bundle.lookup(0, None, ("Welt",), pseudo=False)
        assert result == LocalizeResult("Guten Tag Welt")
        assert result.ok

    def test_out_of_range_returns_nothing(self) -> None:
        """Out-of-range index yields no text, not the fallback."""
        result = self.bundle.lookup(5, "Fallback", (), pseudo=False)
        assert result.text is None
        assert not result.ok
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.INDEX_OUT_OF_BOUNDS]

    def test_negative_index_out_of_range(self) -> None:
        """Negative indexes are out of range."""
        result = self.bundle.lookup(-1, "Fallback", (), pseudo=False)
        assert result.text is None
        assert result.diagnostics[0].code == DiagnosticCode.INDEX_OUT_OF_BOUNDS

    def test_string_key_uses_fallback(self) -> None:
        """A string key with a fallback message formats the fallback."""
        result = self.bundle.lookup("hello", "Hello {0}", ("you",), pseudo=False)
        assert result.text == "Hello you"
        assert result.diagnostics[0].code == DiagnosticCode.MESSAGE_NOT_EXTERNALIZED
        assert result.diagnostics[0].severity == "warning"

    def test_string_key_without_fallback_is_misuse(self) -> None:
        """A non-index key with no fallback produces nothing."""
        result = self.bundle.lookup("hello", None, (), pseudo=False)
        assert result.text is None
        assert result.diagnostics[0].code == DiagnosticCode.INVALID_LOCALIZE_KEY

    def test_integral_float_is_an_index(self) -> None:
        """1.0 looks up the same message as 1."""
        result = self.bundle.lookup(1.0, "Fallback", (), pseudo=False)
        assert result == LocalizeResult("Auf Wiedersehen")

    @pytest.mark.parametrize("key", [0.5, float("nan"), float("inf")])
    def test_fractional_float_out_of_range(self, key: float) -> None:
        """Non-integral numbers address no message."""
        result = self.bundle.lookup(key, "Fallback", (), pseudo=False)
        assert result.text is None
        assert result.diagnostics[0].code == DiagnosticCode.INDEX_OUT_OF_BOUNDS

    def test_bool_is_not_an_index(self) -> None:
        """True is not index 1."""
        result = self.bundle.lookup(True, None, (), pseudo=False)
        assert result.diagnostics[0].code == DiagnosticCode.INVALID_LOCALIZE_KEY

    def test_structured_lookup_ignores_keys(self) -> None:
        """Structured bundles look up by position, never by key."""
        bundle = IndexedBundle(
            ("Guten Tag Welt", "Auf Wiedersehen Welt"), keys=("hello", "goodBye")
        )
        assert bundle.lookup(1, None, (), pseudo=False).text == "Auf Wiedersehen Welt"
        by_key = bundle.lookup("goodBye", "Good bye", (), pseudo=False)
        assert by_key.text == "Good bye"
        assert by_key.diagnostics[0].code == DiagnosticCode.MESSAGE_NOT_EXTERNALIZED

    def test_non_string_entry_uses_fallback(self) -> None:
        """A null entry in the array behaves like a missing message."""
        bundle = IndexedBundle((None,))
        result = bundle.lookup(0, "Fallback", (), pseudo=False)
        assert result.text == "Fallback"
        assert result.diagnostics[0].code == DiagnosticCode.MESSAGE_NOT_EXTERNALIZED

    def test_pseudo(self) -> None:
        """Pseudo-localization applies to bundle templates."""
        result = self.bundle.lookup(1, None, (), pseudo=True)
        assert result.text == "［Auuf Wiieedeerseeheen］"


class TestKeyedBundle:
    """Lookup by string key."""

    bundle = KeyedBundle({"hello": "Guten Tag {0}", "broken": 7})

    def test_key_lookup(self) -> None:
        """Present keys format their template."""
        assert self.bundle.lookup("hello", "Hello {0}", ("Welt",), pseudo=False).text == (
            "Guten Tag Welt"
        )

    def test_missing_key_formats_fallback(self) -> None:
        """Missing keys degrade to the fallback message with arguments."""
        result = self.bundle.lookup("missing", "Hello {0}", ("World",), pseudo=False)
        assert result.text == "Hello World"
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.MESSAGE_NOT_EXTERNALIZED]
        assert result.diagnostics[0].key == "'missing'"

    def test_missing_key_without_fallback(self) -> None:
        """No fallback means no text, still a not-externalized diagnostic."""
        result = self.bundle.lookup("missing", None, (), pseudo=False)
        assert result.text is None
        assert result.diagnostics[0].code == DiagnosticCode.MESSAGE_NOT_EXTERNALIZED

    def test_non_string_value_formats_fallback(self) -> None:
        """A non-string value is treated as missing."""
        assert self.bundle.lookup("broken", "Fallback", (), pseudo=False).text == "Fallback"

    def test_localize_info_key(self) -> None:
        """LocalizeInfo looks up by its key; comments have no effect."""
        info = LocalizeInfo("hello", comment=("Greeting on the start page",))
        assert self.bundle.lookup(info, None, ("Welt",), pseudo=False).text == "Guten Tag Welt"

    def test_integer_key_is_misuse(self) -> None:
        """Keyed bundles reject integer keys without using the fallback."""
        result = self.bundle.lookup(0, "Fallback", (), pseudo=False)
        assert result.text is None
        assert result.diagnostics[0].code == DiagnosticCode.INVALID_LOCALIZE_KEY


class TestDirectBundle:
    """No bundle: format the fallback."""

    def test_formats_fallback(self) -> None:
        """The key is ignored and the fallback formatted."""
        result = DirectBundle().lookup("key", "{0} {1}", ("Hello", "World"), pseudo=False)
        assert result == LocalizeResult("Hello World")

    def test_none_fallback(self) -> None:
        """None fallback gives None without diagnostics."""
        assert DirectBundle().lookup(0, None, (), pseudo=False) == LocalizeResult(None)

    def test_pseudo(self) -> None:
        """Pseudo applies to the fallback."""
        result = DirectBundle().lookup("key", "Hello {0} World", ("bright",), pseudo=True)
        assert result.text == "［Heelloo bright Woorld］"


class TestLocalizer:
    """The public localize callable."""

    def test_call_returns_text_and_reports(self, collector: DiagnosticCollector) -> None:
        """Diagnostics go to the sink; the text is returned."""
        localize = Localizer(KeyedBundle({}), sink=collector, resource="res/data")
        assert localize("missing", "Hello {0}", "World") == "Hello World"
        assert collector.codes == (DiagnosticCode.MESSAGE_NOT_EXTERNALIZED,)
        assert collector.diagnostics[0].resource == "res/data"

    def test_resolved_path_attached_to_diagnostics(self, collector: DiagnosticCollector) -> None:
        """Diagnostics name the bundle file when known."""
        localize = Localizer(
            IndexedBundle(()),
            sink=collector,
            resource="res/data",
            resolved_path="res/data.nls.de.json",
        )
        assert localize(3) is None
        assert collector.diagnostics[0].resource == "res/data.nls.de.json"

    def test_localize_result_does_not_report(self, collector: DiagnosticCollector) -> None:
        """localize_result returns diagnostics without sending them."""
        localize = Localizer(IndexedBundle(()), sink=collector)
        result = localize.localize_result(0, None)
        assert result.diagnostics
        assert len(collector) == 0

    @pytest.mark.parametrize("key", ["k", 0, -3, 2.5, None, object(), LocalizeInfo("k")])
    @pytest.mark.parametrize(
        "bundle",
        [
            IndexedBundle(("a",)),
            IndexedBundle(("a",), keys=("k",)),
            KeyedBundle({"k": "a"}),
            DirectBundle(),
        ],
    )
    def test_never_raises(
        self, bundle: object, key: object, collector: DiagnosticCollector
    ) -> None:
        """Any key type against any bundle returns a string or None."""
        localize = Localizer(bundle, sink=collector)  # type: ignore[arg-type]
        result = localize(key, "fallback")  # type: ignore[arg-type]
        assert result is None or isinstance(result, str)

    def test_shape_and_repr(self) -> None:
        """Localizer exposes the bundle shape."""
        localize = Localizer(DirectBundle())
        assert localize.shape == BundleShape.DIRECT
        assert "direct" in repr(localize)
