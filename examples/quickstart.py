"""Quickstart example for nlsbundle.

This example demonstrates loading message bundles with locale fallback,
keyed and indexed lookups, pseudo-localization, and diagnostics.

Note: The examples write throwaway bundles to a temporary directory. Real
applications ship ``<module>.nls.json`` and ``<module>.nls.<locale>.json``
files next to the module that loads them.
"""

import json
import tempfile
from pathlib import Path

from nlsbundle import DiagnosticCollector, Localization, LocalizeInfo, NlsOptions, config

with tempfile.TemporaryDirectory() as tmpdir:
    root = Path(tmpdir)
    (root / "main.nls.json").write_text(
        json.dumps({"greeting": "Hello, {0}!", "files": "{0} file(s) saved"}), encoding="utf-8"
    )
    (root / "main.nls.de.json").write_text(
        json.dumps({"greeting": "Hallo, {0}!", "files": "{0} Datei(en) gespeichert"}),
        encoding="utf-8",
    )
    (root / "menu.nls.de.json").write_text(
        json.dumps(["Datei", "Bearbeiten", "Ansicht"]), encoding="utf-8"
    )

    # Example 1: Keyed bundle with locale fallback (de-DE -> de)
    print("=" * 50)
    print("Example 1: Keyed Lookup")
    print("=" * 50)

    localize = config({"locale": "de-DE"})(str(root / "main.js"))
    print(localize("greeting", "Hello, {0}!", "Anna"))
    # Output: Hallo, Anna!
    print(localize(LocalizeInfo("files", comment=("{0} is a count",)), "{0} file(s) saved", 3))
    # Output: 3 Datei(en) gespeichert

    # Example 2: Indexed bundle
    print("\n" + "=" * 50)
    print("Example 2: Indexed Lookup")
    print("=" * 50)

    menu = config({"locale": "de-DE"})(str(root / "menu"))
    print([menu(i, None) for i in range(3)])
    # Output: ['Datei', 'Bearbeiten', 'Ansicht']

    # Example 3: Pseudo-localization
    print("\n" + "=" * 50)
    print("Example 3: Pseudo-Localization")
    print("=" * 50)

    pseudo = Localization(NlsOptions(locale="pseudo")).load_message_bundle(str(root / "main"))
    print(pseudo("greeting", "Hello, {0}!", "Anna"))
    # Output: ［Heelloo, Anna!］

    # Example 4: Reporting stray lookups
    print("\n" + "=" * 50)
    print("Example 4: Diagnostics")
    print("=" * 50)

    collector = DiagnosticCollector()
    l10n = Localization(NlsOptions(locale="fr"), sink=collector)
    localize = l10n.load_message_bundle(str(root / "main"))
    print(localize("farewell", "Goodbye, {0}!", "Anna"))
    # Output: Goodbye, Anna!
    for diagnostic in collector.diagnostics:
        print(diagnostic.format_error())

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
