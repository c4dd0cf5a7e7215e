"""Pytest configuration for the nlsbundle test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

import json
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from nlsbundle.diagnostics import DiagnosticCollector
from nlsbundle.localization import Localization, set_default_localization

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def collector() -> DiagnosticCollector:
    """In-memory diagnostic sink."""
    return DiagnosticCollector()


@pytest.fixture(autouse=True)
def default_localization(collector: DiagnosticCollector) -> Iterator[Localization]:
    """Give every test a fresh process-wide default context."""
    fresh = Localization(sink=collector)
    previous = set_default_localization(fresh)
    yield fresh
    set_default_localization(previous)


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    """Directory with generic and German bundles of every supported shape.

    data            flat array        generic + de
    dataStructured  {keys, messages}  de
    dataObject      key/message map   de
    """
    files: dict[str, object] = {
        "data.nls.json": ["Hello World"],
        "data.nls.de.json": ["Guten Tag Welt"],
        "dataStructured.nls.de.json": {
            "keys": ["hello", "goodBye"],
            "messages": ["Guten Tag Welt", "Auf Wiedersehen Welt"],
        },
        "dataObject.nls.de.json": {
            "hello": "Guten Tag Welt",
            "goodBye": "Auf Wiedersehen Welt",
        },
    }
    for name, content in files.items():
        (tmp_path / name).write_text(json.dumps(content), encoding="utf-8")
    return tmp_path
