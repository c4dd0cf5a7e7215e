"""Bundle loading infrastructure.

Provides the protocol for bundle loaders, a JSON file implementation, the
default existence check used by locale resolution, and the immutable result
record of a single load attempt.

Components:
    BundleLoader - Protocol for loading parsed bundle content (structural typing)
    JsonBundleLoader - Disk-based JSON loader
    path_exists - Default ExistsCheck
    BundleLoadResult - Immutable result of a single bundle load attempt
    load_bundle - Run a loader and capture the outcome as a BundleLoadResult

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from nlsbundle.diagnostics import BundleLoadError, ErrorTemplate
from nlsbundle.enums import LoadStatus
from nlsbundle.localization.types import ResourceName, ResourcePath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "BundleLoader",
    # Concrete loader
    "JsonBundleLoader",
    # Existence check
    "path_exists",
    # Load result types
    "BundleLoadResult",
    "load_bundle",
]

logger = logging.getLogger(__name__)


class BundleLoader(Protocol):
    """Protocol for loading a resolved bundle.

    Implementations return parsed content (a list, a dict, or anything else
    the JSON grammar allows) and signal failure by raising.

    This is a Protocol (structural typing) rather than ABC so callers can
    pass any object with a matching load() method, e.g. an in-memory loader
    in tests or a loader reading from package data.

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, files: dict[str, object]) -> None:
        ...         self.files = files
        ...     def load(self, path: str) -> object:
        ...         return self.files[path]
    """

    def load(self, path: ResourcePath) -> object:
        """Load and parse the bundle at ``path``.

        Args:
            path: Resolved bundle path (stem plus suffix)

        Returns:
            Parsed bundle content

        Raises:
            FileNotFoundError: If the bundle doesn't exist
            OSError: If the bundle cannot be read
            ValueError: If the bundle cannot be parsed
        """
        ...


@dataclass(frozen=True, slots=True)
class JsonBundleLoader:
    """File system loader for JSON bundles.

    Implements BundleLoader. A leading UTF-8 BOM is tolerated, since
    translation tools commonly write one.

    Attributes:
        encoding: Text encoding of bundle files
    """

    encoding: str = "utf-8-sig"

    def load(self, path: ResourcePath) -> object:
        """Read and parse a JSON bundle from disk.

        Raises:
            FileNotFoundError: If file doesn't exist
            OSError: If file cannot be read
            ValueError: If file is not valid JSON (json.JSONDecodeError)
        """
        text = Path(path).read_text(encoding=self.encoding)
        try:
            return json.loads(text)
        except RecursionError as e:
            msg = f"JSON nesting too deep in {path}"
            raise ValueError(msg) from e


def path_exists(path: str) -> bool:
    """Default existence check for candidate bundle files."""
    return Path(path).exists()


@dataclass(frozen=True, slots=True)
class BundleLoadResult:
    """Result of loading a single bundle.

    Attributes:
        resource: Resource name passed by the caller
        resolved_path: Locale-specific path that was requested
        status: Load status (success, not_found, error)
        data: Parsed content if status is SUCCESS, None otherwise
        error: BundleLoadError if the load failed, None otherwise
    """

    resource: ResourceName
    resolved_path: ResourcePath
    status: LoadStatus
    data: object = None
    error: BundleLoadError | None = None

    @property
    def is_success(self) -> bool:
        """Check if bundle loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if bundle file was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if bundle load failed with an error other than not-found."""
        return self.status == LoadStatus.ERROR


def load_bundle(
    loader: BundleLoader, resource: ResourceName, resolved_path: ResourcePath
) -> BundleLoadResult:
    """Run ``loader`` and capture the outcome.

    Never raises for loader failures: FileNotFoundError maps to NOT_FOUND,
    other OSError and ValueError (including JSON decode errors) map to ERROR.
    In both cases ``error`` carries a BUNDLE_LOAD_FAILED diagnostic.

    Args:
        loader: Bundle loader
        resource: Resource name passed by the caller
        resolved_path: Path produced by the locale resolver

    Returns:
        BundleLoadResult
    """
    try:
        data = loader.load(resolved_path)
    except FileNotFoundError as e:
        status = LoadStatus.NOT_FOUND
        reason: Exception = e
    except (OSError, ValueError) as e:
        status = LoadStatus.ERROR
        reason = e
    else:
        logger.debug("Loaded bundle %s for %s", resolved_path, resource)
        return BundleLoadResult(resource, resolved_path, LoadStatus.SUCCESS, data=data)

    diagnostic = ErrorTemplate.bundle_load_failed(resource, resolved_path, str(reason))
    error = BundleLoadError(diagnostic)
    error.__cause__ = reason
    return BundleLoadResult(resource, resolved_path, status, error=error)
