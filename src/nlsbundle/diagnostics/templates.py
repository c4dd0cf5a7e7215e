"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every degraded path in one place.
    """

    @staticmethod
    def message_not_externalized(message: str, key: object) -> Diagnostic:
        """Lookup key absent from the bundle; the caller's literal was used.

        Args:
            message: Fallback message that was formatted instead
            key: Key or index the caller passed

        Returns:
            Diagnostic for MESSAGE_NOT_EXTERNALIZED
        """
        msg = f"Message {message} didn't get externalized correctly."
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_EXTERNALIZED,
            message=msg,
            hint="Add the key to the bundle or regenerate the bundle from source",
            key=repr(key),
            severity="warning",
        )

    @staticmethod
    def index_out_of_bounds(index: int | float, size: int) -> Diagnostic:
        """Index lookup outside the bundle's message sequence.

        Args:
            index: Index the caller passed
            size: Number of messages in the bundle

        Returns:
            Diagnostic for INDEX_OUT_OF_BOUNDS
        """
        msg = f"Broken localize call found. Index {index} out of bounds for {size} message(s)."
        return Diagnostic(
            code=DiagnosticCode.INDEX_OUT_OF_BOUNDS,
            message=msg,
            hint="The bundle is out of date with the calling code",
            key=repr(index),
        )

    @staticmethod
    def invalid_localize_key(key: object) -> Diagnostic:
        """Localize call with a key the bundle cannot look up.

        Args:
            key: Key the caller passed

        Returns:
            Diagnostic for INVALID_LOCALIZE_KEY
        """
        msg = f"Broken localize call found. Unsupported key {key!r} of type {type(key).__name__}."
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALIZE_KEY,
            message=msg,
            hint="Keyed bundles take string keys; indexed bundles take integer indexes",
            key=repr(key),
        )

    @staticmethod
    def bundle_load_failed(resource: str, resolved_path: str, reason: str) -> Diagnostic:
        """Bundle file missing, unreadable, or not valid JSON.

        Args:
            resource: Resource name passed to load_message_bundle
            resolved_path: Locale-specific file that was requested
            reason: Underlying error text

        Returns:
            Diagnostic for BUNDLE_LOAD_FAILED
        """
        msg = f"Can't load string bundle for {resource}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_LOAD_FAILED,
            message=msg,
            hint="Untranslated fallback messages will be used",
            resource=resolved_path,
        )

    @staticmethod
    def bundle_format_unsupported(resource: str, resolved_path: str, data: object) -> Diagnostic:
        """Bundle parsed but is neither a sequence nor an object.

        Args:
            resource: Resource name passed to load_message_bundle
            resolved_path: File that was loaded
            data: Parsed content

        Returns:
            Diagnostic for BUNDLE_FORMAT_UNSUPPORTED
        """
        msg = f"String bundle '{resource}' uses an unsupported format ({type(data).__name__})."
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_FORMAT_UNSUPPORTED,
            message=msg,
            hint="Use a JSON array, an object of key/message pairs, or {keys, messages}",
            resource=resolved_path,
        )

    @staticmethod
    def options_parse_failed(raw: str, reason: str) -> Diagnostic:
        """Encoded options string could not be parsed.

        Args:
            raw: The raw options string
            reason: Parser error text

        Returns:
            Diagnostic for OPTIONS_PARSE_FAILED
        """
        msg = f"Error parsing nls options: {raw} ({reason})"
        return Diagnostic(
            code=DiagnosticCode.OPTIONS_PARSE_FAILED,
            message=msg,
            hint='Pass a JSON object such as {"locale": "de-de"}',
        )
