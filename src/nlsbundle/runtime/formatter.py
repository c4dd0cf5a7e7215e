"""Message template formatting.

Substitutes ``{n}`` placeholders with positional arguments and optionally
pseudo-localizes the template first. Pure functions: no I/O, no shared state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from nlsbundle.constants import PSEUDO_CLOSE, PSEUDO_OPEN, PSEUDO_VOWELS

__all__ = [
    "format_message",
    "pseudo_localize",
]

_PLACEHOLDER_PATTERN = re.compile(r"\{(\d+)\}")
_VOWEL_PATTERN = re.compile(f"[{PSEUDO_VOWELS}]")


def pseudo_localize(message: str) -> str:
    """Return the pseudo-localized variant of a message.

    Every lower-case vowel is doubled in place and the result is wrapped in
    fullwidth brackets.

    Example:
        >>> pseudo_localize("Hello World")
        '［Heelloo Woorld］'
    """
    return PSEUDO_OPEN + _VOWEL_PATTERN.sub(r"\g<0>\g<0>", message) + PSEUDO_CLOSE


def format_message(message: str, args: Sequence[object], *, pseudo: bool = False) -> str:
    """Format a message template.

    Pseudo-localization runs first, so placeholder digits are never doubled
    and substituted arguments are never pseudo-localized. Substitution is a
    single left-to-right pass: substituted text is not rescanned.

    The whole digit run is the argument index, so ``{10}`` is the eleventh
    argument. A placeholder whose index has no argument stays in the output
    literally. Arguments are rendered with ``str()``.

    Args:
        message: Template with ``{0}``, ``{1}``, ... placeholders
        args: Positional arguments
        pseudo: Apply pseudo-localization

    Returns:
        Formatted message

    Example:
        >>> format_message("{0} {1}", ["Hello", "World"])
        'Hello World'
        >>> format_message("{0} {2}", ["Hello"])
        'Hello {2}'
    """
    if pseudo:
        message = pseudo_localize(message)

    if not args:
        return message

    # Longest digit run that can still name an argument.
    max_digits = len(str(len(args)))

    def substitute(match: re.Match[str]) -> str:
        digits = match.group(1).lstrip("0") or "0"
        if len(digits) > max_digits:
            return match.group(0)
        index = int(digits)
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER_PATTERN.sub(substitute, message)
