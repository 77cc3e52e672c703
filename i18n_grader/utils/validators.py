"""Validation utilities for scanned text and key literals."""

import re

MALFORMED_KEY_ISSUE = 'Use dot notation instead of bracket notation'

# Tokens the JSX text scan picks up that are not user-facing text.
HARDCODED_EXCLUDE_PATTERNS = [
    re.compile(r'^[{}$]'),            # Template / expression fragments
    re.compile(r'^\d+$'),             # Numbers only
    re.compile(r'^[a-z]{1,3}$'),      # Short units like 'px', 'em'
    re.compile(r'^#[0-9a-fA-F]+$'),   # Hex colors
    re.compile(r'^[A-Z_]+$'),         # CONSTANTS
    re.compile(r'^className$'),       # React props
    re.compile(r'^testID$'),          # Test identifiers
]

_WHITESPACE_ONLY = re.compile(r'^\s*$')

MIN_HARDCODED_LENGTH = 3


def should_flag_as_hardcoded(text: str) -> bool:
    """
    Decide whether a scanned text span is user-facing hardcoded text.

    Flags text that is longer than three characters after stripping and is
    none of:
        - template/interpolation fragments (``{``, ``}``, ``$`` prefix)
        - pure numbers
        - 1-3 lowercase letters (CSS units)
        - hex colors
        - UPPER_CASE constants
        - ``className`` / ``testID``
        - whitespace

    Examples:
        >>> should_flag_as_hardcoded('Hello World')
        True
        >>> should_flag_as_hardcoded('PRICE')
        False
    """
    text = text.strip()

    if len(text) <= MIN_HARDCODED_LENGTH:
        return False

    if _WHITESPACE_ONLY.match(text):
        return False

    return not any(pattern.search(text) for pattern in HARDCODED_EXCLUDE_PATTERNS)


def is_malformed_key(key: str) -> bool:
    """
    Check whether a key literal uses bracket indexing.

    ``items[0].title`` is malformed; ``items.0.title`` is the accepted form.
    """
    return '[' in key and ']' in key
