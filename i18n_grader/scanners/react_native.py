"""React Native (JS/JSX/TS/TSX) scanner."""

from .base import BaseScanner, ScanPattern

I18N_CALL_PATTERN = r"i18n\.t\(['\"`]([^'\"`]+)['\"`]\)"
JSX_TEXT_PATTERN = r'>\s*([A-Za-z][^<{]+?)\s*<'


class ReactNativeScanner(BaseScanner):
    """
    Scanner for React Native sources using ``i18n.t('key')`` lookups.

    Hardcoded text is whatever sits between a closing ``>`` and the next
    ``<`` and starts with a letter. Text split across nested tags and string
    props (``title="Save"``) are not detected.
    """

    def __init__(self):
        super().__init__()

        self.usage_patterns = [
            ScanPattern(
                pattern=I18N_CALL_PATTERN,
                description="i18n.t() call with a quoted key literal",
            ),
        ]

        self.hardcoded_patterns = [
            ScanPattern(
                pattern=JSX_TEXT_PATTERN,
                description="JSX element text content",
            ),
        ]
