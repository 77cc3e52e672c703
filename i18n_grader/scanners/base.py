"""Base scanner interface for different source dialects."""

import re
from dataclasses import dataclass, field
from typing import List, Pattern


@dataclass
class ScanPattern:
    """A lexical pattern whose first group captures the interesting text."""
    pattern: str  # Regex pattern
    description: str
    _compiled: Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._compiled = re.compile(self.pattern)

    @property
    def compiled(self) -> Pattern:
        return self._compiled


@dataclass
class KeyUsage:
    """A translation call site, without file identity."""
    key: str
    line: int


@dataclass
class TextCandidate:
    """A text span that may be hardcoded user-facing text."""
    text: str
    line: int


@dataclass
class ScanResult:
    """Everything one scan pass found in one text."""
    usages: List[KeyUsage] = field(default_factory=list)
    candidates: List[TextCandidate] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.usages and not self.candidates


@dataclass
class UsageFinding:
    """A translation call site referencing ``key``."""
    file: str
    key: str
    line: int


@dataclass
class HardcodedFinding:
    """A text span suspected of being un-internationalized."""
    file: str
    text: str
    line: int


@dataclass
class MalformedKeyFinding:
    """A key literal using disallowed syntax."""
    file: str
    key: str
    issue: str
    line: int


def line_number(text: str, offset: int) -> int:
    """1-based line of ``offset``: newlines strictly before it, plus one."""
    return text.count('\n', 0, offset) + 1


class BaseScanner:
    """
    Base scanner for dialect-specific lexical scanning.

    A scanner owns two independent pattern lists: ``usage_patterns`` find
    translation calls and capture the key literal, ``hardcoded_patterns``
    find candidate literal text. Each pattern runs once over the whole text.
    """

    def __init__(self):
        self.usage_patterns: List[ScanPattern] = []
        self.hardcoded_patterns: List[ScanPattern] = []

    def scan(self, text: str) -> ScanResult:
        """
        Run the usage and hardcoded-text passes over ``text``.

        Args:
            text: Full source text

        Returns:
            ScanResult with key usages and stripped text candidates
        """
        result = ScanResult()

        for pattern in self.usage_patterns:
            for match in pattern.compiled.finditer(text):
                result.usages.append(KeyUsage(
                    key=match.group(1),
                    line=line_number(text, match.start()),
                ))

        for pattern in self.hardcoded_patterns:
            for match in pattern.compiled.finditer(text):
                result.candidates.append(TextCandidate(
                    text=match.group(1).strip(),
                    line=line_number(text, match.start()),
                ))

        return result
