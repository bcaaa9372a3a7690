#!/usr/bin/env python3
r"""Ignore pattern parsing and matching.

This module provides the pattern layer used by PatternFilter:
- Ignore-file line parsing (blank lines and # comments skipped)
- Case-insensitive regex compilation with validation
- Ordered pattern storage with OR logic (matches any pattern)
- Unanchored matching: a pattern may hit anywhere in the text

Example:
    >>> matcher = PatternMatcher()
    >>> entry = matcher.add_pattern(r"favicon\.ico")
    >>> matcher.matches("GET https://example.com/FAVICON.ICO")
    True
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from noisefilter.core.constants import COMMENT_PREFIX
from noisefilter.core.validators import validate_pattern, validate_regex


@dataclass(frozen=True)
class PatternEntry:
    """A single compiled ignore pattern with metadata."""

    pattern: str
    compiled: Pattern[str]
    line_number: Optional[int] = None


def parse_pattern_line(line: str) -> Optional[str]:
    """Extract the pattern source from one ignore-file line.

    Args:
        line: Raw line, with or without its line terminator

    Returns:
        Stripped pattern source, or None for blank and comment lines
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None
    return stripped


def compile_pattern(source: str) -> Pattern[str]:
    """Compile a pattern source as a case-insensitive regex.

    Raises:
        ValidationError: If the source is empty or not a valid regex
    """
    validate_pattern(source)
    return validate_regex(source, re.IGNORECASE)


class PatternMatcher:
    """Ordered set of case-insensitive regex patterns.

    Features:
    - Insertion order preserved for enumeration and logging
    - OR logic (matches any pattern, first hit wins)
    - Search semantics, not anchored to start or end
    """

    def __init__(self):
        """Initialize an empty pattern matcher."""
        self._patterns: List[PatternEntry] = []

    def add_pattern(self, source: str, line_number: Optional[int] = None) -> PatternEntry:
        """Compile and append a pattern.

        Args:
            source: Regular expression source
            line_number: Ignore-file line the pattern came from

        Returns:
            The stored entry

        Raises:
            ValidationError: If the pattern does not compile
        """
        entry = PatternEntry(
            pattern=source,
            compiled=compile_pattern(source),
            line_number=line_number,
        )
        self._patterns.append(entry)
        return entry

    def matches(self, text: str) -> bool:
        """Check if text matches any pattern.

        Args:
            text: Text to check

        Returns:
            True if text matches any pattern
        """
        if not self._patterns:
            return False

        for entry in self._patterns:
            if entry.compiled.search(text):
                return True

        return False

    def get_matching_patterns(self, text: str) -> List[str]:
        """Get the source of every pattern that matches the text.

        Args:
            text: Text to check

        Returns:
            Matching pattern sources in insertion order
        """
        return [entry.pattern for entry in self._patterns if entry.compiled.search(text)]

    def clear(self) -> None:
        """Clear all patterns."""
        self._patterns.clear()

    def get_patterns(self) -> List[PatternEntry]:
        """Get all registered patterns.

        Returns:
            Copy of the pattern entry list
        """
        return self._patterns.copy()

    def __len__(self) -> int:
        """Return number of patterns."""
        return len(self._patterns)

    def __bool__(self) -> bool:
        """Return True if any patterns are registered."""
        return bool(self._patterns)
