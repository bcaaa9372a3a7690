"""NoiseFilter Rules System.

This module provides ignore pattern parsing and matching:
- parse_pattern_line: ignore-file line interpretation
- compile_pattern: validated case-insensitive regex compilation
- PatternMatcher: ordered pattern set with OR-logic matching
"""

from .patterns import PatternEntry, PatternMatcher, compile_pattern, parse_pattern_line

__all__ = [
    "PatternEntry",
    "PatternMatcher",
    "compile_pattern",
    "parse_pattern_line",
]
