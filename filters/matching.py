"""
Pattern matching for the flag filter.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional


class PatternMatcher:
    """
    Checks message text against the configured detection patterns.

    Patterns are searched, not anchored: a rule matches anywhere in the
    text unless it anchors itself with ^ or $.
    """

    def __init__(self, patterns: Iterable[re.Pattern[str]]) -> None:
        self.patterns = tuple(patterns)

    def first_match(self, body: Optional[str]) -> Optional[re.Pattern[str]]:
        """Return the first pattern (in load order) found in body."""
        text = body or ""
        for pattern in self.patterns:
            if pattern.search(text):
                return pattern
        return None

    def matches(self, body: Optional[str]) -> bool:
        return self.first_match(body) is not None
