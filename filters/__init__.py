"""
Flag filter - split into focused modules.

This package detects forbidden messages and replaces them with a reaction.
"""
from .engine import ModerationHandler
from .matching import PatternMatcher
from .selection import ResponseSelector

__all__ = [
    "ModerationHandler",
    "PatternMatcher",
    "ResponseSelector",
]
