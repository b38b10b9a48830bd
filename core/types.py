"""
Type definitions and dataclasses for flagbot.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ModerationResult:
    """Result of handling one message."""
    matched: bool = False
    deleted: bool = False
    response_sent: bool = False
    media_sent: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors
