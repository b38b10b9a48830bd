"""
Core utilities and infrastructure for flagbot.

This package contains:
- config: Configuration loading and pattern compilation
- constants: File names and defaults
- io_utils: File I/O helpers
- paths: Path resolution
- types: Dataclasses and type definitions
"""
from .config import (
    ConfigError,
    ConfigLoadError,
    ConfigurationSet,
    PatternCompileError,
    load_configuration,
)
from .types import ModerationResult

__all__ = [
    # Config
    "ConfigError",
    "ConfigLoadError",
    "ConfigurationSet",
    "PatternCompileError",
    "load_configuration",
    # Types
    "ModerationResult",
]
