"""
Configuration loading and pattern compilation.

Loads the three line lists from the configuration directory and builds the
read-only ConfigurationSet shared by every message handler.
"""
from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .constants import DEFAULT_CONFIG_DIR, ConfigFile
from .io_utils import read_lines
from .paths import resolve_repo_path

logger = logging.getLogger("flagbot.config")


class ConfigError(RuntimeError):
    pass


class ConfigLoadError(ConfigError):
    """A configuration file could not be read or holds no items."""


class PatternCompileError(ConfigError):
    """A detection pattern is not a valid regular expression."""

    def __init__(self, rule: str, line_no: int, error: re.error) -> None:
        super().__init__(f"Invalid pattern on line {line_no} ({rule!r}): {error}")
        self.rule = rule
        self.line_no = line_no
        self.error = error


@dataclass(frozen=True)
class ConfigurationSet:
    """Everything the moderation handler needs, loaded once at startup."""
    responses: Tuple[str, ...]
    gifs: Tuple[str, ...]
    patterns: Tuple[re.Pattern[str], ...]

    def __post_init__(self) -> None:
        for name in ("responses", "gifs", "patterns"):
            if not getattr(self, name):
                raise ConfigLoadError(f"Configuration list '{name}' is empty")


async def load_lines(directory: Union[str, Path], filename: str) -> List[str]:
    path = resolve_repo_path(directory) / filename
    try:
        lines = await read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"Could not read {path}: {exc}") from exc
    if not lines:
        raise ConfigLoadError(f"{path} contains no entries")
    logger.debug("Loaded %d entries from %s", len(lines), path)
    return lines


def compile_patterns(lines: Iterable[str]) -> Tuple[re.Pattern[str], ...]:
    """
    Compile each rule independently.

    Raises PatternCompileError on the first rule that is not valid syntax.
    """
    compiled: List[re.Pattern[str]] = []
    for line_no, rule in enumerate(lines, start=1):
        try:
            compiled.append(re.compile(rule))
        except re.error as exc:
            raise PatternCompileError(rule, line_no, exc) from exc
    return tuple(compiled)


async def load_configuration(
    directory: Union[str, Path] = DEFAULT_CONFIG_DIR,
) -> ConfigurationSet:
    """
    Load gifs, responses and patterns from `directory`.

    The three loads are independent and run concurrently.
    """
    gifs, responses, rules = await asyncio.gather(
        load_lines(directory, ConfigFile.GIFS),
        load_lines(directory, ConfigFile.RESPONSES),
        load_lines(directory, ConfigFile.PATTERNS),
    )
    config = ConfigurationSet(
        responses=tuple(responses),
        gifs=tuple(gifs),
        patterns=compile_patterns(rules),
    )
    logger.info(
        "Loaded %d patterns, %d responses, %d gifs",
        len(config.patterns),
        len(config.responses),
        len(config.gifs),
    )
    return config
