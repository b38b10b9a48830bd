"""
Configuration constants.

File names, environment variable names and defaults in one place.
"""
from __future__ import annotations


class ConfigFile:
    """Files expected inside the configuration directory."""

    GIFS = "gifs.txt"
    RESPONSES = "responses.txt"
    PATTERNS = "patterns.txt"


class EnvVar:
    """Environment variables read at startup."""

    TOKEN = "DISCORD_BOT_TOKEN"
    TOKEN_FALLBACK = "BOT_TOKEN"
    CONFIG_DIR = "FLAGBOT_CONFIG_DIR"
    LOG_LEVEL = "LOG_LEVEL"
    STATUS = "FLAGBOT_STATUS"


DEFAULT_CONFIG_DIR = "configuration"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_STATUS = "for flags (´･ω･`)"
