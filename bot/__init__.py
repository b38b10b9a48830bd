"""Bot package - Discord client."""
from .client import FlagBot

__all__ = ["FlagBot"]
