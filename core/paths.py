"""
Path resolution utilities.

Provides base directory and path resolution for the project.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

BASE_DIR = Path(__file__).resolve().parent.parent


def resolve_repo_path(path: Union[str, Path]) -> Path:
    candidate = Path(path).expanduser()
    if candidate.is_absolute() or candidate.drive:
        return candidate
    # Prefer the working directory, the way the bot is usually launched.
    if candidate.exists():
        return candidate.resolve()
    return BASE_DIR / candidate
