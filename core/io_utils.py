from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List


async def read_lines(path: Path) -> List[str]:
    """Read a text file into a list of non-blank lines, in file order."""

    def _read() -> List[str]:
        with path.open("r", encoding="utf-8") as handle:
            return [
                line.rstrip("\r\n")
                for line in handle
                if line.strip()
            ]

    return await asyncio.to_thread(_read)
