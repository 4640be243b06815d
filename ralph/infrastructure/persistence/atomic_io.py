from __future__ import annotations

import os
import tempfile
from pathlib import Path

from loguru import logger


def atomic_write(path: Path, content: str, suffix: str | None = None) -> None:
    """Write content to file atomically using temp file + rename pattern."""
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path_str = tempfile.mkstemp(
        dir=str(path.parent),
        prefix=".tmp_",
        suffix=suffix or path.suffix,
    )
    temp_path = Path(temp_path_str)

    try:
        with os.fdopen(fd, mode="w", encoding="utf-8") as f:
            f.write(content)
        temp_path.replace(path)
        logger.debug("Atomic write completed: {}", path)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise
