"""Shared persistence utilities."""

import contextlib
from pathlib import Path


def temp_path_for(path: Path) -> Path:
    """Sibling temporary file used while rewriting ``path``."""
    return path.with_suffix(path.suffix + ".tmp")


def atomic_write_text(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file atomically.

    Writes to a temporary file in the same directory first, then renames
    it over the target, so a crash mid-write never truncates ``path``.
    The temporary file is removed if the write fails.

    Raises:
        OSError: If the directory or file cannot be created or written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = temp_path_for(path)
    try:
        # newline="" keeps the csv module's line terminators untouched
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(content)
        tmp_path.replace(path)
    except OSError:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise
