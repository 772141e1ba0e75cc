"""Filesystem access for persisted repository state.

Every write to objects/, HEAD and index goes through ``atomic_write`` so a
crash never leaves a half-written file behind.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def atomic_write(path: Path, data: bytes, prefix: str = ".tmp_") -> None:
    """Write bytes to ``path`` via a temp file in the same directory.

    Args:
        path: Destination file
        data: Content to write
        prefix: Prefix for the temporary file name

    Raises:
        OSError: If the write or rename fails (permissions, disk full, etc.)
    """
    path = Path(path)
    tmp_fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=prefix)
    try:
        with os.fdopen(tmp_fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, path)

    except Exception:
        # Clean up temp file on error
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise

    logger.debug(f"Wrote {len(data)} bytes to {path}")


def atomic_write_text(path: Path, text: str, prefix: str = ".tmp_") -> None:
    """Write UTF-8 text to ``path`` atomically."""
    atomic_write(path, text.encode("utf-8"), prefix=prefix)


def read_text_if_exists(path: Path) -> Optional[str]:
    """Read a UTF-8 state file, returning None if it does not exist."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
