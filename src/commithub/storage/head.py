"""HEAD pointer for CommitHub.

HEAD is a plain text file holding the hash of the most recent commit. An
empty or missing file means no commit exists yet.
"""

import logging
from pathlib import Path
from typing import Optional

from commithub.constants import HASH_LENGTH, HEAD_FILE
from commithub.errors import MalformedDataError
from commithub.storage.fileio import atomic_write_text, read_text_if_exists
from commithub.storage.object_store import ObjectStore

logger = logging.getLogger(__name__)


class HeadRef:
    """Reader and writer for the HEAD file.

    Attributes:
        head_path: Path to .commithub/HEAD
    """

    def __init__(self, repo_dir: Path):
        self.head_path = Path(repo_dir) / HEAD_FILE

    def read(self) -> Optional[str]:
        """Return the current head commit hash, or None if there is none.

        Raises:
            MalformedDataError: If HEAD holds something other than a hash
        """
        try:
            content = read_text_if_exists(self.head_path)
        except UnicodeDecodeError as e:
            raise MalformedDataError(f"HEAD is not valid UTF-8: {e}") from e

        if content is None:
            return None

        head = content.strip()
        if not head:
            return None

        if not ObjectStore.is_valid_hash(head):
            raise MalformedDataError(
                f"HEAD must contain a {HASH_LENGTH}-character hash, got {head[:50]!r}"
            )

        return head

    def write(self, commit_hash: str) -> None:
        """Point HEAD at ``commit_hash``."""
        atomic_write_text(self.head_path, commit_hash, prefix=".tmp_head_")
        logger.debug(f"HEAD -> {commit_hash}")
