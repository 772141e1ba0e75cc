"""Content-addressable object storage for CommitHub.

Blobs and commits are stored in .commithub/objects/ as one file per object,
named by the SHA-1 hash of its bytes. Identical content is stored once.
"""

import hashlib
import logging
from pathlib import Path
from typing import Iterator

from commithub.constants import HASH_ALGORITHM, HASH_LENGTH, OBJECTS_DIR
from commithub.errors import ObjectCorruptedError, ObjectNotFoundError
from commithub.storage.fileio import atomic_write

logger = logging.getLogger(__name__)


class ObjectStore:
    """Content-addressable storage for blobs and commit objects.

    Storage layout:
        .commithub/objects/<hash>

    Attributes:
        repo_dir: Path to the .commithub directory
        objects_dir: Path to the objects directory

    Example:
        >>> store = ObjectStore(Path(".commithub"))
        >>> blob_hash = store.put(b"hello\\n")
        >>> assert store.get(blob_hash) == b"hello\\n"
    """

    def __init__(self, repo_dir: Path) -> None:
        """Initialize the object store.

        Args:
            repo_dir: Path to .commithub directory

        Raises:
            ValueError: If repo_dir doesn't exist
        """
        self.repo_dir = Path(repo_dir)
        self.objects_dir = self.repo_dir / OBJECTS_DIR

        if not self.repo_dir.exists():
            raise ValueError(f"CommitHub directory not found: {repo_dir}")

    @staticmethod
    def hash(content: bytes) -> str:
        """Compute the content address of ``content``.

        Args:
            content: Binary data to hash

        Returns:
            Hex digest (40 characters for SHA-1)
        """
        hasher = hashlib.new(HASH_ALGORITHM)
        hasher.update(content)
        return hasher.hexdigest()

    def put(self, content: bytes) -> str:
        """Write an object to the store.

        If an object with the same hash already exists, returns the hash
        without writing (deduplication).

        Args:
            content: Binary content to store

        Returns:
            Hash of the content

        Raises:
            OSError: If write fails (permissions, disk full, etc.)

        Example:
            >>> hash1 = store.put(b"data")
            >>> hash2 = store.put(b"data")
            >>> assert hash1 == hash2  # Deduplication
        """
        object_hash = self.hash(content)

        if self.exists(object_hash):
            logger.debug(f"Object {object_hash} already stored")
            return object_hash

        self.objects_dir.mkdir(parents=True, exist_ok=True)
        atomic_write(self._get_object_path(object_hash), content, prefix=".tmp_obj_")
        logger.debug(f"Stored object {object_hash} ({len(content)} bytes)")

        return object_hash

    def get(self, object_hash: str, verify: bool = True) -> bytes:
        """Read an object from the store.

        Args:
            object_hash: Hash of the object
            verify: Whether to recompute and verify the hash (default: True)

        Returns:
            Binary content of the object

        Raises:
            ObjectNotFoundError: If no object with this hash exists
            ObjectCorruptedError: If hash verification fails
        """
        if not self.is_valid_hash(object_hash):
            raise ObjectNotFoundError(f"Object not found: {object_hash!r} is not a valid hash")

        object_path = self._get_object_path(object_hash)
        try:
            content = object_path.read_bytes()
        except FileNotFoundError as e:
            raise ObjectNotFoundError(f"Object not found: {object_hash}") from e

        if verify:
            actual_hash = self.hash(content)
            if actual_hash != object_hash:
                raise ObjectCorruptedError(
                    f"Object corrupted: expected {object_hash}, got {actual_hash}"
                )

        return content

    def exists(self, object_hash: str) -> bool:
        """Check if an object exists in the store."""
        if not self.is_valid_hash(object_hash):
            return False
        return self._get_object_path(object_hash).is_file()

    def iter_hashes(self) -> Iterator[str]:
        """Yield the hashes of all stored objects, in sorted order."""
        if not self.objects_dir.exists():
            return
        for item in sorted(self.objects_dir.iterdir()):
            if item.is_file() and self.is_valid_hash(item.name):
                yield item.name

    @staticmethod
    def is_valid_hash(object_hash: object) -> bool:
        """Check that a value looks like a full lowercase hex hash."""
        if not isinstance(object_hash, str) or len(object_hash) != HASH_LENGTH:
            return False
        return all(c in "0123456789abcdef" for c in object_hash)

    def _get_object_path(self, object_hash: str) -> Path:
        """Get the filesystem path for an object."""
        return self.objects_dir / object_hash
