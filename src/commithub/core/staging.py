"""Staging area management for CommitHub.

The staging area (index) is an ordered list of (path, hash) entries queued
for the next commit. Every ``add`` appends; nothing is deduplicated by path.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from commithub.constants import INDEX_FILE, REPO_DIR
from commithub.errors import FileReadError, MalformedDataError, NotARepositoryError
from commithub.models import StagingEntry
from commithub.storage import ObjectStore
from commithub.storage.fileio import atomic_write_text, read_text_if_exists

logger = logging.getLogger(__name__)


class StagingManager:
    """Manager for the staging area (index).

    Index format (JSON):
    [
        {"path": "notes.txt", "hash": "sha1..."},
        {"path": "src/app.py", "hash": "sha1..."},
        ...
    ]

    Attributes:
        workspace_root: Root directory of the workspace
        index_path: Path to the index file (.commithub/index)
        object_store: ObjectStore instance for blob storage
    """

    def __init__(self, workspace_root: Path, object_store: ObjectStore):
        """Initialize StagingManager.

        Args:
            workspace_root: Root directory of workspace
            object_store: ObjectStore for blob management

        Raises:
            NotARepositoryError: If the workspace has no .commithub/
        """
        self.workspace_root = Path(workspace_root)
        self.repo_dir = self.workspace_root / REPO_DIR
        self.index_path = self.repo_dir / INDEX_FILE
        self.object_store = object_store

        if not self.repo_dir.exists():
            raise NotARepositoryError(
                f"Not a CommitHub repository (no {REPO_DIR}/ found in {workspace_root})"
            )

    def add(self, file_path: Union[str, Path]) -> StagingEntry:
        """Store a file's content as a blob and stage it.

        Args:
            file_path: Path to the file, absolute or relative to the workspace

        Returns:
            The appended staging entry

        Raises:
            FileReadError: If the file does not exist or cannot be read
        """
        abs_path = self._resolve_path(Path(file_path))

        if abs_path.is_dir():
            raise FileReadError(f"{file_path}: is a directory")

        try:
            content = abs_path.read_bytes()
        except FileNotFoundError as e:
            raise FileReadError(f"{file_path}: file not found") from e
        except OSError as e:
            raise FileReadError(f"{file_path}: {e.strerror or e}") from e

        blob_hash = self.object_store.put(content)
        entry = self.stage(self._record_path(abs_path), blob_hash)
        logger.info(f"Staged {entry.path} ({blob_hash[:8]})")

        return entry

    def stage(self, path: str, blob_hash: str) -> StagingEntry:
        """Append an entry to the index.

        The caller is expected to have written the blob already.
        """
        entries = self.read_all()
        entry = StagingEntry(path, blob_hash)
        entries.append(entry)
        self._save_index(entries)
        return entry

    def read_all(self) -> List[StagingEntry]:
        """Get all currently staged entries, in staging order.

        Raises:
            MalformedDataError: If the index file is corrupted
        """
        try:
            content = read_text_if_exists(self.index_path)
        except UnicodeDecodeError as e:
            raise MalformedDataError(f"Corrupted index file: {e}") from e

        if content is None or not content.strip():
            return []

        try:
            records = json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedDataError(f"Corrupted index file: {e}") from e

        if not isinstance(records, list):
            raise MalformedDataError(
                f"Corrupted index file: expected a list, got {type(records).__name__}"
            )

        return [StagingEntry.from_dict(record) for record in records]

    def clear(self) -> None:
        """Clear all staged entries."""
        self._save_index([])
        logger.debug("Staging area cleared")

    def is_empty(self) -> bool:
        """Check if staging area is empty."""
        return len(self.read_all()) == 0

    def _save_index(self, entries: List[StagingEntry]) -> None:
        """Save index to disk."""
        text = json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)
        atomic_write_text(self.index_path, text, prefix=".tmp_index_")

    def _resolve_path(self, path: Path) -> Path:
        """Resolve path to an absolute path, relative paths against the workspace."""
        if path.is_absolute():
            return path
        return self.workspace_root / path

    def _record_path(self, abs_path: Path) -> str:
        """Path string stored in the index.

        Files inside the workspace are recorded relative to it so the same
        file always yields the same path; anything else keeps its full path.
        """
        try:
            return abs_path.resolve().relative_to(self.workspace_root.resolve()).as_posix()
        except ValueError:
            return abs_path.as_posix()
