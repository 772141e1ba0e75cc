"""Per-commit diff engine.

Resolves each file of a commit against the same path in the parent commit
and produces structured results. Rendering lives in the CLI.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from commithub.diff.text_diff import ADDED, REMOVED, DiffSegment, diff_lines
from commithub.errors import (
    CommitNotFoundError,
    DataIntegrityError,
    MalformedDataError,
    ObjectNotFoundError,
)
from commithub.models import Commit
from commithub.storage import ObjectStore

if TYPE_CHECKING:
    from commithub.core.commit_chain import CommitChain

logger = logging.getLogger(__name__)

FIRST_COMMIT = "first_commit"
NEW_FILE = "new"
MODIFIED = "modified"


class FileDiff:
    """Change report for one file entry of a commit.

    Attributes:
        path: File path
        status: "first_commit", "new" or "modified"
        content: Content of the file in this commit
        segments: Line segments against the parent version (modified only)
    """

    def __init__(
        self,
        path: str,
        status: str,
        content: str,
        segments: Optional[List[DiffSegment]] = None,
    ):
        self.path = path
        self.status = status
        self.content = content
        self.segments = segments or []

    def __repr__(self) -> str:
        return f"FileDiff({self.path}: {self.status})"

    def stats(self) -> Dict[str, int]:
        """Count added and removed lines."""
        added = sum(s.line_count for s in self.segments if s.kind == ADDED)
        removed = sum(s.line_count for s in self.segments if s.kind == REMOVED)
        return {"added": added, "removed": removed}

    @property
    def has_changes(self) -> bool:
        return any(s.kind in (ADDED, REMOVED) for s in self.segments)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "path": self.path,
            "status": self.status,
            "segments": [s.to_dict() for s in self.segments],
        }


class CommitDiff:
    """Diff of a commit against its parent.

    Attributes:
        commit: The commit being shown
        parent: Its parent commit, or None for the root commit
        files: One FileDiff per file entry, in commit order
    """

    def __init__(self, commit: Commit, parent: Optional[Commit], files: List[FileDiff]):
        self.commit = commit
        self.parent = parent
        self.files = files


class DiffEngine:
    """Computes per-file diffs between a commit and its parent."""

    def __init__(self, object_store: ObjectStore, chain: "CommitChain"):
        self.object_store = object_store
        self.chain = chain

    def diff_commit(self, commit_hash: str) -> CommitDiff:
        """Diff every file of a commit against the parent's version.

        Args:
            commit_hash: Hash of the commit to show

        Returns:
            CommitDiff with one entry per file

        Raises:
            CommitNotFoundError: If no commit with this hash exists, including
                when the hash names a blob rather than a commit
            MalformedDataError: If the parent commit object is not valid
            DataIntegrityError: If the parent commit or a referenced blob is
                missing or corrupted
        """
        try:
            commit = self.chain.get_commit(commit_hash)
        except MalformedDataError as e:
            raise CommitNotFoundError(f"Not a commit: {commit_hash} ({e})") from e
        parent = self._read_parent(commit)

        files = []
        for entry in commit.files:
            content = self._read_content(entry.hash, entry.path)

            if parent is None:
                files.append(FileDiff(entry.path, FIRST_COMMIT, content))
                continue

            parent_entry = parent.find_file(entry.path)
            if parent_entry is None:
                files.append(FileDiff(entry.path, NEW_FILE, content))
                continue

            parent_content = self._read_content(parent_entry.hash, parent_entry.path)
            segments = diff_lines(parent_content, content)
            files.append(FileDiff(entry.path, MODIFIED, content, segments))

        logger.debug(f"Diffed commit {commit_hash[:7]}: {len(files)} file(s)")
        return CommitDiff(commit, parent, files)

    def _read_parent(self, commit: Commit) -> Optional[Commit]:
        """Read the parent of a commit, None for the root commit."""
        if commit.parent is None:
            return None
        try:
            return self.chain.get_commit(commit.parent)
        except CommitNotFoundError as e:
            raise DataIntegrityError(
                f"Parent {commit.parent} of commit {commit.hash} is missing"
            ) from e

    def _read_content(self, blob_hash: str, path: str) -> str:
        """Read a blob referenced by a commit and decode it as text."""
        try:
            data = self.object_store.get(blob_hash)
        except ObjectNotFoundError as e:
            raise DataIntegrityError(
                f"Blob {blob_hash} for {path} is missing from the object store"
            ) from e

        return data.decode("utf-8", errors="replace")
