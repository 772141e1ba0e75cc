"""Commit creation and lookup.

Commits are stored in the object store like any blob, addressed by the hash
of their canonical JSON form. Each commit names its parent, so the commits
form a singly-linked history anchored at HEAD.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from commithub.core.staging import StagingManager
from commithub.errors import CommitNotFoundError, ObjectNotFoundError
from commithub.models import Commit
from commithub.storage import HeadRef, ObjectStore

logger = logging.getLogger(__name__)


class CommitChain:
    """Builder and reader for commit objects.

    Attributes:
        object_store: ObjectStore holding commit objects
        staging: StagingManager whose entries are snapshotted on commit
        head: HeadRef pointing at the newest commit
    """

    def __init__(self, object_store: ObjectStore, staging: StagingManager, head: HeadRef):
        self.object_store = object_store
        self.staging = staging
        self.head = head

    def get_head(self) -> Optional[str]:
        """Return the hash HEAD points at, or None before the first commit."""
        return self.head.read()

    def commit(self, message: str) -> str:
        """Create a commit from the staged entries.

        The staged entries are snapshotted before anything is written. HEAD
        moves to the new commit before the index is cleared, so a crash in
        between leaves a retrievable commit rather than losing the staged
        list.

        Args:
            message: Commit message

        Returns:
            Hash of the new commit
        """
        entries = self.staging.read_all()
        parent = self.get_head()

        commit = Commit(
            timestamp=datetime.now(timezone.utc).isoformat(),
            message=message,
            files=entries,
            parent=parent,
        )

        commit_hash = self.object_store.put(commit.serialize())
        self.head.write(commit_hash)
        self.staging.clear()

        logger.info(
            f"Created commit {commit_hash[:7]} with {len(entries)} file(s), "
            f"parent {parent[:7] if parent else '(root)'}"
        )
        return commit_hash

    def get_commit(self, commit_hash: str) -> Commit:
        """Read a commit object.

        Args:
            commit_hash: Full commit hash

        Returns:
            The commit, with ``hash`` set

        Raises:
            CommitNotFoundError: If no object with this hash exists
            MalformedDataError: If the object is not a valid commit
            ObjectCorruptedError: If the object no longer matches its hash
        """
        try:
            data = self.object_store.get(commit_hash)
        except ObjectNotFoundError as e:
            raise CommitNotFoundError(f"Commit not found: {commit_hash}") from e

        return Commit.deserialize(data, commit_hash=commit_hash)

    def commit_exists(self, commit_hash: str) -> bool:
        """Check if an object with this hash exists."""
        return self.object_store.exists(commit_hash)
