"""Repository state for CommitHub.

A Repository ties together the object store, staging index, HEAD pointer,
commit chain and diff engine rooted at one workspace directory. Every CLI
command builds one and calls a single operation on it.
"""

import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from commithub.constants import HEAD_FILE, INDEX_FILE, OBJECTS_DIR, REPO_DIR
from commithub.core.commit_chain import CommitChain
from commithub.core.history import walk_history
from commithub.core.staging import StagingManager
from commithub.diff.engine import CommitDiff, DiffEngine
from commithub.errors import AlreadyInitializedError, NotARepositoryError
from commithub.models import Commit, StagingEntry
from commithub.storage import HeadRef, ObjectStore
from commithub.storage.fileio import atomic_write_text

logger = logging.getLogger(__name__)


class Repository:
    """A CommitHub repository rooted at ``workspace_root``.

    Layout:
        <workspace_root>/.commithub/objects/<hash>
        <workspace_root>/.commithub/HEAD
        <workspace_root>/.commithub/index

    Attributes:
        workspace_root: Directory whose files are tracked
        repo_dir: The .commithub directory
        object_store: Blob and commit storage
        staging: Staging index
        chain: Commit chain
        diff_engine: Commit diff engine
    """

    def __init__(self, workspace_root: Union[str, Path]):
        """Open an existing repository.

        Raises:
            NotARepositoryError: If no .commithub/ directory exists
        """
        self.workspace_root = Path(workspace_root)
        self.repo_dir = self.workspace_root / REPO_DIR

        if not self.repo_dir.is_dir():
            raise NotARepositoryError(
                f"Not a CommitHub repository (no {REPO_DIR}/ found in {self.workspace_root})"
            )

        self.object_store = ObjectStore(self.repo_dir)
        self.staging = StagingManager(self.workspace_root, self.object_store)
        self.head = HeadRef(self.repo_dir)
        self.chain = CommitChain(self.object_store, self.staging, self.head)
        self.diff_engine = DiffEngine(self.object_store, self.chain)

    @classmethod
    def init(cls, workspace_root: Union[str, Path]) -> "Repository":
        """Create the repository layout, keeping whatever already exists.

        Missing pieces (objects/, HEAD, index) are created; existing ones are
        never touched.

        Returns:
            The opened repository

        Raises:
            AlreadyInitializedError: If every piece was already present
        """
        workspace_root = Path(workspace_root)
        repo_dir = workspace_root / REPO_DIR
        objects_dir = repo_dir / OBJECTS_DIR
        head_path = repo_dir / HEAD_FILE
        index_path = repo_dir / INDEX_FILE

        created = []

        if not objects_dir.is_dir():
            objects_dir.mkdir(parents=True, exist_ok=True)
            created.append(OBJECTS_DIR)

        if not head_path.exists():
            atomic_write_text(head_path, "", prefix=".tmp_head_")
            created.append(HEAD_FILE)

        if not index_path.exists():
            atomic_write_text(index_path, json.dumps([]), prefix=".tmp_index_")
            created.append(INDEX_FILE)

        if not created:
            raise AlreadyInitializedError(
                f"{REPO_DIR} has already been initialized in {workspace_root}"
            )

        logger.info(f"Initialized repository in {repo_dir} (created: {', '.join(created)})")
        return cls(workspace_root)

    def add(self, file_path: Union[str, Path]) -> StagingEntry:
        """Stage one file. See StagingManager.add."""
        return self.staging.add(file_path)

    def staged(self) -> List[StagingEntry]:
        return self.staging.read_all()

    def commit(self, message: str) -> str:
        """Commit the staged files. See CommitChain.commit."""
        return self.chain.commit(message)

    def get_head(self) -> Optional[str]:
        return self.chain.get_head()

    def get_commit(self, commit_hash: str) -> Commit:
        return self.chain.get_commit(commit_hash)

    def log(self, max_count: Optional[int] = None) -> Iterator[Commit]:
        """Lazily walk history from HEAD, newest first."""
        return walk_history(self.chain, max_count=max_count)

    def diff(self, commit_hash: str) -> CommitDiff:
        """Diff a commit against its parent. See DiffEngine.diff_commit."""
        return self.diff_engine.diff_commit(commit_hash)
