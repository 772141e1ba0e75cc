"""Core engine layer for CommitHub.

This module provides the version control operations: staging, committing,
history traversal and the repository object tying them together.
"""

from commithub.core.commit_chain import CommitChain
from commithub.core.history import walk_history
from commithub.core.repository import Repository
from commithub.core.staging import StagingManager

__all__ = [
    "Repository",
    "StagingManager",
    "CommitChain",
    "walk_history",
]
