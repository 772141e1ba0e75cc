"""Commit history traversal."""

import logging
from typing import Iterator, Optional, Set

from commithub.core.commit_chain import CommitChain
from commithub.errors import MalformedDataError
from commithub.models import Commit

logger = logging.getLogger(__name__)


def walk_history(chain: CommitChain, max_count: Optional[int] = None) -> Iterator[Commit]:
    """Yield commits from HEAD back to the root commit, newest first.

    The generator is lazy: each commit is read only when it is requested.
    An empty repository yields nothing.

    Args:
        chain: CommitChain to read commits from
        max_count: Stop after this many commits (None for all)

    Raises:
        CommitNotFoundError: If a parent link points at a missing commit
        MalformedDataError: If a commit is unreadable or the chain loops
    """
    current = chain.get_head()
    visited: Set[str] = set()
    count = 0

    while current is not None:
        if max_count is not None and count >= max_count:
            return

        if current in visited:
            raise MalformedDataError(f"Commit history loops back to {current}")
        visited.add(current)

        commit = chain.get_commit(current)
        logger.debug(f"Walked to commit {current[:7]}")
        yield commit

        count += 1
        current = commit.parent
