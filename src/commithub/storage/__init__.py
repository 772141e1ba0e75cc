"""Storage layer for CommitHub.

This module provides the content-addressable object store, the HEAD pointer
and the atomic file helpers every persisted write goes through.
"""

from commithub.storage.head import HeadRef
from commithub.storage.object_store import ObjectStore

__all__ = [
    "ObjectStore",
    "HeadRef",
]
