"""Record types persisted by CommitHub.

StagingEntry and Commit are plain records with explicit fields. Both validate
their input in ``from_dict`` so that a damaged index or commit object surfaces
as MalformedDataError instead of a KeyError deep inside an operation.
"""

import json
from typing import Any, Dict, List, Optional

from commithub.errors import MalformedDataError


class StagingEntry:
    """One file queued for the next commit.

    Attributes:
        path: File path as recorded by ``add`` (POSIX separators)
        hash: Content address of the staged blob
    """

    def __init__(self, path: str, hash: str):  # noqa: A002
        self.path = path
        self.hash = hash

    def __repr__(self) -> str:
        return f"StagingEntry({self.path} -> {self.hash[:8]})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StagingEntry):
            return NotImplemented
        return self.path == other.path and self.hash == other.hash

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary representation."""
        return {"path": self.path, "hash": self.hash}

    @classmethod
    def from_dict(cls, data: Any) -> "StagingEntry":
        """Build an entry from a decoded JSON record.

        Raises:
            MalformedDataError: If the record is not a {path, hash} object
        """
        if not isinstance(data, dict):
            raise MalformedDataError(f"Staging entry must be an object, got {type(data).__name__}")

        path = data.get("path")
        blob_hash = data.get("hash")
        if not isinstance(path, str) or not isinstance(blob_hash, str):
            raise MalformedDataError(f"Staging entry needs string 'path' and 'hash': {data!r}")

        return cls(path, blob_hash)


class Commit:
    """Immutable snapshot of the staging index.

    The commit's identity is the hash of ``serialize()``. ``hash`` is filled
    in when the commit is read back from the store and is never part of the
    serialized form.

    Attributes:
        timestamp: ISO8601 creation time (UTC)
        message: Free-text commit message
        files: Staging entries captured at commit time, in staging order
        parent: Hash of the previous commit, or None for the root commit
        hash: Content address, once known
    """

    def __init__(
        self,
        timestamp: str,
        message: str,
        files: List[StagingEntry],
        parent: Optional[str] = None,
        hash: Optional[str] = None,  # noqa: A002
    ):
        self.timestamp = timestamp
        self.message = message
        self.files = list(files)
        self.parent = parent
        self.hash = hash

    def __repr__(self) -> str:
        short = self.hash[:7] if self.hash else "unsaved"
        return f"Commit({short}: {self.message!r}, {len(self.files)} file(s))"

    def find_file(self, path: str) -> Optional[StagingEntry]:
        """Return the first entry recorded for ``path``, if any.

        Later entries for the same path are shadowed, matching the
        append-only staging semantics.
        """
        for entry in self.files:
            if entry.path == path:
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation (without ``hash``)."""
        return {
            "timestamp": self.timestamp,
            "message": self.message,
            "files": [entry.to_dict() for entry in self.files],
            "parent": self.parent,
        }

    def serialize(self) -> bytes:
        """Canonical UTF-8 JSON: sorted keys, no whitespace."""
        canonical_json = json.dumps(
            self.to_dict(),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return canonical_json.encode("utf-8")

    @classmethod
    def deserialize(cls, data: bytes, commit_hash: Optional[str] = None) -> "Commit":
        """Parse a serialized commit.

        Raises:
            MalformedDataError: If the bytes are not a valid commit record
        """
        try:
            decoded = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedDataError(f"Commit object is not valid JSON: {e}") from e

        return cls.from_dict(decoded, commit_hash=commit_hash)

    @classmethod
    def from_dict(cls, data: Any, commit_hash: Optional[str] = None) -> "Commit":
        """Build a commit from a decoded JSON record.

        Raises:
            MalformedDataError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise MalformedDataError(f"Commit must be an object, got {type(data).__name__}")

        timestamp = data.get("timestamp")
        message = data.get("message")
        files = data.get("files")
        parent = data.get("parent")

        if not isinstance(timestamp, str):
            raise MalformedDataError("Commit field 'timestamp' must be a string")
        if not isinstance(message, str):
            raise MalformedDataError("Commit field 'message' must be a string")
        if not isinstance(files, list):
            raise MalformedDataError("Commit field 'files' must be a list")
        if parent is not None and not isinstance(parent, str):
            raise MalformedDataError("Commit field 'parent' must be a string or null")

        return cls(
            timestamp=timestamp,
            message=message,
            files=[StagingEntry.from_dict(item) for item in files],
            parent=parent or None,
            hash=commit_hash,
        )
