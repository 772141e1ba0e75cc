"""Exception hierarchy for CommitHub."""


class CommitHubError(Exception):
    """Base exception for CommitHub."""


class AlreadyInitializedError(CommitHubError):
    """Raised when init runs on a repository whose state files all exist."""


class NotARepositoryError(CommitHubError):
    """Raised when no .commithub/ directory is found."""


class FileReadError(CommitHubError):
    """Raised when a file to be staged is missing or unreadable."""


class ObjectNotFoundError(CommitHubError):
    """Raised when an object hash is absent from the object store."""


class CommitNotFoundError(ObjectNotFoundError):
    """Raised when a commit hash is absent from the object store."""


class MalformedDataError(CommitHubError):
    """Raised when the index, HEAD or a commit object cannot be deserialized."""


class DataIntegrityError(CommitHubError):
    """Raised when stored data violates a repository invariant.

    For example, a commit that references a blob missing from the store.
    """


class ObjectCorruptedError(DataIntegrityError):
    """Raised when an object's content no longer matches its hash."""
