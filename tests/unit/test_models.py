"""Tests for StagingEntry and Commit records."""

import json

import pytest

from commithub.errors import MalformedDataError
from commithub.models import Commit, StagingEntry


class TestStagingEntry:
    """Test StagingEntry validation."""

    def test_from_dict(self) -> None:
        entry = StagingEntry.from_dict({"path": "a.txt", "hash": "a" * 40})
        assert entry == StagingEntry("a.txt", "a" * 40)

    def test_from_dict_rejects_non_object(self) -> None:
        with pytest.raises(MalformedDataError, match="must be an object"):
            StagingEntry.from_dict(["a.txt", "abc"])

    def test_from_dict_rejects_missing_hash(self) -> None:
        with pytest.raises(MalformedDataError, match="'path' and 'hash'"):
            StagingEntry.from_dict({"path": "a.txt"})


class TestCommit:
    """Test Commit serialization."""

    def _commit(self) -> Commit:
        return Commit(
            timestamp="2026-01-01T00:00:00.000001+00:00",
            message="first",
            files=[StagingEntry("a.txt", "a" * 40), StagingEntry("b.txt", "b" * 40)],
            parent=None,
        )

    def test_serialize_is_canonical(self) -> None:
        data = self._commit().serialize()

        assert b" " not in data.replace(b"+00:00", b"")
        assert list(json.loads(data).keys()) == ["files", "message", "parent", "timestamp"]

    def test_serialize_is_deterministic(self) -> None:
        assert self._commit().serialize() == self._commit().serialize()

    def test_serialize_excludes_hash(self) -> None:
        commit = self._commit()
        commit.hash = "c" * 40
        assert "hash\":\"" + "c" * 40 not in commit.serialize().decode()

    def test_deserialize_round_trip(self) -> None:
        original = self._commit()
        restored = Commit.deserialize(original.serialize(), commit_hash="c" * 40)

        assert restored.message == "first"
        assert restored.parent is None
        assert restored.files == original.files
        assert restored.hash == "c" * 40

    def test_deserialize_invalid_json(self) -> None:
        with pytest.raises(MalformedDataError, match="not valid JSON"):
            Commit.deserialize(b"hello world\n")

    def test_deserialize_missing_field(self) -> None:
        with pytest.raises(MalformedDataError, match="'message'"):
            Commit.deserialize(b'{"timestamp": "t", "files": [], "parent": null}')

    def test_deserialize_bad_files(self) -> None:
        with pytest.raises(MalformedDataError):
            Commit.deserialize(b'{"timestamp": "t", "message": "m", "files": [1], "parent": null}')

    def test_find_file_first_match_wins(self) -> None:
        commit = Commit(
            timestamp="t",
            message="m",
            files=[StagingEntry("a.txt", "1" * 40), StagingEntry("a.txt", "2" * 40)],
        )
        assert commit.find_file("a.txt").hash == "1" * 40
        assert commit.find_file("missing.txt") is None
