"""Integration tests for commithub commit command."""

import json
import os
from pathlib import Path

from typer.testing import CliRunner

from commithub.cli.main import app
from commithub.constants import REPO_DIR

runner = CliRunner()


class TestCommitCommand:
    """Test commithub commit command."""

    def test_commit_basic(self, tmp_path: Path) -> None:
        """Test basic commit workflow."""
        original_cwd = Path.cwd()
        os.chdir(tmp_path)

        try:
            runner.invoke(app, ["init", "--quiet"])
            (tmp_path / "sample.txt").write_text("first line\n")

            result_add = runner.invoke(app, ["add", "sample.txt"])
            assert result_add.exit_code == 0

            result = runner.invoke(app, ["commit", "1st commit"])

            assert result.exit_code == 0
            assert "Commit successfully created" in result.stdout

            # HEAD names the new commit
            commit_hash = (tmp_path / REPO_DIR / "HEAD").read_text().strip()
            assert len(commit_hash) == 40
            assert commit_hash in result.stdout

            # Staging area was cleared
            index_data = json.loads((tmp_path / REPO_DIR / "index").read_text())
            assert index_data == []

            # Commit object lists the staged file
            commit_data = json.loads((tmp_path / REPO_DIR / "objects" / commit_hash).read_text())
            assert commit_data["message"] == "1st commit"
            assert [f["path"] for f in commit_data["files"]] == ["sample.txt"]
            assert commit_data["parent"] is None
        finally:
            os.chdir(original_cwd)

    def test_commit_requires_message(self, tmp_path: Path) -> None:
        runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])

        result = runner.invoke(app, ["-p", str(tmp_path), "commit"])

        assert result.exit_code != 0

    def test_commit_empty_staging_fails(self, tmp_path: Path) -> None:
        runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])

        result = runner.invoke(app, ["-p", str(tmp_path), "commit", "Empty"])

        assert result.exit_code == 1
        assert "Nothing to commit" in result.stdout
        assert (tmp_path / REPO_DIR / "HEAD").read_text() == ""

    def test_commit_allow_empty(self, tmp_path: Path) -> None:
        runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])

        result = runner.invoke(app, ["-p", str(tmp_path), "commit", "Milestone", "--allow-empty"])

        assert result.exit_code == 0
        assert len((tmp_path / REPO_DIR / "HEAD").read_text()) == 40

    def test_commit_chain_parent(self, tmp_path: Path) -> None:
        runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])
        (tmp_path / "a.txt").write_text("a")
        runner.invoke(app, ["-p", str(tmp_path), "add", "a.txt"])
        runner.invoke(app, ["-p", str(tmp_path), "commit", "first"])
        first = (tmp_path / REPO_DIR / "HEAD").read_text()

        (tmp_path / "a.txt").write_text("b")
        runner.invoke(app, ["-p", str(tmp_path), "add", "a.txt"])
        runner.invoke(app, ["-p", str(tmp_path), "commit", "second"])
        second = (tmp_path / REPO_DIR / "HEAD").read_text()

        commit_data = json.loads((tmp_path / REPO_DIR / "objects" / second).read_text())
        assert commit_data["parent"] == first
