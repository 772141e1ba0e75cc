"""Integration tests for commithub status command."""

from pathlib import Path

from typer.testing import CliRunner

from commithub.cli.main import app

runner = CliRunner()


def test_status_fresh_repo(tmp_path: Path) -> None:
    runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])

    result = runner.invoke(app, ["-p", str(tmp_path), "status"])

    assert result.exit_code == 0
    assert "no commits yet" in result.stdout
    assert "Nothing staged" in result.stdout


def test_status_shows_staged_files_in_order(tmp_path: Path) -> None:
    runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.txt").write_text("a")
    runner.invoke(app, ["-p", str(tmp_path), "add", "b.txt", "a.txt"])

    result = runner.invoke(app, ["-p", str(tmp_path), "status"])

    assert result.exit_code == 0
    assert "Changes to be committed" in result.stdout
    assert result.stdout.index("b.txt") < result.stdout.index("a.txt")


def test_status_after_commit(tmp_path: Path) -> None:
    runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])
    (tmp_path / "a.txt").write_text("a")
    runner.invoke(app, ["-p", str(tmp_path), "add", "a.txt"])
    runner.invoke(app, ["-p", str(tmp_path), "commit", "first"])

    result = runner.invoke(app, ["-p", str(tmp_path), "status"])

    assert "HEAD:" in result.stdout
    assert "no commits yet" not in result.stdout
    assert "Nothing staged" in result.stdout


def test_status_unreadable_index(tmp_path: Path) -> None:
    runner.invoke(app, ["-p", str(tmp_path), "init", "--quiet"])
    index = tmp_path / ".commithub" / "index"
    index.unlink()
    index.mkdir()

    result = runner.invoke(app, ["-p", str(tmp_path), "status"])

    assert result.exit_code == 2
    assert "Failed to read repository state" in result.stdout
    assert isinstance(result.exception, SystemExit)
