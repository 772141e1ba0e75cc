"""Main CLI entry point for CommitHub."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from commithub.cli.render import render_commit, render_commit_diff
from commithub.constants import (
    EXIT_DATA_ERROR,
    EXIT_SYSTEM_ERROR,
    EXIT_USER_ERROR,
    LOG_FORMAT,
    REPO_DIR,
)
from commithub.core import Repository
from commithub.errors import (
    AlreadyInitializedError,
    CommitHubError,
    CommitNotFoundError,
    DataIntegrityError,
    FileReadError,
    MalformedDataError,
    NotARepositoryError,
)

console = Console()
app = typer.Typer(
    name="commithub",
    help="Minimal content-addressable version control",
    add_completion=False,
)

logger = logging.getLogger(__name__)


@app.callback()
def main_callback(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Repository root (default: current directory)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Minimal content-addressable version control."""
    ctx.ensure_object(dict)
    ctx.obj["workspace_root"] = path if path is not None else Path.cwd()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _workspace_root(ctx: typer.Context) -> Path:
    obj = ctx.obj or {}
    return obj.get("workspace_root") or Path.cwd()


def _open_repository(ctx: typer.Context) -> Repository:
    """Open the repository or exit with the usual hint."""
    workspace_root = _workspace_root(ctx)
    try:
        return Repository(workspace_root)
    except NotARepositoryError:
        console.print(
            "[bold red]Error:[/bold red] Not a CommitHub repository",
            style="red",
        )
        console.print(
            f"  No {REPO_DIR}/ directory found in {workspace_root}",
            style="dim",
        )
        console.print(
            "\nRun [bold]commithub init[/bold] to initialize a repository",
            style="yellow",
        )
        raise typer.Exit(EXIT_USER_ERROR)


def _fail(message: str, code: int) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", style="red")
    raise typer.Exit(code)


def _fail_on_data_error(e: CommitHubError) -> None:
    logger.warning(f"Repository data error: {e}")
    console.print(
        f"[bold red]Repository data error:[/bold red] {escape(str(e))}",
        style="red",
    )
    console.print(
        f"  The {REPO_DIR}/ directory may be corrupted",
        style="dim",
    )
    raise typer.Exit(EXIT_DATA_ERROR)


@app.command()
def version() -> None:
    """Show CommitHub version."""
    from commithub import __version__
    typer.echo(f"CommitHub version {__version__}")


@app.command()
def init(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress output except errors",
    ),
) -> None:
    """Initialize a CommitHub repository."""
    workspace_root = _workspace_root(ctx)

    try:
        repo = Repository.init(workspace_root)
    except AlreadyInitializedError:
        console.print(
            f"[yellow]{REPO_DIR} folder has already been initialized[/yellow]"
        )
        console.print(f"  Existing repository left untouched: {workspace_root / REPO_DIR}", style="dim")
        return
    except OSError as e:
        _fail(f"Failed to initialize repository: {e}", EXIT_SYSTEM_ERROR)

    if not quiet:
        console.print("[bold green]✓[/bold green] Repository initialized successfully.")
        console.print(f"  [dim]Storage location:[/dim] {repo.repo_dir}")


@app.command()
def add(
    ctx: typer.Context,
    files: List[str] = typer.Argument(..., help="Files to stage"),
) -> None:
    """Add files to the staging area."""
    repo = _open_repository(ctx)

    errors = []
    for file_path in files:
        try:
            entry = repo.add(file_path)
        except FileReadError as e:
            errors.append(str(e))
            continue
        except MalformedDataError as e:
            _fail_on_data_error(e)
        except OSError as e:
            _fail(f"Failed to stage {file_path}: {e}", EXIT_SYSTEM_ERROR)

        console.print(f"Added [green]{escape(entry.path)}[/green] to staging area  [dim]({entry.hash[:8]})[/dim]")

    if errors:
        console.print("\n[bold red]Errors:[/bold red]")
        for error in errors:
            console.print(f"  [red]x[/red] {escape(error)}")
        raise typer.Exit(EXIT_USER_ERROR)


@app.command()
def commit(
    ctx: typer.Context,
    message: str = typer.Argument(..., help="Commit message"),
    allow_empty: bool = typer.Option(
        False,
        "--allow-empty",
        help="Allow a commit with nothing staged",
    ),
) -> None:
    """Commit staged files as a snapshot."""
    repo = _open_repository(ctx)

    try:
        if not allow_empty and repo.staging.is_empty():
            console.print(
                "[bold yellow]Warning:[/bold yellow] Nothing to commit (staging area is empty)",
                style="yellow",
            )
            console.print(
                "  Use [bold]commithub add <file>[/bold] to stage files",
                style="dim",
            )
            console.print(
                "  Or use [bold]--allow-empty[/bold] to create an empty commit",
                style="dim",
            )
            raise typer.Exit(EXIT_USER_ERROR)

        commit_hash = repo.commit(message)
    except (MalformedDataError, DataIntegrityError) as e:
        _fail_on_data_error(e)
    except OSError as e:
        _fail(f"Failed to create commit: {e}", EXIT_SYSTEM_ERROR)

    console.print(f"Commit successfully created: [bold cyan]{commit_hash}[/bold cyan]")


@app.command()
def log(
    ctx: typer.Context,
    max_count: Optional[int] = typer.Option(
        None,
        "--max-count",
        "-n",
        min=1,
        help="Limit number of commits to show",
    ),
    oneline: bool = typer.Option(
        False,
        "--oneline",
        help="Show each commit on a single line",
    ),
) -> None:
    """Show commit history, most recent first."""
    repo = _open_repository(ctx)

    shown = 0
    try:
        for entry in repo.log(max_count=max_count):
            render_commit(console, entry, oneline=oneline)
            shown += 1
    except CommitNotFoundError as e:
        console.print(
            f"[bold yellow]Warning:[/bold yellow] History stops here: {escape(str(e))}",
            style="yellow",
        )
        raise typer.Exit(EXIT_DATA_ERROR)
    except (MalformedDataError, DataIntegrityError) as e:
        _fail_on_data_error(e)
    except OSError as e:
        _fail(f"Failed to read history: {e}", EXIT_SYSTEM_ERROR)

    if shown == 0:
        console.print("[dim]No commits yet[/dim]")


@app.command()
def diff(
    ctx: typer.Context,
    commit_hash: str = typer.Argument(..., help="Commit to compare with its parent"),
) -> None:
    """Show per-file changes of a commit against its parent."""
    repo = _open_repository(ctx)

    try:
        commit_diff = repo.diff(commit_hash.strip())
    except CommitNotFoundError:
        console.print("[red]Commit not found[/red]")
        raise typer.Exit(EXIT_USER_ERROR)
    except (MalformedDataError, DataIntegrityError) as e:
        _fail_on_data_error(e)
    except OSError as e:
        _fail(f"Failed to read commit {commit_hash}: {e}", EXIT_SYSTEM_ERROR)

    render_commit_diff(console, commit_diff)


@app.command()
def status(ctx: typer.Context) -> None:
    """Show HEAD and the staging area."""
    repo = _open_repository(ctx)

    try:
        head = repo.get_head()
        staged = repo.staged()
    except MalformedDataError as e:
        _fail_on_data_error(e)
    except OSError as e:
        _fail(f"Failed to read repository state: {e}", EXIT_SYSTEM_ERROR)

    if head:
        console.print(f"[bold]HEAD:[/bold] {head[:7]}  [dim]({head})[/dim]")
    else:
        console.print("[bold]HEAD:[/bold] [dim](no commits yet)[/dim]")
    console.print()

    if staged:
        console.print("[bold green]Changes to be committed:[/bold green]")
        console.print("  [dim](use \"commithub commit <message>\" to commit)[/dim]\n")
        for entry in staged:
            console.print(f"  [green]+[/green] {escape(entry.path)}  [dim]({entry.hash[:8]})[/dim]")
    else:
        console.print("[dim]Nothing staged[/dim]")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
