"""Console rendering for CommitHub commands."""

from datetime import datetime

from rich.console import Console
from rich.markup import escape

from commithub.diff.engine import FIRST_COMMIT, NEW_FILE, CommitDiff, FileDiff
from commithub.diff.text_diff import ADDED, REMOVED, split_lines
from commithub.models import Commit


def format_timestamp(timestamp: str) -> str:
    """Format an ISO8601 timestamp for display, falling back to the raw text."""
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return dt.strftime("%Y-%m-%d %H:%M:%S %z")


def render_commit(console: Console, commit: Commit, oneline: bool = False) -> None:
    """Print one history entry."""
    commit_hash = commit.hash or ""
    if oneline:
        message = commit.message.split("\n")[0]
        console.print(f"[yellow]{commit_hash[:7]}[/yellow] {escape(message)}")
        return

    console.print("---------------------")
    console.print(f"[bold yellow]Commit: {commit_hash}[/bold yellow]")
    if commit.parent:
        console.print(f"[dim]Parent: {commit.parent[:7]}[/dim]")
    else:
        console.print("[dim]Parent: (root commit)[/dim]")
    console.print(f"[bold]Date:[/bold]   {format_timestamp(commit.timestamp)}")
    console.print()
    for line in commit.message.split("\n"):
        console.print(f"    {escape(line)}")
    console.print()


def render_file_diff(console: Console, file_diff: FileDiff) -> None:
    """Print a file header, its content and its change report."""
    console.print(f"[bold]File:[/bold] [cyan]{escape(file_diff.path)}[/cyan]")
    console.print(
        escape(file_diff.content),
        end="" if file_diff.content.endswith("\n") else "\n",
        highlight=False,
        soft_wrap=True,
    )

    if file_diff.status == FIRST_COMMIT:
        console.print("[dim]First commit[/dim]")
    elif file_diff.status == NEW_FILE:
        console.print("[green]New file in this commit[/green]")
    else:
        console.print("\n[bold]Diff:[/bold]")
        if not file_diff.has_changes:
            console.print("[dim](no changes)[/dim]")
        for segment in file_diff.segments:
            for line in split_lines(segment.text):
                line = line[:-1] if line.endswith("\n") else line
                if segment.kind == ADDED:
                    console.print(f"[green]++ {escape(line)}[/green]", highlight=False, soft_wrap=True)
                elif segment.kind == REMOVED:
                    console.print(f"[red]-- {escape(line)}[/red]", highlight=False, soft_wrap=True)
                else:
                    console.print(f"[dim]   {escape(line)}[/dim]", highlight=False, soft_wrap=True)
        stats = file_diff.stats()
        console.print(f"[dim]{stats['added']} line(s) added, {stats['removed']} line(s) removed[/dim]")
    console.print()


def render_commit_diff(console: Console, commit_diff: CommitDiff) -> None:
    """Print the per-file report for a commit."""
    commit = commit_diff.commit
    console.print(f"[bold]Changes in commit[/bold] [bold cyan]{(commit.hash or '')[:7]}[/bold cyan]")
    console.print(f"  {escape(commit.message)}\n")

    if not commit_diff.files:
        console.print("[dim]No files in this commit[/dim]")
        return

    for file_diff in commit_diff.files:
        render_file_diff(console, file_diff)
