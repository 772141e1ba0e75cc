"""Diff computation for CommitHub.

This module provides the line-level text diff and the engine that compares
a commit's files with its parent's.
"""

from commithub.diff.engine import CommitDiff, DiffEngine, FileDiff
from commithub.diff.text_diff import DiffSegment, diff_lines

__all__ = [
    "DiffEngine",
    "CommitDiff",
    "FileDiff",
    "DiffSegment",
    "diff_lines",
]
