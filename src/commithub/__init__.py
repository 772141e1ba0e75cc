"""CommitHub - a minimal content-addressable version control store.

CommitHub tracks files added to a staging area, bundles them into immutable
commits forming a linear history, and diffs file content across commits.
"""

__version__ = "0.1.0"
__author__ = "CommitHub Contributors"

__all__ = ["__version__", "__author__"]
