"""Command-line interface for CommitHub."""
