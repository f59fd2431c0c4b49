"""Command-line shell for mini-git."""
