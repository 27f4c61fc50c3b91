"""Command-line interface for metamatch."""
