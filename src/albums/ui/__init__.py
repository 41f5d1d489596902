"""Command-line presentation helpers."""
