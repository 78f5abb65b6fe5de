"""Command-line commands and output helpers."""
