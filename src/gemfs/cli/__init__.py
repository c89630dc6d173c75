"""Command-line interface for gemfs."""
