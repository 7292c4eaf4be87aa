"""Command-line interface for the people list."""
