"""Command-line interface for BLOGUSER."""
