"""Command-line interface for UNDERBAR."""
