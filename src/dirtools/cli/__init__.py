"""Command-line interface for dirtools."""
