"""Command-line interface for Speclint."""
