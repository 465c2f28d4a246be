"""Shared constants for Speclint."""
