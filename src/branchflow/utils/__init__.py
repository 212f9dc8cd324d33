"""Shared helpers: debug log and formatting."""
