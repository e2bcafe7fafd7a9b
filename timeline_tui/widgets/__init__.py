"""Textual widgets for the timeline TUI."""
