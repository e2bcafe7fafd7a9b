"""Color themes for the timeline TUI."""
