"""Terminal viewer for agent conversation timelines."""

__version__ = "0.1.0"
