"""Footer widget for the timeline TUI."""

from textual.widgets import Static


class TimelineFooter(Static):
    """Custom footer showing keybinding hints."""

    DEFAULT_CSS = """
    TimelineFooter {
        background: #181825;
        color: #7f849c;
        dock: bottom;
        height: 1;
        padding: 0 1;
    }
    """

    def render(self) -> str:
        """Render footer content."""
        bindings = [
            ("q", "Quit"),
            ("j/k", "Scroll"),
            ("g/G", "Top/Bottom"),
            ("e", "Expand tools"),
            ("c", "Collapse tools"),
            ("r", "Reload"),
            ("?", "Help"),
        ]
        parts = [f"[bold]{key}[/]:{action}" for key, action in bindings]
        return "  ".join(parts)
