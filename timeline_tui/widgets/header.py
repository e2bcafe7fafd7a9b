"""Header widget for the timeline TUI."""

from datetime import datetime
from pathlib import Path

from rich.markup import escape
from textual.widgets import Static

from ..data.conversation_loader import TimelineLoad, get_timeline_summary


class TimelineHeader(Static):
    """One-line header showing the log file, load state and tool call stats."""

    DEFAULT_CSS = """
    TimelineHeader {
        background: #181825;
        color: #cdd6f4;
        height: 1;
        dock: top;
        padding: 0 1;
    }
    """

    def __init__(self, conversation_path: Path) -> None:
        super().__init__("")
        self.conversation_path = conversation_path
        self.loaded_at: datetime | None = None
        self.item_count: int = 0
        self.failed_tools: int = 0
        self.has_error: bool = False

    def render(self) -> str:
        """Render header content."""
        name = escape(self.conversation_path.name)
        loaded = self.loaded_at.strftime("%H:%M:%S") if self.loaded_at else "--:--:--"

        if self.has_error:
            state = "[#f38ba8]load failed[/]"
        else:
            state = f"[#a6e3a1]{self.item_count}[/] items"

        line = f" AGENT TIMELINE │ {name} │ {state} │ loaded {loaded}"
        if self.failed_tools:
            line += f" │ [#f38ba8]{self.failed_tools} failed tool calls[/]"
        return line

    def update_timeline(self, timeline: TimelineLoad) -> None:
        """Update stats after a (re)load.

        Args:
            timeline: The freshly loaded timeline.
        """
        summary = get_timeline_summary(timeline.items)
        self.loaded_at = datetime.now()
        self.item_count = len(timeline.items)
        self.failed_tools = summary["tool_status"]["failed"]
        self.has_error = not timeline.ok
        self.refresh()
