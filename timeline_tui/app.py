"""Main Textual application for the agent timeline TUI."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding

from .config import TimelineConfig
from .data.conversation_loader import TimelineLoad, load_timeline
from .data.watcher import ConversationWatcher
from .themes.catppuccin import TIMELINE_THEME
from .widgets.conversation_panel import ConversationPanel
from .widgets.footer import TimelineFooter
from .widgets.header import TimelineHeader

logger = logging.getLogger(__name__)


class TimelineApp(App):
    """Viewer for one agent conversation log."""

    TITLE = "Agent Timeline"
    CSS = TIMELINE_THEME

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "reload", "Reload"),
        Binding("e", "expand_tools", "Expand tools"),
        Binding("c", "collapse_tools", "Collapse tools"),
        Binding("j", "scroll_timeline('down')", "Down", show=False),
        Binding("k", "scroll_timeline('up')", "Up", show=False),
        Binding("g", "scroll_timeline('home')", "Top", show=False),
        Binding("G", "scroll_timeline('end')", "Bottom", show=False),
        Binding("?", "help", "Help"),
    ]

    def __init__(self, config: TimelineConfig, timeline: TimelineLoad | None = None) -> None:
        """Initialize the app.

        Args:
            config: Viewer configuration.
            timeline: Pre-loaded timeline; loaded from config.conversation if None.
        """
        super().__init__()
        self.timeline_config = config
        self.conversation_path = config.conversation_path
        self.timeline = timeline if timeline is not None else load_timeline(self.conversation_path)
        self.watcher = ConversationWatcher(self.conversation_path, config.poll_interval)

    def compose(self) -> ComposeResult:
        yield TimelineHeader(self.conversation_path)
        yield ConversationPanel(
            self.timeline,
            title=self.timeline_config.title,
            expand_tool_calls=self.timeline_config.expand_tool_calls,
        )
        yield TimelineFooter()

    async def on_mount(self) -> None:
        """Show load state and start the file watcher."""
        self.query_one(TimelineHeader).update_timeline(self.timeline)
        if self.timeline.error is not None:
            self.notify(str(self.timeline.error), title="Load failed", severity="error")

        if self.timeline_config.watch:
            self.watcher.on_change(self._on_conversation_change)
            self.watcher.start()

    def on_unmount(self) -> None:
        """Stop file watcher on unmount."""
        self.watcher.stop()

    async def _on_conversation_change(self) -> None:
        """Handle conversation file changes."""
        await self.action_reload()

    async def action_reload(self) -> None:
        """Reload the whole conversation log from disk."""
        self.timeline = load_timeline(self.conversation_path)
        logger.info("Reloaded %s (%d items)", self.conversation_path, len(self.timeline.items))
        await self.query_one(ConversationPanel).set_timeline(self.timeline)
        self.query_one(TimelineHeader).update_timeline(self.timeline)

    def action_expand_tools(self) -> None:
        self.query_one(ConversationPanel).set_all_tool_calls(True)

    def action_collapse_tools(self) -> None:
        self.query_one(ConversationPanel).set_all_tool_calls(False)

    def action_scroll_timeline(self, direction: str) -> None:
        self.query_one(ConversationPanel).scroll_timeline(direction)

    def action_help(self) -> None:
        """Show help dialog."""
        self.notify(
            "Keyboard shortcuts:\n"
            "j/k: Scroll │ g/G: Top/Bottom │ r: Reload │ q: Quit\n"
            "e: Expand tool calls │ c: Collapse tool calls",
            title="Help",
            timeout=5,
        )
