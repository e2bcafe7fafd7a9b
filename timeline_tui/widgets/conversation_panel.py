"""Conversation panel rendering the timeline of turns, todos and tool calls."""

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widget import Widget
from textual.widgets import Collapsible, Static

from ..data.conversation_loader import TimelineLoad, get_timeline_summary
from ..data.identity import ElementId
from ..data.models import (
    AgentMessage,
    AgentTodoList,
    TimelineItem,
    ToolCallGroup,
    UserMessage,
)
from ..data.schema import ParseError
from .agent_message import AgentMessageView
from .todo_list import AgentTodoListView
from .tool_call import ToolCallItemView
from .user_message import UserMessageView

logger = logging.getLogger(__name__)


def _claim_id(element_id: ElementId, seen: set[str]) -> str | None:
    """Return the DOM id for an element, or None if already used in this render."""
    dom_id = element_id.dom_id
    if dom_id in seen:
        logger.warning("Duplicate element id %s, rendering without id", dom_id)
        return None
    seen.add(dom_id)
    return dom_id


def render_item(
    item: TimelineItem,
    open_state: dict[str, bool],
    seen: set[str],
    expand_tool_calls: bool = False,
) -> Widget:
    """Render one timeline item.

    Args:
        item: View model to render.
        open_state: Tool call open flags by DOM id; read, never written.
        seen: DOM ids already used in this render; updated in place.
        expand_tool_calls: Open tool calls that have no entry in open_state.

    Returns:
        The widget for the item, indented for todo lists and tool groups.

    Raises:
        TypeError: If the item is not a known timeline kind.
    """
    if isinstance(item, UserMessage):
        return UserMessageView(item, id=_claim_id(item.element_id, seen))
    if isinstance(item, AgentMessage):
        return AgentMessageView(item, id=_claim_id(item.element_id, seen))
    if isinstance(item, AgentTodoList):
        return Vertical(AgentTodoListView(item), classes="todo-indent")
    if isinstance(item, ToolCallGroup):
        views = []
        for tool_call in item.items:
            dom_id = tool_call.element_id.dom_id
            is_open = open_state.get(dom_id, tool_call.open or expand_tool_calls)
            views.append(
                ToolCallItemView(tool_call, is_open, id=_claim_id(tool_call.element_id, seen))
            )
        return Vertical(*views, classes="tool-group")
    raise TypeError(f"Unsupported timeline item: {type(item).__name__}")


def compose_timeline(
    items: tuple[TimelineItem, ...] | list[TimelineItem],
    open_state: dict[str, bool] | None = None,
    expand_tool_calls: bool = False,
) -> VerticalScroll:
    """Compose the scrollable timeline container for a sequence of items.

    Args:
        items: Timeline view models in display order.
        open_state: Externally owned tool call open flags by DOM id.
        expand_tool_calls: Default open flag for tool calls not in open_state.

    Returns:
        A VerticalScroll holding one child per item, in order.
    """
    open_state = open_state or {}
    seen: set[str] = set()
    children = [render_item(item, open_state, seen, expand_tool_calls) for item in items]
    return VerticalScroll(*children, id="timeline")


class ConversationPanel(Widget):
    """Scrollable conversation timeline.

    The panel owns the tool call open/closed flags so that they survive a
    re-render of the same log.
    """

    DEFAULT_CSS = """
    ConversationPanel {
        height: 1fr;
        width: 100%;
        layout: vertical;
    }

    ConversationPanel .conv-header {
        height: 1;
        background: #181825;
        color: #cdd6f4;
        padding: 0 1;
    }

    ConversationPanel .error-banner {
        height: auto;
        background: #45475a;
        color: #f38ba8;
        padding: 0 1;
    }

    ConversationPanel .empty-message {
        text-align: center;
        color: #7f849c;
        padding: 2;
    }

    ConversationPanel #timeline {
        height: 1fr;
        width: 100%;
        padding: 1 2;
        background: #1e1e2e;
    }

    ConversationPanel #timeline > * {
        margin: 0 0 1 0;
    }

    ConversationPanel .todo-indent {
        height: auto;
        padding: 0 0 0 4;
    }

    ConversationPanel .tool-group {
        height: auto;
        padding: 0 0 0 4;
    }

    ConversationPanel .tool-group > ToolCallItemView {
        margin: 0 0 1 0;
    }
    """

    def __init__(
        self,
        timeline: TimelineLoad | None = None,
        title: str = "Conversation",
        expand_tool_calls: bool = False,
        open_state: dict[str, bool] | None = None,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.timeline = timeline or TimelineLoad()
        self.panel_title = title
        self.expand_tool_calls = expand_tool_calls
        self.open_state: dict[str, bool] = open_state if open_state is not None else {}

    @property
    def items(self) -> tuple[TimelineItem, ...]:
        return self.timeline.items

    @property
    def error(self) -> ParseError | None:
        return self.timeline.error

    def _header_text(self) -> str:
        summary = get_timeline_summary(self.items)
        turns = summary["user_turns"] + summary["agent_turns"]
        return (
            f"{self.panel_title} │ {turns} turns │ {summary['tool_calls']} tool calls │ "
            f"{summary['todo_completed']}/{summary['todo_entries']} todos"
        )

    def compose(self) -> ComposeResult:
        yield Static(Text(self._header_text()), classes="conv-header", id="conv-header")

        if self.error is not None:
            yield Static(
                Text(f"Could not load conversation: {self.error}"),
                classes="error-banner",
                id="conv-error",
            )

        if not self.items:
            yield Static("No conversation items.", classes="empty-message")

        yield compose_timeline(self.items, self.open_state, self.expand_tool_calls)

    async def set_timeline(self, timeline: TimelineLoad) -> None:
        """Replace the whole timeline and re-render.

        Open flags of tool calls that are still present are kept.
        """
        live_ids = {
            tool_call.element_id.dom_id
            for item in timeline.items
            if isinstance(item, ToolCallGroup)
            for tool_call in item.items
        }
        self.open_state = {k: v for k, v in self.open_state.items() if k in live_ids}
        self.timeline = timeline
        await self.recompose()

    def tool_call_views(self) -> list[ToolCallItemView]:
        return list(self.query(ToolCallItemView))

    def set_all_tool_calls(self, is_open: bool) -> None:
        """Expand or collapse every tool call."""
        for view in self.tool_call_views():
            self.open_state[view.item.element_id.dom_id] = is_open
            view.collapsed = not is_open

    def on_collapsible_expanded(self, event: Collapsible.Expanded) -> None:
        if isinstance(event.collapsible, ToolCallItemView):
            self.open_state[event.collapsible.item.element_id.dom_id] = True

    def on_collapsible_collapsed(self, event: Collapsible.Collapsed) -> None:
        if isinstance(event.collapsible, ToolCallItemView):
            self.open_state[event.collapsible.item.element_id.dom_id] = False

    def scroll_timeline(self, action: str) -> None:
        """Scroll the timeline: up, down, home or end."""
        timeline = self.query_one("#timeline", VerticalScroll)
        if action == "up":
            timeline.scroll_up()
        elif action == "down":
            timeline.scroll_down()
        elif action == "home":
            timeline.scroll_home()
        elif action == "end":
            timeline.scroll_end()
