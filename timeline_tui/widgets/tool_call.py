"""Collapsible tool call block."""

from rich.markup import escape
from rich.text import Text
from textual.widgets import Collapsible, Static

from ..data.models import ToolCallItem, ToolCallKind, ToolCallStatus

KIND_ICONS = {
    ToolCallKind.READ: "▤",
    ToolCallKind.EDIT: "✎",
    ToolCallKind.DELETE: "✗",
    ToolCallKind.MOVE: "⇄",
    ToolCallKind.SEARCH: "⌕",
    ToolCallKind.EXECUTE: "▶",
    ToolCallKind.THINK: "✻",
    ToolCallKind.FETCH: "⇣",
    ToolCallKind.SWITCH_MODE: "⇋",
    ToolCallKind.OTHER: "•",
}

STATUS_LABELS = {
    ToolCallStatus.PENDING: "pending",
    ToolCallStatus.IN_PROGRESS: "running",
    ToolCallStatus.COMPLETED: "done",
    ToolCallStatus.FAILED: "failed",
}


def format_tool_title(item: ToolCallItem) -> str:
    """Plain title line: kind icon, title and status label."""
    data = item.data
    return f"{KIND_ICONS[data.kind]} {data.title} · {STATUS_LABELS[data.status]}"


class ToolCallItemView(Collapsible):
    """A tool call, collapsed unless opened.

    The open flag is read once at construction; toggling afterwards only
    changes this widget and is reported to the panel through the
    Collapsible.Expanded / Collapsible.Collapsed messages.
    """

    DEFAULT_CSS = """
    ToolCallItemView {
        height: auto;
        width: 100%;
        background: #181825;
        border-top: none;
        padding: 0;
    }

    ToolCallItemView .tool-content {
        color: #a6adc8;
    }

    ToolCallItemView .tool-empty {
        color: #6c7086;
        text-style: italic;
    }

    ToolCallItemView.tool-failed CollapsibleTitle {
        color: #f38ba8;
    }

    ToolCallItemView.tool-completed CollapsibleTitle {
        color: #a6e3a1;
    }

    ToolCallItemView.tool-in_progress CollapsibleTitle {
        color: #fab387;
    }
    """

    def __init__(self, item: ToolCallItem, is_open: bool, id: str | None = None) -> None:
        if item.data.content:
            children = [Static(Text(c.text), classes="tool-content") for c in item.data.content]
        else:
            children = [Static("No output", classes="tool-empty")]
        super().__init__(
            *children,
            title=escape(format_tool_title(item)),
            collapsed=not is_open,
            id=id,
            classes=f"tool-call tool-{item.data.status.value}",
        )
        self.item = item
