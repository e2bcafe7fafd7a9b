"""Agent turn block."""

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ..data.models import AgentMessage

DEFAULT_AGENT_NAME = "Agent"
COMPLETE_LABEL = "✓ complete"
STREAMING_LABEL = "… streaming"


class AgentMessageView(Widget):
    """An agent message with its chunks joined into one body."""

    DEFAULT_CSS = """
    AgentMessageView {
        height: auto;
        width: 100%;
        layout: vertical;
        background: #1e1e2e;
        border-left: thick #cba6f7;
        padding: 0 1;
    }

    AgentMessageView .message-header {
        color: #cba6f7;
        text-style: bold;
    }

    AgentMessageView .message-text {
        color: #cdd6f4;
    }

    AgentMessageView .message-status {
        color: #7f849c;
    }

    AgentMessageView .message-status.complete {
        color: #a6e3a1;
    }

    AgentMessageView .message-status.streaming {
        color: #fab387;
        text-style: italic;
    }
    """

    def __init__(self, message: AgentMessage, id: str | None = None) -> None:
        super().__init__(id=id)
        self.message = message

    @property
    def agent_name(self) -> str:
        return self.message.data.agent_name or DEFAULT_AGENT_NAME

    @property
    def body_text(self) -> str:
        return self.message.data.text

    @property
    def status_label(self) -> str:
        return COMPLETE_LABEL if self.message.data.is_complete else STREAMING_LABEL

    def compose(self) -> ComposeResult:
        yield Static(Text(self.agent_name), classes="message-header")
        yield Static(Text(self.body_text), classes="message-text")
        state = "complete" if self.message.data.is_complete else "streaming"
        yield Static(self.status_label, classes=f"message-status {state}")
