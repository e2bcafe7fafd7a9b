"""User turn block."""

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ..data.models import MessageContentType, UserMessage


class UserMessageView(Widget):
    """A user message, one line per content entry in log order."""

    DEFAULT_CSS = """
    UserMessageView {
        height: auto;
        width: 100%;
        layout: vertical;
        background: #181825;
        border-left: thick #89b4fa;
        padding: 0 1;
    }

    UserMessageView .message-header {
        color: #89b4fa;
        text-style: bold;
    }

    UserMessageView .message-text {
        color: #cdd6f4;
    }

    UserMessageView .resource-label {
        color: #94e2d5;
    }

    UserMessageView .resource-text {
        color: #a6adc8;
        padding: 0 0 0 2;
    }
    """

    def __init__(self, message: UserMessage, id: str | None = None) -> None:
        super().__init__(id=id)
        self.message = message

    @property
    def lines(self) -> list[str]:
        """Displayed text lines below the header."""
        lines = []
        for content in self.message.data.contents:
            if content.content_type is MessageContentType.RESOURCE and content.resource:
                lines.append(f"{content.resource.uri} ({content.resource.mime_type})")
                lines.append(content.resource.text)
            else:
                lines.append(content.text)
        return lines

    def compose(self) -> ComposeResult:
        yield Static("You", classes="message-header")
        for content in self.message.data.contents:
            if content.content_type is MessageContentType.RESOURCE and content.resource:
                resource = content.resource
                yield Static(
                    Text(f"{resource.uri} ({resource.mime_type})"),
                    classes="resource-label",
                )
                yield Static(Text(resource.text), classes="resource-text")
            else:
                yield Static(Text(content.text), classes="message-text")
