"""Load a conversation log into render-ready timeline items."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .mapper import map_conversation
from .models import (
    AgentMessage,
    AgentTodoList,
    TimelineItem,
    ToolCallGroup,
    ToolCallStatus,
    UserMessage,
)
from .schema import ParseError, parse_conversation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimelineLoad:
    """Outcome of loading a conversation.

    On failure ``items`` is empty and ``error`` says what went wrong, so the
    caller can show an empty timeline with an error banner.
    """

    items: tuple[TimelineItem, ...] = ()
    error: ParseError | None = None
    source: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def read_document(path: Path) -> Any:
    """Read and decode a JSON conversation file.

    Args:
        path: Path to the conversation file.

    Returns:
        Decoded JSON document.

    Raises:
        ParseError: If the file cannot be read or is not valid JSON.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParseError(f"cannot read {path}: {e.strerror or e}") from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e


def load_timeline(source: Path | str | Any) -> TimelineLoad:
    """Parse and map a conversation log.

    Args:
        source: Path to a JSON file, or an already decoded document.

    Returns:
        TimelineLoad with the mapped items in log order, or the parse error.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        label = str(path)
        try:
            document = read_document(path)
        except ParseError as e:
            logger.warning("Failed to load conversation %s: %s", label, e)
            return TimelineLoad(error=e, source=label)
    else:
        label = "<document>"
        document = source

    try:
        schema_items = parse_conversation(document)
    except ParseError as e:
        logger.warning("Failed to parse conversation %s: %s", label, e)
        return TimelineLoad(error=e, source=label)

    items = tuple(map_conversation(schema_items))
    logger.info("Loaded %d conversation items from %s", len(items), label)
    return TimelineLoad(items=items, source=label)


def get_timeline_summary(items: tuple[TimelineItem, ...] | list[TimelineItem]) -> dict:
    """Get summary counts for a timeline.

    Args:
        items: Mapped timeline items.

    Returns:
        Dict with user/agent turn counts, todo counts and tool calls by status.
    """
    summary = {
        "user_turns": 0,
        "agent_turns": 0,
        "todo_lists": 0,
        "todo_entries": 0,
        "todo_completed": 0,
        "tool_calls": 0,
        "tool_status": {status.value: 0 for status in ToolCallStatus},
    }

    for item in items:
        if isinstance(item, UserMessage):
            summary["user_turns"] += 1
        elif isinstance(item, AgentMessage):
            summary["agent_turns"] += 1
        elif isinstance(item, AgentTodoList):
            summary["todo_lists"] += 1
            summary["todo_entries"] += len(item.entries)
            summary["todo_completed"] += item.completed_count
        elif isinstance(item, ToolCallGroup):
            summary["tool_calls"] += len(item.items)
            for tool_call in item.items:
                summary["tool_status"][tool_call.data.status.value] += 1

    return summary
