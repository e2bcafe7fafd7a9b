"""Data layer for the timeline TUI."""

from .conversation_loader import TimelineLoad, get_timeline_summary, load_timeline
from .identity import ElementId, identity
from .models import (
    AgentMessage,
    AgentTodoList,
    PlanEntry,
    PlanEntryPriority,
    PlanEntryStatus,
    TimelineItem,
    ToolCallGroup,
    ToolCallItem,
    ToolCallKind,
    ToolCallStatus,
    UserMessage,
)
from .schema import ParseError, parse_conversation

__all__ = [
    "TimelineLoad",
    "get_timeline_summary",
    "load_timeline",
    "ElementId",
    "identity",
    "AgentMessage",
    "AgentTodoList",
    "PlanEntry",
    "PlanEntryPriority",
    "PlanEntryStatus",
    "TimelineItem",
    "ToolCallGroup",
    "ToolCallItem",
    "ToolCallKind",
    "ToolCallStatus",
    "UserMessage",
    "ParseError",
    "parse_conversation",
]
