"""Map parsed conversation items to timeline view models.

Every function here is pure. Enum-like strings from the log are coerced
through the tables below; anything unrecognized falls back to the table's
default instead of failing.
"""

import logging
from enum import Enum
from typing import TypeVar

from .identity import identity
from .models import (
    AgentMessage,
    AgentMessageContent,
    AgentMessageData,
    AgentTodoList,
    MessageContent,
    PlanEntry,
    PlanEntryPriority,
    PlanEntryStatus,
    ResourceContent,
    TimelineItem,
    ToolCallContent,
    ToolCallData,
    ToolCallGroup,
    ToolCallItem,
    ToolCallKind,
    ToolCallStatus,
    UserMessage,
    UserMessageData,
)
from .schema import (
    AgentMessageDataSchema,
    AgentMessageSchema,
    AgentTodoListSchema,
    ConversationItemSchema,
    PlanEntrySchema,
    ResourceContentSchema,
    TextContentSchema,
    ToolCallGroupSchema,
    ToolCallItemSchema,
    UserMessageDataSchema,
    UserMessageSchema,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

PRIORITY_MAP = {
    "High": PlanEntryPriority.HIGH,
    "Medium": PlanEntryPriority.MEDIUM,
    "Low": PlanEntryPriority.LOW,
}

PLAN_STATUS_MAP = {
    "Pending": PlanEntryStatus.PENDING,
    "InProgress": PlanEntryStatus.IN_PROGRESS,
    "Completed": PlanEntryStatus.COMPLETED,
}

TOOL_STATUS_MAP = {
    "Pending": ToolCallStatus.PENDING,
    "InProgress": ToolCallStatus.IN_PROGRESS,
    "Completed": ToolCallStatus.COMPLETED,
    "Failed": ToolCallStatus.FAILED,
}

# Keys are lowercase; lookups lowercase the source string first.
TOOL_KIND_MAP = {
    "read": ToolCallKind.READ,
    "edit": ToolCallKind.EDIT,
    "delete": ToolCallKind.DELETE,
    "move": ToolCallKind.MOVE,
    "search": ToolCallKind.SEARCH,
    "execute": ToolCallKind.EXECUTE,
    "think": ToolCallKind.THINK,
    "fetch": ToolCallKind.FETCH,
    "switch_mode": ToolCallKind.SWITCH_MODE,
    "switchmode": ToolCallKind.SWITCH_MODE,
    "other": ToolCallKind.OTHER,
}


def _coerce(table: dict[str, E], value: str, default: E, field_name: str) -> E:
    """Look up a source string, falling back to a default when unknown."""
    result = table.get(value)
    if result is None:
        logger.debug("Unknown %s %r, using %s", field_name, value, default.name)
        return default
    return result


def coerce_priority(value: str) -> PlanEntryPriority:
    return _coerce(PRIORITY_MAP, value, PlanEntryPriority.MEDIUM, "plan priority")


def coerce_plan_status(value: str) -> PlanEntryStatus:
    return _coerce(PLAN_STATUS_MAP, value, PlanEntryStatus.PENDING, "plan status")


def coerce_tool_status(value: str) -> ToolCallStatus:
    return _coerce(TOOL_STATUS_MAP, value, ToolCallStatus.PENDING, "tool call status")


def coerce_tool_kind(value: str) -> ToolCallKind:
    return _coerce(TOOL_KIND_MAP, value.lower(), ToolCallKind.OTHER, "tool call kind")


def map_user_message(id: str, data: UserMessageDataSchema) -> UserMessage:
    """Build a user message, appending contents in log order.

    Args:
        id: Log id of the message, used for its element identity.
        data: Parsed message payload.

    Returns:
        The mapped UserMessage.
    """
    user_data = UserMessageData(session_id=data.session_id)
    for content in data.contents:
        if isinstance(content, TextContentSchema):
            user_data = user_data.add_content(MessageContent.of_text(content.text))
        elif isinstance(content, ResourceContentSchema):
            resource = ResourceContent(
                uri=content.uri,
                mime_type=content.mime_type,
                text=content.text,
            )
            user_data = user_data.add_content(MessageContent.of_resource(resource))
        else:
            raise TypeError(f"Unsupported message content: {type(content).__name__}")
    return UserMessage(element_id=identity(id), data=user_data)


def map_agent_message(id: str, data: AgentMessageDataSchema) -> AgentMessage:
    """Build an agent message from its streamed chunks.

    The agent name is set only when the log has one, and the message is
    marked complete only when the log says so. Chunks keep log order.

    Args:
        id: Log id of the message.
        data: Parsed message payload.

    Returns:
        The mapped AgentMessage.
    """
    agent_data = AgentMessageData(session_id=data.session_id)
    if data.agent_name is not None:
        agent_data = agent_data.with_agent_name(data.agent_name)
    if data.is_complete:
        agent_data = agent_data.complete()
    for chunk in data.chunks:
        # Only text chunks exist so far; content_type is not consulted.
        agent_data = agent_data.add_chunk(AgentMessageContent.of_text(chunk.text))
    return AgentMessage(element_id=identity(id), data=agent_data)


def map_plan_entry(entry: PlanEntrySchema) -> PlanEntry:
    return (
        PlanEntry(content=entry.content)
        .with_priority(coerce_priority(entry.priority))
        .with_status(coerce_plan_status(entry.status))
    )


def map_todo_list(title: str, entries: tuple[PlanEntrySchema, ...]) -> AgentTodoList:
    """Build a todo list, coercing each entry's priority and status.

    Args:
        title: List heading, passed through.
        entries: Parsed entries in log order.

    Returns:
        The mapped AgentTodoList.
    """
    plan_entries = tuple(map_plan_entry(e) for e in entries)
    return AgentTodoList().with_title(title).with_entries(plan_entries)


def map_tool_call(item: ToolCallItemSchema) -> ToolCallItem:
    """Build a tool call view model.

    Args:
        item: Parsed tool call with its log id and open flag.

    Returns:
        The mapped ToolCallItem, identity derived from the log id.
    """
    content = tuple(ToolCallContent(text=c.text) for c in item.data.content)
    data = (
        ToolCallData(tool_call_id=item.data.tool_call_id, title=item.data.title)
        .with_kind(coerce_tool_kind(item.data.kind))
        .with_status(coerce_tool_status(item.data.status))
        .with_content(content)
    )
    return ToolCallItem(element_id=identity(item.id), data=data).with_open(item.open)


def map_tool_call_group(items: tuple[ToolCallItemSchema, ...]) -> ToolCallGroup:
    return ToolCallGroup(items=tuple(map_tool_call(t) for t in items))


def map_item(item: ConversationItemSchema) -> TimelineItem:
    """Map one schema item to its view model.

    Raises:
        TypeError: If the item is not one of the known schema kinds.
    """
    if isinstance(item, UserMessageSchema):
        return map_user_message(item.id, item.data)
    if isinstance(item, AgentMessageSchema):
        return map_agent_message(item.id, item.data)
    if isinstance(item, AgentTodoListSchema):
        return map_todo_list(item.title, item.entries)
    if isinstance(item, ToolCallGroupSchema):
        return map_tool_call_group(item.items)
    raise TypeError(f"Unsupported conversation item: {type(item).__name__}")


def map_conversation(items: list[ConversationItemSchema]) -> list[TimelineItem]:
    """Map a whole parsed conversation, one view model per item, in order."""
    return [map_item(item) for item in items]
