"""Typed shape of a conversation log document and its parser.

The document is a JSON array of objects discriminated by ``type``. Parsing
checks structure only: enum-like fields (priority, status, kind) stay plain
strings and are coerced later by the mapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


class ParseError(ValueError):
    """Malformed conversation document.

    Args:
        reason: What is wrong.
        path: JSON location of the offending value, e.g. ``$[2].data.id``.
    """

    def __init__(self, reason: str, path: str = "$") -> None:
        super().__init__(f"{path}: {reason}")
        self.reason = reason
        self.path = path


@dataclass(frozen=True)
class TextContentSchema:
    text: str


@dataclass(frozen=True)
class ResourceContentSchema:
    uri: str
    mime_type: str
    text: str


MessageContentSchema = Union[TextContentSchema, ResourceContentSchema]


@dataclass(frozen=True)
class UserMessageDataSchema:
    session_id: str
    contents: tuple[MessageContentSchema, ...] = ()


@dataclass(frozen=True)
class AgentMessageContentSchema:
    content_type: str
    text: str


@dataclass(frozen=True)
class AgentMessageDataSchema:
    session_id: str
    agent_name: str | None = None
    chunks: tuple[AgentMessageContentSchema, ...] = ()
    is_complete: bool = False


@dataclass(frozen=True)
class PlanEntrySchema:
    content: str
    priority: str
    status: str


@dataclass(frozen=True)
class ToolCallContentSchema:
    text: str


@dataclass(frozen=True)
class ToolCallDataSchema:
    tool_call_id: str
    title: str
    kind: str
    status: str
    content: tuple[ToolCallContentSchema, ...] = ()


@dataclass(frozen=True)
class ToolCallItemSchema:
    id: str
    data: ToolCallDataSchema
    open: bool = False


@dataclass(frozen=True)
class UserMessageSchema:
    id: str
    data: UserMessageDataSchema


@dataclass(frozen=True)
class AgentMessageSchema:
    id: str
    data: AgentMessageDataSchema


@dataclass(frozen=True)
class AgentTodoListSchema:
    title: str
    entries: tuple[PlanEntrySchema, ...] = ()


@dataclass(frozen=True)
class ToolCallGroupSchema:
    items: tuple[ToolCallItemSchema, ...] = ()


ConversationItemSchema = Union[
    UserMessageSchema,
    AgentMessageSchema,
    AgentTodoListSchema,
    ToolCallGroupSchema,
]

_JSON_TYPE_NAMES = {
    str: "string",
    bool: "boolean",
    list: "array",
    dict: "object",
}


def _expect(value: Any, expected: type, path: str) -> Any:
    """Check the JSON type of a value, raising ParseError on mismatch."""
    if not isinstance(value, expected):
        raise ParseError(
            f"expected {_JSON_TYPE_NAMES[expected]}, got {type(value).__name__}",
            path,
        )
    return value


def _field(obj: dict[str, Any], key: str, expected: type, path: str) -> Any:
    """Return a required field of a JSON object."""
    if key not in obj:
        raise ParseError(f"missing required field '{key}'", path)
    return _expect(obj[key], expected, f"{path}.{key}")


def _parse_message_content(raw: Any, path: str) -> MessageContentSchema:
    obj = _expect(raw, dict, path)
    content_type = _field(obj, "type", str, path)
    if content_type == "Text":
        return TextContentSchema(text=_field(obj, "text", str, path))
    if content_type == "Resource":
        resource_path = f"{path}.resource"
        resource = _field(obj, "resource", dict, path)
        return ResourceContentSchema(
            uri=_field(resource, "uri", str, resource_path),
            mime_type=_field(resource, "mime_type", str, resource_path),
            text=_field(resource, "text", str, resource_path),
        )
    raise ParseError(f"unknown content type '{content_type}'", f"{path}.type")


def _parse_user_data(raw: Any, path: str) -> UserMessageDataSchema:
    obj = _expect(raw, dict, path)
    contents = _field(obj, "contents", list, path)
    return UserMessageDataSchema(
        session_id=_field(obj, "session_id", str, path),
        contents=tuple(
            _parse_message_content(c, f"{path}.contents[{i}]")
            for i, c in enumerate(contents)
        ),
    )


def _parse_agent_data(raw: Any, path: str) -> AgentMessageDataSchema:
    obj = _expect(raw, dict, path)

    agent_name = obj.get("agent_name")
    if agent_name is not None:
        _expect(agent_name, str, f"{path}.agent_name")

    chunks = []
    for i, chunk in enumerate(_field(obj, "chunks", list, path)):
        chunk_path = f"{path}.chunks[{i}]"
        chunk_obj = _expect(chunk, dict, chunk_path)
        chunks.append(
            AgentMessageContentSchema(
                content_type=_field(chunk_obj, "content_type", str, chunk_path),
                text=_field(chunk_obj, "text", str, chunk_path),
            )
        )

    return AgentMessageDataSchema(
        session_id=_field(obj, "session_id", str, path),
        agent_name=agent_name,
        chunks=tuple(chunks),
        is_complete=_field(obj, "is_complete", bool, path),
    )


def _parse_plan_entry(raw: Any, path: str) -> PlanEntrySchema:
    obj = _expect(raw, dict, path)
    return PlanEntrySchema(
        content=_field(obj, "content", str, path),
        priority=_field(obj, "priority", str, path),
        status=_field(obj, "status", str, path),
    )


def _parse_tool_call(raw: Any, path: str) -> ToolCallItemSchema:
    obj = _expect(raw, dict, path)
    data_path = f"{path}.data"
    data = _field(obj, "data", dict, path)

    content = []
    for i, entry in enumerate(_field(data, "content", list, data_path)):
        entry_path = f"{data_path}.content[{i}]"
        entry_obj = _expect(entry, dict, entry_path)
        content.append(ToolCallContentSchema(text=_field(entry_obj, "text", str, entry_path)))

    return ToolCallItemSchema(
        id=_field(obj, "id", str, path),
        open=_field(obj, "open", bool, path),
        data=ToolCallDataSchema(
            tool_call_id=_field(data, "tool_call_id", str, data_path),
            title=_field(data, "title", str, data_path),
            kind=_field(data, "kind", str, data_path),
            status=_field(data, "status", str, data_path),
            content=tuple(content),
        ),
    )


def parse_item(raw: Any, path: str = "$") -> ConversationItemSchema:
    """Parse one discriminated conversation item.

    Args:
        raw: Decoded JSON value for the item.
        path: JSON location used in error messages.

    Returns:
        The schema item for the ``type`` discriminator.

    Raises:
        ParseError: If the item is malformed or of an unknown type.
    """
    obj = _expect(raw, dict, path)
    item_type = _field(obj, "type", str, path)

    if item_type == "UserMessage":
        return UserMessageSchema(
            id=_field(obj, "id", str, path),
            data=_parse_user_data(_field(obj, "data", dict, path), f"{path}.data"),
        )
    if item_type == "AgentMessage":
        return AgentMessageSchema(
            id=_field(obj, "id", str, path),
            data=_parse_agent_data(_field(obj, "data", dict, path), f"{path}.data"),
        )
    if item_type == "AgentTodoList":
        entries = _field(obj, "entries", list, path)
        return AgentTodoListSchema(
            title=_field(obj, "title", str, path),
            entries=tuple(
                _parse_plan_entry(e, f"{path}.entries[{i}]") for i, e in enumerate(entries)
            ),
        )
    if item_type == "ToolCallGroup":
        items = _field(obj, "items", list, path)
        return ToolCallGroupSchema(
            items=tuple(
                _parse_tool_call(t, f"{path}.items[{i}]") for i, t in enumerate(items)
            ),
        )
    raise ParseError(f"unknown item type '{item_type}'", f"{path}.type")


def parse_conversation(document: Any) -> list[ConversationItemSchema]:
    """Parse a decoded conversation document.

    Args:
        document: Decoded JSON; must be an array of items.

    Returns:
        Schema items in document order.

    Raises:
        ParseError: On the first malformed value found.
    """
    items = _expect(document, list, "$")
    return [parse_item(raw, f"$[{i}]") for i, raw in enumerate(items)]
