"""View models for the conversation timeline.

All records are frozen. Builder-style methods return a new value and leave
the receiver untouched, so the same instance can be shared between renders.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Union

from .identity import ElementId


class PlanEntryPriority(Enum):
    """Priority of a todo entry."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PlanEntryStatus(Enum):
    """Progress of a todo entry."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ToolCallStatus(Enum):
    """Lifecycle state of a tool call."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class ToolCallKind(Enum):
    """Category of a tool call. OTHER covers anything unrecognized."""

    READ = "read"
    EDIT = "edit"
    DELETE = "delete"
    MOVE = "move"
    SEARCH = "search"
    EXECUTE = "execute"
    THINK = "think"
    FETCH = "fetch"
    SWITCH_MODE = "switch_mode"
    OTHER = "other"


class MessageContentType(Enum):
    TEXT = "text"
    RESOURCE = "resource"


class AgentContentType(Enum):
    TEXT = "text"


@dataclass(frozen=True)
class ResourceContent:
    """A resource attached to a user message."""

    uri: str
    mime_type: str
    text: str


@dataclass(frozen=True)
class MessageContent:
    """One entry of a user message, either text or a resource."""

    content_type: MessageContentType
    text: str = ""
    resource: ResourceContent | None = None

    @classmethod
    def of_text(cls, text: str) -> MessageContent:
        return cls(content_type=MessageContentType.TEXT, text=text)

    @classmethod
    def of_resource(cls, resource: ResourceContent) -> MessageContent:
        return cls(
            content_type=MessageContentType.RESOURCE,
            text=resource.text,
            resource=resource,
        )


@dataclass(frozen=True)
class UserMessageData:
    session_id: str
    contents: tuple[MessageContent, ...] = ()

    def add_content(self, content: MessageContent) -> UserMessageData:
        return replace(self, contents=self.contents + (content,))


@dataclass(frozen=True)
class UserMessage:
    element_id: ElementId
    data: UserMessageData


@dataclass(frozen=True)
class AgentMessageContent:
    """One streamed chunk of an agent turn."""

    content_type: AgentContentType
    text: str = ""

    @classmethod
    def of_text(cls, text: str) -> AgentMessageContent:
        return cls(content_type=AgentContentType.TEXT, text=text)


@dataclass(frozen=True)
class AgentMessageData:
    session_id: str
    agent_name: str | None = None
    chunks: tuple[AgentMessageContent, ...] = ()
    is_complete: bool = False

    def with_agent_name(self, name: str) -> AgentMessageData:
        return replace(self, agent_name=name)

    def complete(self) -> AgentMessageData:
        return replace(self, is_complete=True)

    def add_chunk(self, chunk: AgentMessageContent) -> AgentMessageData:
        return replace(self, chunks=self.chunks + (chunk,))

    @property
    def text(self) -> str:
        """Message body: text chunks concatenated in order."""
        return "".join(
            chunk.text for chunk in self.chunks if chunk.content_type is AgentContentType.TEXT
        )


@dataclass(frozen=True)
class AgentMessage:
    element_id: ElementId
    data: AgentMessageData


@dataclass(frozen=True)
class PlanEntry:
    """One line of an agent todo list."""

    content: str
    priority: PlanEntryPriority = PlanEntryPriority.MEDIUM
    status: PlanEntryStatus = PlanEntryStatus.PENDING

    def with_priority(self, priority: PlanEntryPriority) -> PlanEntry:
        return replace(self, priority=priority)

    def with_status(self, status: PlanEntryStatus) -> PlanEntry:
        return replace(self, status=status)


@dataclass(frozen=True)
class AgentTodoList:
    title: str = ""
    entries: tuple[PlanEntry, ...] = ()

    def with_title(self, title: str) -> AgentTodoList:
        return replace(self, title=title)

    def with_entries(self, entries: tuple[PlanEntry, ...]) -> AgentTodoList:
        return replace(self, entries=tuple(entries))

    def add_entry(self, entry: PlanEntry) -> AgentTodoList:
        return replace(self, entries=self.entries + (entry,))

    @property
    def completed_count(self) -> int:
        return sum(1 for e in self.entries if e.status is PlanEntryStatus.COMPLETED)


@dataclass(frozen=True)
class ToolCallContent:
    text: str


@dataclass(frozen=True)
class ToolCallData:
    tool_call_id: str
    title: str
    kind: ToolCallKind = ToolCallKind.OTHER
    status: ToolCallStatus = ToolCallStatus.PENDING
    content: tuple[ToolCallContent, ...] = ()

    def with_kind(self, kind: ToolCallKind) -> ToolCallData:
        return replace(self, kind=kind)

    def with_status(self, status: ToolCallStatus) -> ToolCallData:
        return replace(self, status=status)

    def with_content(self, content: tuple[ToolCallContent, ...]) -> ToolCallData:
        return replace(self, content=tuple(content))


@dataclass(frozen=True)
class ToolCallItem:
    """A tool call plus its initial expanded/collapsed flag from the log."""

    element_id: ElementId
    data: ToolCallData
    open: bool = False

    def with_open(self, is_open: bool) -> ToolCallItem:
        return replace(self, open=is_open)


@dataclass(frozen=True)
class ToolCallGroup:
    items: tuple[ToolCallItem, ...] = ()


TimelineItem = Union[UserMessage, AgentMessage, AgentTodoList, ToolCallGroup]
