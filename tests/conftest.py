"""Pytest configuration and fixtures for timeline TUI tests."""

import json
import pytest
from pathlib import Path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def mock_conversation_path() -> Path:
    """Return path to the bundled sample conversation."""
    return Path(__file__).parent.parent / "timeline_tui" / "fixtures" / "mock_conversation.json"


@pytest.fixture
def user_message_doc() -> dict:
    """Return a UserMessage item with two text contents."""
    return {
        "type": "UserMessage",
        "id": "user-1",
        "data": {
            "session_id": "session-1",
            "contents": [
                {"type": "Text", "text": "Hello"},
                {"type": "Text", "text": "World"},
            ],
        },
    }


@pytest.fixture
def agent_message_doc() -> dict:
    """Return a complete AgentMessage item with two chunks."""
    return {
        "type": "AgentMessage",
        "id": "agent-1",
        "data": {
            "session_id": "session-1",
            "agent_name": "Assistant",
            "chunks": [
                {"content_type": "text", "text": "Hi"},
                {"content_type": "text", "text": " there"},
            ],
            "is_complete": True,
        },
    }


@pytest.fixture
def todo_list_doc() -> dict:
    """Return an AgentTodoList item with one entry."""
    return {
        "type": "AgentTodoList",
        "title": "Plan",
        "entries": [
            {"content": "Step 1", "priority": "High", "status": "Completed"},
        ],
    }


@pytest.fixture
def tool_group_doc() -> dict:
    """Return a ToolCallGroup with an in-progress and an unknown-status call."""
    return {
        "type": "ToolCallGroup",
        "items": [
            {
                "id": "tool-1",
                "open": True,
                "data": {
                    "tool_call_id": "call_001",
                    "title": "Read file",
                    "kind": "Read",
                    "status": "InProgress",
                    "content": [{"text": "reading..."}],
                },
            },
            {
                "id": "tool-2",
                "open": False,
                "data": {
                    "tool_call_id": "call_002",
                    "title": "Mystery tool",
                    "kind": "Teleport",
                    "status": "Unknown",
                    "content": [],
                },
            },
        ],
    }


@pytest.fixture
def sample_document(user_message_doc, agent_message_doc, todo_list_doc) -> list[dict]:
    """Return the user / agent / todo conversation document."""
    return [user_message_doc, agent_message_doc, todo_list_doc]


@pytest.fixture
def conversation_file(tmp_path: Path, sample_document: list[dict]) -> Path:
    """Write the sample document to a temporary JSON file."""
    path = tmp_path / "conversation.json"
    path.write_text(json.dumps(sample_document))
    return path
