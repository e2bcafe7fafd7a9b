"""Tests for the conversation panel using Textual's Pilot."""

import pytest
from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll

from timeline_tui.data.conversation_loader import TimelineLoad, load_timeline
from timeline_tui.data.identity import identity
from timeline_tui.data.models import PlanEntryPriority, PlanEntryStatus, ToolCallStatus
from timeline_tui.widgets.agent_message import (
    COMPLETE_LABEL,
    STREAMING_LABEL,
    AgentMessageView,
)
from timeline_tui.widgets.conversation_panel import ConversationPanel, compose_timeline, render_item
from timeline_tui.widgets.todo_list import AgentTodoListView, PlanEntryLine
from timeline_tui.widgets.tool_call import ToolCallItemView, format_tool_title
from timeline_tui.widgets.user_message import UserMessageView


class PanelApp(App):
    """Minimal host app for a ConversationPanel."""

    def __init__(self, timeline: TimelineLoad, **panel_kwargs) -> None:
        super().__init__()
        self.timeline = timeline
        self.panel_kwargs = panel_kwargs

    def compose(self) -> ComposeResult:
        yield ConversationPanel(self.timeline, **self.panel_kwargs)


class TestRenderItem:
    """Tests for render_item dispatch without mounting."""

    def test_unknown_item_raises(self):
        with pytest.raises(TypeError):
            render_item(object(), {}, set())

    def test_duplicate_ids_rendered_without_id(self, user_message_doc):
        items = load_timeline([user_message_doc, user_message_doc]).items
        seen: set[str] = set()

        first = render_item(items[0], {}, seen)
        second = render_item(items[1], {}, seen)

        assert first.id == identity("user-1").dom_id
        assert second.id is None

    def test_compose_timeline_returns_scroll(self, sample_document):
        root = compose_timeline(load_timeline(sample_document).items)
        assert isinstance(root, VerticalScroll)
        assert root.id == "timeline"


class TestEndToEndMessages:
    """User / agent / todo conversation renders in order with nesting."""

    @pytest.mark.asyncio
    async def test_renders_in_order(self, sample_document):
        app = PanelApp(load_timeline(sample_document))

        async with app.run_test():
            timeline = app.query_one("#timeline", VerticalScroll)
            children = list(timeline.children)

            assert len(children) == 3
            assert isinstance(children[0], UserMessageView)
            assert isinstance(children[1], AgentMessageView)
            assert isinstance(children[2], Vertical)
            assert children[2].has_class("todo-indent")

    @pytest.mark.asyncio
    async def test_user_block(self, sample_document):
        app = PanelApp(load_timeline(sample_document))

        async with app.run_test():
            view = app.query_one(UserMessageView)
            assert view.lines == ["Hello", "World"]
            assert len(view.query(".message-text")) == 2
            assert view.id == identity("user-1").dom_id

    @pytest.mark.asyncio
    async def test_agent_block(self, sample_document):
        app = PanelApp(load_timeline(sample_document))

        async with app.run_test():
            view = app.query_one(AgentMessageView)
            assert view.agent_name == "Assistant"
            assert view.body_text == "Hi there"
            assert view.status_label == COMPLETE_LABEL
            assert len(view.query(".message-status.complete")) == 1

    @pytest.mark.asyncio
    async def test_todo_list_indented(self, sample_document):
        app = PanelApp(load_timeline(sample_document))

        async with app.run_test():
            view = app.query_one(AgentTodoListView)
            assert view.parent.has_class("todo-indent")
            assert view.todo_list.title == "Plan"

            [line] = list(view.query(PlanEntryLine))
            assert line.entry.content == "Step 1"
            assert line.entry.priority is PlanEntryPriority.HIGH
            assert line.entry.status is PlanEntryStatus.COMPLETED
            assert line.has_class("priority-high")
            assert line.has_class("status-completed")

    @pytest.mark.asyncio
    async def test_streaming_agent(self, agent_message_doc):
        agent_message_doc["data"]["is_complete"] = False
        agent_message_doc["data"]["agent_name"] = None
        app = PanelApp(load_timeline([agent_message_doc]))

        async with app.run_test():
            view = app.query_one(AgentMessageView)
            assert view.agent_name == "Agent"
            assert view.status_label == STREAMING_LABEL
            assert len(view.query(".message-status.streaming")) == 1


class TestEndToEndToolCalls:
    """Tool call groups render in one indented sub-group."""

    @pytest.mark.asyncio
    async def test_group_order_and_status(self, tool_group_doc):
        app = PanelApp(load_timeline([tool_group_doc]))

        async with app.run_test():
            timeline = app.query_one("#timeline", VerticalScroll)
            [group] = list(timeline.children)
            assert group.has_class("tool-group")

            views = list(group.query(ToolCallItemView))
            assert len(views) == 2
            assert all(v.parent is group for v in views)
            assert views[0].item.data.status is ToolCallStatus.IN_PROGRESS
            assert views[1].item.data.status is ToolCallStatus.PENDING
            assert views[1].has_class("tool-pending")

    @pytest.mark.asyncio
    async def test_open_flag_from_log(self, tool_group_doc):
        app = PanelApp(load_timeline([tool_group_doc]))

        async with app.run_test():
            views = list(app.query(ToolCallItemView))
            assert views[0].collapsed is False
            assert views[1].collapsed is True

    @pytest.mark.asyncio
    async def test_open_state_overrides_log(self, tool_group_doc):
        tool_2 = identity("tool-2").dom_id
        app = PanelApp(load_timeline([tool_group_doc]), open_state={tool_2: True})

        async with app.run_test():
            views = list(app.query(ToolCallItemView))
            assert views[1].collapsed is False

    @pytest.mark.asyncio
    async def test_expand_tool_calls_default(self, tool_group_doc):
        app = PanelApp(load_timeline([tool_group_doc]), expand_tool_calls=True)

        async with app.run_test():
            assert all(not v.collapsed for v in app.query(ToolCallItemView))

    @pytest.mark.asyncio
    async def test_set_all_tool_calls_records_state(self, tool_group_doc):
        app = PanelApp(load_timeline([tool_group_doc]))

        async with app.run_test() as pilot:
            panel = app.query_one(ConversationPanel)
            panel.set_all_tool_calls(False)
            await pilot.pause()

            assert all(v.collapsed for v in app.query(ToolCallItemView))
            assert panel.open_state == {
                identity("tool-1").dom_id: False,
                identity("tool-2").dom_id: False,
            }

    @pytest.mark.asyncio
    async def test_toggle_survives_rerender(self, tool_group_doc):
        app = PanelApp(load_timeline([tool_group_doc]))

        async with app.run_test() as pilot:
            panel = app.query_one(ConversationPanel)
            panel.set_all_tool_calls(True)
            await pilot.pause()

            await panel.set_timeline(load_timeline([tool_group_doc]))
            await pilot.pause()

            assert all(not v.collapsed for v in app.query(ToolCallItemView))

    def test_title_format(self, tool_group_doc):
        [group] = load_timeline([tool_group_doc]).items
        assert format_tool_title(group.items[0]) == "▤ Read file · running"
        assert format_tool_title(group.items[1]) == "• Mystery tool · pending"


class TestPanelStates:
    """Tests for empty and error states."""

    @pytest.mark.asyncio
    async def test_error_banner(self, tmp_path):
        app = PanelApp(load_timeline(tmp_path / "missing.json"))

        async with app.run_test():
            assert len(app.query("#conv-error")) == 1
            assert len(app.query(".empty-message")) == 1
            timeline = app.query_one("#timeline", VerticalScroll)
            assert list(timeline.children) == []

    @pytest.mark.asyncio
    async def test_no_error_banner_when_loaded(self, sample_document):
        app = PanelApp(load_timeline(sample_document))

        async with app.run_test():
            assert len(app.query("#conv-error")) == 0
            assert len(app.query(".empty-message")) == 0

    @pytest.mark.asyncio
    async def test_set_timeline_replaces_items(self, sample_document, tool_group_doc):
        app = PanelApp(load_timeline(sample_document))

        async with app.run_test() as pilot:
            panel = app.query_one(ConversationPanel)
            await panel.set_timeline(load_timeline([tool_group_doc]))
            await pilot.pause()

            assert len(app.query(UserMessageView)) == 0
            assert len(app.query(ToolCallItemView)) == 2

    @pytest.mark.asyncio
    async def test_render_is_repeatable(self, sample_document, tool_group_doc):
        timeline = load_timeline(sample_document + [tool_group_doc])
        app = PanelApp(timeline)

        async with app.run_test() as pilot:
            panel = app.query_one(ConversationPanel)
            before = [type(w) for w in app.query_one("#timeline").children]

            await panel.set_timeline(timeline)
            await pilot.pause()

            after = [type(w) for w in app.query_one("#timeline").children]
            assert before == after
            assert timeline.items == load_timeline(sample_document + [tool_group_doc]).items
