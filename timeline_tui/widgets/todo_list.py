"""Agent plan / todo list block."""

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ..data.models import AgentTodoList, PlanEntry, PlanEntryStatus

STATUS_GLYPHS = {
    PlanEntryStatus.PENDING: "○",
    PlanEntryStatus.IN_PROGRESS: "◐",
    PlanEntryStatus.COMPLETED: "●",
}


class PlanEntryLine(Static):
    """One todo entry, styled by its priority and status classes."""

    def __init__(self, entry: PlanEntry) -> None:
        super().__init__(
            Text(f"{STATUS_GLYPHS[entry.status]} {entry.content}"),
            classes=f"plan-entry priority-{entry.priority.value} status-{entry.status.value}",
        )
        self.entry = entry


class AgentTodoListView(Widget):
    """Titled checklist of plan entries."""

    DEFAULT_CSS = """
    AgentTodoListView {
        height: auto;
        width: 100%;
        layout: vertical;
        background: #181825;
        border: round #45475a;
        padding: 0 1;
    }

    AgentTodoListView .todo-title {
        color: #f9e2af;
        text-style: bold;
    }

    AgentTodoListView .plan-entry.status-completed {
        text-style: strike;
    }
    """

    def __init__(self, todo_list: AgentTodoList) -> None:
        super().__init__()
        self.todo_list = todo_list

    @property
    def title_text(self) -> str:
        done = self.todo_list.completed_count
        total = len(self.todo_list.entries)
        return f"{self.todo_list.title} ({done}/{total})"

    def compose(self) -> ComposeResult:
        yield Static(Text(self.title_text), classes="todo-title")
        for entry in self.todo_list.entries:
            yield PlanEntryLine(entry)
