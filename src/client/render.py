"""
Render a TodoState into a view model and into plain text.

``render_view`` is a pure function of the state; ``render_text`` lays the
view out for a terminal.
"""

from typing import List

from pydantic import BaseModel

from src.client.state import TodoState, can_submit, visible_todos

EMPTY_MESSAGE = "No Todos to display"


class TodoRow(BaseModel):
    id: str
    text: str
    completed: bool
    deleting: bool = False


class TodoView(BaseModel):
    heading: str
    draft: str
    submit_label: str
    submit_enabled: bool
    show_finished: bool
    rows: List[TodoRow]
    empty_message: str | None = None


def render_view(state: TodoState) -> TodoView:
    editing = state.edit_id is not None
    rows = [
        TodoRow(
            id=item.id,
            text=item.todo,
            completed=item.isCompleted,
            deleting=item.id == state.deleting_id,
        )
        for item in visible_todos(state)
    ]
    return TodoView(
        heading="Edit a Todo" if editing else "Add a Todo",
        draft=state.draft,
        submit_label="Update" if editing else "Add",
        submit_enabled=can_submit(state),
        show_finished=state.show_finished,
        rows=rows,
        # Shown only when the list itself is empty, not when the filter hides everything
        empty_message=EMPTY_MESSAGE if not state.todos else None,
    )


def render_text(view: TodoView) -> str:
    button = view.submit_label if view.submit_enabled else f"{view.submit_label} (disabled)"
    lines = [
        view.heading,
        f"> {view.draft}  [{button}]",
        f"[{'x' if view.show_finished else ' '}] Show Finished",
        "",
        "Your Todos",
    ]
    if view.empty_message:
        lines.append(view.empty_message)
    for row in view.rows:
        marker = "x" if row.completed else " "
        suffix = "  (deleting...)" if row.deleting else ""
        lines.append(f"[{marker}] {row.text}  <{row.id}>{suffix}")
    return "\n".join(lines)
