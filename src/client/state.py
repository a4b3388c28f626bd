"""
Client-side todo state and its transitions.

``TodoState`` is immutable; every transition takes a state and returns a new
one, leaving the input untouched. The controller owns the current state and
swaps it after each step.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.models.domain.todo import TodoResponse

# Inputs this short (after stripping) are never submitted
MIN_TODO_LENGTH = 3


class TodoState(BaseModel):
    model_config = ConfigDict(frozen=True)

    todos: tuple[TodoResponse, ...] = Field(default_factory=tuple)
    draft: str = ""
    edit_id: Optional[str] = None
    show_finished: bool = True
    deleting_id: Optional[str] = None


def find_todo(state: TodoState, todo_id: str) -> Optional[TodoResponse]:
    return next((item for item in state.todos if item.id == todo_id), None)


def load_todos(state: TodoState, todos: list[TodoResponse]) -> TodoState:
    return state.model_copy(update={"todos": tuple(todos)})


def set_draft(state: TodoState, text: str) -> TodoState:
    return state.model_copy(update={"draft": text})


def can_submit(state: TodoState) -> bool:
    """Whether the Add/Update button is enabled."""
    return len(state.draft) > MIN_TODO_LENGTH


def accepts_new_todo(state: TodoState) -> bool:
    return len(state.draft.strip()) > MIN_TODO_LENGTH


def append_todo(state: TodoState, todo: TodoResponse) -> TodoState:
    """Add the server's record to the list and clear the input."""
    return state.model_copy(update={"todos": state.todos + (todo,), "draft": ""})


def start_edit(state: TodoState, todo_id: str) -> TodoState:
    target = find_todo(state, todo_id)
    if target is None:
        return state
    return state.model_copy(update={"draft": target.todo, "edit_id": todo_id})


def replace_todo(state: TodoState, todo_id: str, todo: Optional[TodoResponse]) -> TodoState:
    """
    Swap the local record for the server's document and leave edit mode.

    The server answers null for an id it no longer holds; the local record
    is then kept as it was.
    """
    if todo is None:
        todos = state.todos
    else:
        todos = tuple(todo if item.id == todo_id else item for item in state.todos)
    return state.model_copy(update={"todos": todos, "draft": "", "edit_id": None})


def toggle_completed(state: TodoState, todo_id: str) -> TodoState:
    todos = tuple(
        item.model_copy(update={"isCompleted": not item.isCompleted}) if item.id == todo_id else item
        for item in state.todos
    )
    return state.model_copy(update={"todos": todos})


def mark_deleting(state: TodoState, todo_id: str) -> TodoState:
    return state.model_copy(update={"deleting_id": todo_id})


def remove_todo(state: TodoState, todo_id: str) -> TodoState:
    todos = tuple(item for item in state.todos if item.id != todo_id)
    return state.model_copy(update={"todos": todos})


def clear_deleting(state: TodoState) -> TodoState:
    return state.model_copy(update={"deleting_id": None})


def toggle_show_finished(state: TodoState) -> TodoState:
    return state.model_copy(update={"show_finished": not state.show_finished})


def visible_todos(state: TodoState) -> list[TodoResponse]:
    """Items to render; completed ones are hidden unless show_finished is on."""
    return [item for item in state.todos if state.show_finished or not item.isCompleted]
