"""
Client state controller for the todo list.

Holds the in-memory list, talks to the API through ``TodoApiClient`` and
reconciles local state after each call. Network failures are logged and
never raised to the caller; there is no error UI.

Concurrent operations on the same record are not coordinated: nothing is
queued or cancelled.
"""

import uuid
from typing import Callable

import structlog

from src.client import state as transitions
from src.client.api_client import TodoApiClient
from src.client.render import TodoView, render_view
from src.client.state import TodoState
from src.core.exceptions import TodoClientError

logger = structlog.get_logger()


def new_todo_id() -> str:
    return str(uuid.uuid4())


class TodoController:
    def __init__(
        self,
        api: TodoApiClient,
        initial_state: TodoState | None = None,
        id_factory: Callable[[], str] = new_todo_id,
    ):
        self.api = api
        self.state = initial_state or TodoState()
        self.id_factory = id_factory

    def view(self) -> TodoView:
        return render_view(self.state)

    async def load(self) -> None:
        """Fetch the full list, replacing whatever is held locally."""
        try:
            todos = await self.api.fetch_todos()
        except TodoClientError as e:
            logger.error("todo_fetch_failed", **e.to_dict())
            return
        self.state = transitions.load_todos(self.state, todos)
        logger.debug("todos_loaded", count=len(todos))

    def set_draft(self, text: str) -> None:
        self.state = transitions.set_draft(self.state, text)

    async def add(self) -> None:
        if not transitions.accepts_new_todo(self.state):
            return

        todo_id = self.id_factory()
        try:
            created = await self.api.create_todo(todo_id, self.state.draft)
        except TodoClientError as e:
            logger.error("todo_add_failed", todo_id=todo_id, **e.to_dict())
            return
        self.state = transitions.append_todo(self.state, created)
        logger.info("todo_added", todo_id=created.id)

    def start_edit(self, todo_id: str) -> None:
        self.state = transitions.start_edit(self.state, todo_id)

    async def update(self) -> None:
        edit_id = self.state.edit_id
        if not self.state.draft.strip() or edit_id is None:
            return

        try:
            updated = await self.api.update_todo(edit_id, {"todo": self.state.draft})
        except TodoClientError as e:
            logger.error("todo_update_failed", todo_id=edit_id, **e.to_dict())
            return
        if updated is None:
            logger.warning("todo_update_missing", todo_id=edit_id)
        self.state = transitions.replace_todo(self.state, edit_id, updated)
        logger.info("todo_updated", todo_id=edit_id)

    async def submit(self) -> None:
        """The Add/Update button: disabled for short input, Update while editing."""
        if not transitions.can_submit(self.state):
            return
        if self.state.edit_id is not None:
            await self.update()
        else:
            await self.add()

    async def toggle_complete(self, todo_id: str) -> None:
        """Flip the flag locally first; a failed save is not rolled back."""
        self.state = transitions.toggle_completed(self.state, todo_id)
        target = transitions.find_todo(self.state, todo_id)
        if target is None:
            return

        try:
            await self.api.update_todo(todo_id, {"isCompleted": target.isCompleted})
        except TodoClientError as e:
            logger.error("todo_toggle_failed", todo_id=todo_id, **e.to_dict())

    async def delete(self, todo_id: str) -> None:
        self.state = transitions.mark_deleting(self.state, todo_id)
        try:
            await self.api.delete_todo(todo_id)
            self.state = transitions.remove_todo(self.state, todo_id)
            logger.info("todo_deleted", todo_id=todo_id)
        except TodoClientError as e:
            logger.error("todo_delete_failed", todo_id=todo_id, **e.to_dict())
        finally:
            self.state = transitions.clear_deleting(self.state)

    def toggle_filter(self) -> None:
        self.state = transitions.toggle_show_finished(self.state)
