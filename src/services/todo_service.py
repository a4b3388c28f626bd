import logging
from typing import List, Optional

from src.models.domain.todo import DeleteResponse, TodoCreate, TodoResponse, TodoUpdate
from src.repositories.base_repository import BaseTodoRepository
from src.utils.helpers import handle_service_error

logger = logging.getLogger(__name__)

class TodoService:
    """One storage operation per API call; every failure becomes a StorageError."""

    def __init__(self, repository: BaseTodoRepository):
        self.repository = repository

    async def get_todos(self) -> List[TodoResponse]:
        try:
            documents = await self.repository.find_all()
            return [TodoResponse.model_validate(document) for document in documents]
        except Exception as e:
            handle_service_error(e, "todo_service", "get_todos")

    async def create_todo(self, todo_data: TodoCreate) -> TodoResponse:
        try:
            created = await self.repository.insert(todo_data.model_dump())
            return TodoResponse.model_validate(created)
        except Exception as e:
            handle_service_error(e, "todo_service", "create_todo")

    async def update_todo(self, todo_id: str, todo_data: TodoUpdate) -> Optional[TodoResponse]:
        try:
            updated = await self.repository.find_one_and_update(todo_id, todo_data.changes())

            # A missing id is reported as null rather than 404
            if updated is None:
                return None

            return TodoResponse.model_validate(updated)
        except Exception as e:
            handle_service_error(e, "todo_service", "update_todo")

    async def delete_todo(self, todo_id: str) -> DeleteResponse:
        try:
            await self.repository.find_one_and_delete(todo_id)
            return DeleteResponse()
        except Exception as e:
            handle_service_error(e, "todo_service", "delete_todo")
