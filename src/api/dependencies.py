import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends

from src.config import settings
from src.core.deps import get_todo_collection
from src.models.base import SessionLocal
from src.repositories.base_repository import BaseTodoRepository
from src.repositories.mongo_todo_repository import MongoTodoRepository
from src.repositories.todo_repository import TodoRepository
from src.services.todo_service import TodoService

logger = logging.getLogger(__name__)

async def get_todo_repository() -> AsyncGenerator[BaseTodoRepository, None]:
    if settings.uses_mongo:
        yield MongoTodoRepository(get_todo_collection())
        return

    db = SessionLocal()
    try:
        yield TodoRepository(db)
    finally:
        db.close()

async def get_todo_service(
    repository: Annotated[BaseTodoRepository, Depends(get_todo_repository)]
) -> AsyncGenerator[TodoService, None]:
    yield TodoService(repository)

TodoServiceDep = Annotated[TodoService, Depends(get_todo_service)]
