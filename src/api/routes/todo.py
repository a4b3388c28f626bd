import logging
from typing import List, Optional

from fastapi import APIRouter

from src.api.dependencies import TodoServiceDep
from src.models.domain.todo import DeleteResponse, TodoCreate, TodoResponse, TodoUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["todo"])

@router.get('/todos', response_model=List[TodoResponse])
async def list_todos(service: TodoServiceDep):
    return await service.get_todos()


@router.post('/todos', response_model=TodoResponse)
async def create_todo(todo: TodoCreate, service: TodoServiceDep):
    return await service.create_todo(todo)


@router.put('/todos/{todo_id}', response_model=Optional[TodoResponse])
async def update_todo(todo_id: str, service: TodoServiceDep, changes: Optional[TodoUpdate] = None):
    # A PUT without a body merges nothing
    return await service.update_todo(todo_id, changes or TodoUpdate())


@router.delete('/todos/{todo_id}', response_model=DeleteResponse)
async def delete_todo(todo_id: str, service: TodoServiceDep):
    return await service.delete_todo(todo_id)
