from src.repositories.base_repository import BaseTodoRepository
from src.repositories.todo_repository import TodoRepository
from src.repositories.mongo_todo_repository import MongoTodoRepository

__all__ = ["BaseTodoRepository", "TodoRepository", "MongoTodoRepository"]
