from operator import eq
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from src.models.entities.todo import TodoRecord
from src.repositories.base_repository import BaseTodoRepository, Document

logger = logging.getLogger(__name__)

# Wire field -> column attribute
FIELD_COLUMNS = {
    "todo": "todo",
    "isCompleted": "is_completed",
}

class TodoRepository(BaseTodoRepository):
    def __init__(self, db: Session):
        self.db = db

    def _find_first(self, todo_id: str) -> Optional[TodoRecord]:
        return (
            self.db.query(TodoRecord)
            .filter(eq(TodoRecord.id, todo_id))
            .order_by(TodoRecord.pk)
            .first()
        )

    async def find_all(self) -> List[Document]:
        try:
            records = self.db.query(TodoRecord).order_by(TodoRecord.pk).all()
            return [record.to_document() for record in records]
        except Exception as e:
            logger.error(f"Error retrieving todos: {str(e)}")
            raise

    async def insert(self, document: Document) -> Document:
        try:
            record = TodoRecord(
                id=document["id"],
                todo=document["todo"],
                is_completed=document.get("isCompleted", False),
            )
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)

            logger.info(f"Created todo with id {record.id}")
            return record.to_document()
        except Exception as e:
            logger.error(f"Error creating todo: {str(e)}")
            self.db.rollback()
            raise

    async def find_one_and_update(self, todo_id: str, changes: Document) -> Optional[Document]:
        try:
            record = self._find_first(todo_id)
            if record is None:
                logger.warning(f"Todo with id {todo_id} not found for update")
                return None

            for field, value in changes.items():
                column = FIELD_COLUMNS.get(field)
                if column is not None:
                    setattr(record, column, value)

            self.db.commit()
            self.db.refresh(record)

            logger.info(f"Updated todo with id {todo_id}: {sorted(changes)}")
            return record.to_document()
        except Exception as e:
            logger.error(f"Error updating todo {todo_id}: {str(e)}")
            self.db.rollback()
            raise

    async def find_one_and_delete(self, todo_id: str) -> Optional[Document]:
        try:
            record = self._find_first(todo_id)
            if record is None:
                logger.warning(f"Todo with id {todo_id} not found for delete")
                return None

            document = record.to_document()
            self.db.delete(record)
            self.db.commit()

            logger.info(f"Deleted todo with id {todo_id}")
            return document
        except Exception as e:
            logger.error(f"Error deleting todo {todo_id}: {str(e)}")
            self.db.rollback()
            raise
