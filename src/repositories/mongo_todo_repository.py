import logging
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from src.repositories.base_repository import BaseTodoRepository, Document

logger = logging.getLogger(__name__)

# Keep Mongo's internal _id out of every returned document
PROJECTION = {"_id": 0, "id": 1, "todo": 1, "isCompleted": 1}

class MongoTodoRepository(BaseTodoRepository):
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_all(self) -> List[Document]:
        try:
            cursor = self.collection.find({}, PROJECTION)
            return [document async for document in cursor]
        except Exception as e:
            logger.error(f"Error retrieving todos: {str(e)}")
            raise

    async def insert(self, document: Document) -> Document:
        try:
            stored = {
                "id": document["id"],
                "todo": document["todo"],
                "isCompleted": document.get("isCompleted", False),
            }
            # insert_one adds _id to the dict it is given
            await self.collection.insert_one(dict(stored))

            logger.info(f"Created todo with id {stored['id']}")
            return stored
        except Exception as e:
            logger.error(f"Error creating todo: {str(e)}")
            raise

    async def find_one_and_update(self, todo_id: str, changes: Document) -> Optional[Document]:
        try:
            if not changes:
                return await self.collection.find_one({"id": todo_id}, PROJECTION)

            updated = await self.collection.find_one_and_update(
                {"id": todo_id},
                {"$set": changes},
                projection=PROJECTION,
                return_document=ReturnDocument.AFTER,
            )
            if updated is None:
                logger.warning(f"Todo with id {todo_id} not found for update")
            return updated
        except Exception as e:
            logger.error(f"Error updating todo {todo_id}: {str(e)}")
            raise

    async def find_one_and_delete(self, todo_id: str) -> Optional[Document]:
        try:
            deleted = await self.collection.find_one_and_delete({"id": todo_id}, projection=PROJECTION)
            if deleted is None:
                logger.warning(f"Todo with id {todo_id} not found for delete")
            else:
                logger.info(f"Deleted todo with id {todo_id}")
            return deleted
        except Exception as e:
            logger.error(f"Error deleting todo {todo_id}: {str(e)}")
            raise
