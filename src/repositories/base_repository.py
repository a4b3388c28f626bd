from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Document = Dict[str, Any]

class BaseTodoRepository(ABC):
    """
    Storage collaborator for todo documents.

    Documents use the wire shape ``{"id", "todo", "isCompleted"}`` and are
    looked up by the client-generated ``id``; storage-internal keys never
    cross this interface.
    """

    @abstractmethod
    async def find_all(self) -> List[Document]:
        """Return every document in the store's natural order."""

    @abstractmethod
    async def insert(self, document: Document) -> Document:
        """Persist a new document and return it as stored."""

    @abstractmethod
    async def find_one_and_update(self, todo_id: str, changes: Document) -> Optional[Document]:
        """Merge ``changes`` into the first match; None when nothing matches."""

    @abstractmethod
    async def find_one_and_delete(self, todo_id: str) -> Optional[Document]:
        """Remove the first match and return it; None when nothing matches."""
