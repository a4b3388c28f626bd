from sqlalchemy import Boolean, Column, Integer, String
from src.models.base import Base

class TodoRecord(Base):
    __tablename__ = 'todos'
    # Storage-internal key; the client-generated id is a separate column
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, nullable=False, index=True)
    todo = Column(String, nullable=False)
    is_completed = Column(Boolean, nullable=False, default=False)

    def to_document(self) -> dict:
        return {"id": self.id, "todo": self.todo, "isCompleted": bool(self.is_completed)}
