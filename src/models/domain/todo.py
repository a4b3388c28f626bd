from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class TodoBase(BaseModel):
    id: str = Field(..., min_length=1, description="Client-generated identifier")
    todo: str = Field(..., min_length=1, description="Todo text")
    isCompleted: bool = Field(False, description="Completion flag")

class TodoCreate(TodoBase):
    model_config = ConfigDict(extra="ignore")

class TodoUpdate(BaseModel):
    """Partial todo fields; only the fields present in the request are merged."""
    model_config = ConfigDict(extra="ignore")

    todo: Optional[str] = Field(None, min_length=1)
    isCompleted: Optional[bool] = None

    @field_validator("todo", "isCompleted", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; null would corrupt the stored record
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

class TodoResponse(TodoBase):
    model_config = ConfigDict(from_attributes=True)

class DeleteResponse(BaseModel):
    message: str = "Todo deleted"
