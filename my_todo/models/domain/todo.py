from typing import List, Optional
from pydantic import BaseModel, Field

from my_todo.models.domain.label import Label

class NewTodoPayload(BaseModel):
    text: str = Field(..., min_length=1)
    labels: List[int] = Field(default_factory=list, description="Label ids")

class TodoUpdate(BaseModel):
    """Partial todo fields; anything left out (or null) keeps its stored value."""
    text: Optional[str] = Field(None, min_length=1)
    completed: Optional[bool] = Field(None)
    labels: Optional[List[int]] = Field(None, description="Replaces the label set")

class UpdateTodoPayload(TodoUpdate):
    id: int = Field(..., gt=0)

    def changes(self) -> dict:
        """Fields the caller actually provided, without the id."""
        return self.model_dump(exclude_unset=True, exclude={"id"})

class Todo(BaseModel):
    id: int
    text: str
    completed: bool = False
    labels: List[Label] = Field(default_factory=list)

    class Config:
        from_attributes = True
