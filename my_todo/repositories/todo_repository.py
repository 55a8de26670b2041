from typing import Any, Dict, List

from sqlalchemy.orm import Session
import logging

from my_todo.models.entities.label import Label
from my_todo.models.entities.todo import Todo
from my_todo.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

class TodoRepository(BaseRepository[Todo]):
    def __init__(self, db: Session):
        super().__init__(db, Todo)

    async def create(self, text: str, labels: List[Label]) -> Todo:
        return await self.save(Todo(text=text, completed=False, labels=labels))

    async def update(self, todo_id: int, changes: Dict[str, Any]) -> Todo:
        """Apply the non-null entries of `changes`; `labels` must already be Label rows."""
        todo = await self.get_by_id(todo_id)
        for field in ("text", "completed", "labels"):
            value = changes.get(field)
            if value is not None:
                setattr(todo, field, value)
        return await self.save(todo)
