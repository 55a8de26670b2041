from typing import List, Optional

from sqlalchemy.orm import Session
import logging

from my_todo.core.exceptions import DuplicateLabelError, ErrorCode, NotFoundError
from my_todo.models.entities.label import Label
from my_todo.models.entities.todo import todo_labels
from my_todo.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

class LabelRepository(BaseRepository[Label]):
    not_found_code = ErrorCode.LABEL_NOT_FOUND

    def __init__(self, db: Session):
        super().__init__(db, Label)

    async def find_by_name(self, name: str) -> Optional[Label]:
        return self.db.query(Label).filter(Label.name == name).first()

    async def find_many(self, label_ids: List[int]) -> List[Label]:
        """Load labels by id, preserving the requested order; unknown ids raise."""
        if not label_ids:
            return []
        unique_ids = list(dict.fromkeys(label_ids))
        found = {label.id: label for label in self.db.query(Label).filter(Label.id.in_(unique_ids)).all()}
        missing = [label_id for label_id in unique_ids if label_id not in found]
        if missing:
            logger.warning(f"Labels with ids {missing} not found")
            raise NotFoundError(
                f"Not Found, label ids are {missing}",
                error_code=ErrorCode.LABEL_NOT_FOUND,
                details={"ids": missing}
            )
        return [found[label_id] for label_id in unique_ids]

    async def create(self, name: str) -> Label:
        existing = await self.find_by_name(name)
        if existing is not None:
            logger.warning(f"Label '{name}' already exists with id {existing.id}")
            raise DuplicateLabelError(name, existing.id)
        return await self.save(Label(name=name))

    async def delete(self, entity_id: int) -> None:
        label = await self.get_by_id(entity_id)
        try:
            self.db.execute(todo_labels.delete().where(todo_labels.c.label_id == entity_id))
            self.db.delete(label)
            self.db.commit()

            logger.info(f"Deleted Label with id {entity_id}")
        except Exception as e:
            logger.error(f"Error deleting Label: {str(e)}")
            self.db.rollback()
            raise
