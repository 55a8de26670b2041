from operator import eq
from typing import Any, Generic, List, Type, TypeVar
from sqlalchemy.orm import Session
import logging

from my_todo.core.exceptions import ErrorCode, NotFoundError
from my_todo.models.base import Base

T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    not_found_code: ErrorCode = ErrorCode.TODO_NOT_FOUND

    def __init__(self, db: Session, model: Type[T]):
        self.db = db
        self.model = model
    
    async def get_by_id(self, entity_id: int) -> T:
        entity: Any | None = self.db.query(self.model).filter(eq(self.model.id, entity_id)).first()
        
        if not entity:
            logger.warning(f"{self.model.__name__} with id {entity_id} not found")
            raise NotFoundError(
                f"Not Found, id is {entity_id}",
                error_code=self.not_found_code,
                details={"id": entity_id}
            )
            
        return entity
    
    async def get_all(self, descending: bool = False) -> List[T]:
        try:
            order = self.model.id.desc() if descending else self.model.id.asc()
            return self.db.query(self.model).order_by(order).all()
        except Exception as e:
            logger.error(f"Error retrieving {self.model.__name__} entities: {str(e)}")
            raise
    
    async def save(self, entity: T) -> T:
        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            
            logger.info(f"Saved {self.model.__name__} with id {entity.id}")
            return entity
        except Exception as e:
            logger.error(f"Error saving {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise
    
    async def delete(self, entity_id: int) -> None:
        entity = await self.get_by_id(entity_id)
        try:
            self.db.delete(entity)
            self.db.commit()
            
            logger.info(f"Deleted {self.model.__name__} with id {entity_id}")
        except Exception as e:
            logger.error(f"Error deleting {self.model.__name__}: {str(e)}")
            self.db.rollback()
            raise
