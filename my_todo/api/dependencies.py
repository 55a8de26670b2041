import logging
from typing import Annotated, Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from my_todo.models.base import SessionLocal
from my_todo.repositories.label_repository import LabelRepository
from my_todo.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_todo_repository(db: Annotated[Session, Depends(get_db)]) -> TodoRepository:
    return TodoRepository(db)

def get_label_repository(db: Annotated[Session, Depends(get_db)]) -> LabelRepository:
    return LabelRepository(db)
