import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from my_todo.models.base import Base, engine
# Registers the tables on Base.metadata
from my_todo.models.entities import label, todo  # noqa: F401

logger = logging.getLogger(__name__)

def create_tables(bind: Engine = engine):
    Base.metadata.create_all(bind=bind)

    inspector = inspect(bind)
    tables = inspector.get_table_names()
    logger.info(f"Tables in database: {tables}")
