from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from my_todo.models.base import Base
from my_todo.models.entities.label import Label

todo_labels = Table(
    'todo_labels',
    Base.metadata,
    Column('todo_id', Integer, ForeignKey('todos.id', ondelete='CASCADE'), primary_key=True),
    Column('label_id', Integer, ForeignKey('labels.id', ondelete='CASCADE'), primary_key=True),
)

class Todo(Base):
    __tablename__ = 'todos'
    id = Column(Integer, primary_key=True, index=True)
    text = Column(String, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    labels = relationship(
        Label,
        secondary=todo_labels,
        order_by=Label.id,
        lazy='selectin',
    )
