from sqlalchemy import Column, Integer, String
from my_todo.models.base import Base

class Label(Base):
    __tablename__ = 'labels'
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)
