from my_todo.repositories.todo_repository import TodoRepository
from my_todo.repositories.label_repository import LabelRepository

__all__ = ["TodoRepository", "LabelRepository"]
