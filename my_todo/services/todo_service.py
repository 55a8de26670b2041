import logging
from typing import List

from my_todo.core.exceptions import TodoAppError
from my_todo.models.domain.todo import NewTodoPayload, Todo, TodoUpdate
from my_todo.repositories.label_repository import LabelRepository
from my_todo.repositories.todo_repository import TodoRepository
from my_todo.utils.helpers import handle_service_error

logger = logging.getLogger(__name__)

class TodoService:
    def __init__(self, repository: TodoRepository, label_repository: LabelRepository):
        self.repository = repository
        self.label_repository = label_repository

    async def create_todo(self, payload: NewTodoPayload) -> Todo:
        try:
            labels = await self.label_repository.find_many(payload.labels)
            created_todo = await self.repository.create(payload.text, labels)
            return Todo.model_validate(created_todo)
        except TodoAppError:
            raise
        except Exception as e:
            handle_service_error(e, "todo_service", "create_todo")

    async def find_todo(self, todo_id: int) -> Todo:
        try:
            todo = await self.repository.get_by_id(todo_id)
            return Todo.model_validate(todo)
        except TodoAppError:
            raise
        except Exception as e:
            handle_service_error(e, "todo_service", "find_todo")

    async def get_todos(self) -> List[Todo]:
        try:
            todos = await self.repository.get_all(descending=True)
            return [Todo.model_validate(todo) for todo in todos]
        except Exception as e:
            handle_service_error(e, "todo_service", "get_todos")

    async def update_todo(self, todo_id: int, payload: TodoUpdate) -> Todo:
        try:
            changes = payload.model_dump(exclude_none=True)
            if "labels" in changes:
                changes["labels"] = await self.label_repository.find_many(changes["labels"])

            updated_todo = await self.repository.update(todo_id, changes)
            return Todo.model_validate(updated_todo)
        except TodoAppError:
            raise
        except Exception as e:
            handle_service_error(e, "todo_service", "update_todo")

    async def delete_todo(self, todo_id: int) -> None:
        try:
            await self.repository.delete(todo_id)
        except TodoAppError:
            raise
        except Exception as e:
            handle_service_error(e, "todo_service", "delete_todo")
