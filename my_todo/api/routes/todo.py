import logging
from typing import Annotated, AsyncGenerator, List

from fastapi import APIRouter, Depends, Response, status

from my_todo.api.dependencies import get_label_repository, get_todo_repository
from my_todo.models.domain.todo import NewTodoPayload, Todo, TodoUpdate
from my_todo.repositories.label_repository import LabelRepository
from my_todo.repositories.todo_repository import TodoRepository
from my_todo.services.todo_service import TodoService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todo"])

async def get_todo_service(
    repository: Annotated[TodoRepository, Depends(get_todo_repository)],
    label_repository: Annotated[LabelRepository, Depends(get_label_repository)]
) -> AsyncGenerator[TodoService, None]:
    yield TodoService(repository, label_repository)

@router.post('', response_model=Todo, status_code=status.HTTP_201_CREATED)
async def create_todo(
    payload: NewTodoPayload,
    service: Annotated[TodoService, Depends(get_todo_service)]
):
    return await service.create_todo(payload)


@router.get('', response_model=List[Todo])
async def all_todos(service: Annotated[TodoService, Depends(get_todo_service)]):
    return await service.get_todos()


@router.get('/{todo_id}', response_model=Todo)
async def find_todo(todo_id: int, service: Annotated[TodoService, Depends(get_todo_service)]):
    return await service.find_todo(todo_id)


@router.patch('/{todo_id}', response_model=Todo)
async def update_todo(
    todo_id: int,
    payload: TodoUpdate,
    service: Annotated[TodoService, Depends(get_todo_service)]
):
    return await service.update_todo(todo_id, payload)


@router.delete('/{todo_id}', status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo(todo_id: int, service: Annotated[TodoService, Depends(get_todo_service)]):
    await service.delete_todo(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
