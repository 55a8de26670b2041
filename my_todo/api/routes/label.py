import logging
from typing import Annotated, AsyncGenerator, List

from fastapi import APIRouter, Depends, Response, status

from my_todo.api.dependencies import get_label_repository
from my_todo.models.domain.label import Label, NewLabelPayload
from my_todo.repositories.label_repository import LabelRepository
from my_todo.services.label_service import LabelService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/labels", tags=["label"])

async def get_label_service(
    repository: Annotated[LabelRepository, Depends(get_label_repository)]
) -> AsyncGenerator[LabelService, None]:
    yield LabelService(repository)

@router.post('', response_model=Label, status_code=status.HTTP_201_CREATED)
async def create_label(
    payload: NewLabelPayload,
    service: Annotated[LabelService, Depends(get_label_service)]
):
    return await service.create_label(payload)


@router.get('', response_model=List[Label])
async def all_labels(service: Annotated[LabelService, Depends(get_label_service)]):
    return await service.get_labels()


@router.delete('/{label_id}', status_code=status.HTTP_204_NO_CONTENT)
async def delete_label(label_id: int, service: Annotated[LabelService, Depends(get_label_service)]):
    await service.delete_label(label_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
