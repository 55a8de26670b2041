import logging
from typing import List

from my_todo.core.exceptions import TodoAppError
from my_todo.models.domain.label import Label, NewLabelPayload
from my_todo.repositories.label_repository import LabelRepository
from my_todo.utils.helpers import handle_service_error

logger = logging.getLogger(__name__)

class LabelService:
    def __init__(self, repository: LabelRepository):
        self.repository = repository

    async def create_label(self, payload: NewLabelPayload) -> Label:
        try:
            label = await self.repository.create(payload.name)
            return Label.model_validate(label)
        except TodoAppError:
            raise
        except Exception as e:
            handle_service_error(e, "label_service", "create_label")

    async def get_labels(self) -> List[Label]:
        try:
            labels = await self.repository.get_all()
            return [Label.model_validate(label) for label in labels]
        except Exception as e:
            handle_service_error(e, "label_service", "get_labels")

    async def delete_label(self, label_id: int) -> None:
        try:
            await self.repository.delete(label_id)
        except TodoAppError:
            raise
        except Exception as e:
            handle_service_error(e, "label_service", "delete_label")
