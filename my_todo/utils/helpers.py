import logging
from typing import List

from typing_extensions import NoReturn

from my_todo.core.exceptions import ErrorCode, TodoAppError
from my_todo.models.domain.label import Label

def handle_service_error(error: Exception, service_name: str, operation: str, status_code: int = 500) -> NoReturn:
    logger = logging.getLogger(service_name)
    logger.error(f"Error in {service_name} - {operation}: {str(error)}")

    raise TodoAppError(
        f"Operation failed: {operation}. Error: {str(error)}",
        status_code=status_code,
        error_code=ErrorCode.DATABASE_ERROR
    ) from error

def toggle_labels(labels: List[Label], target: Label) -> List[Label]:
    """Add `target` if no label with its id is selected, remove it otherwise."""
    if any(label.id == target.id for label in labels):
        return [label for label in labels if label.id != target.id]
    return [*labels, target]
