"""
New-todo form with a draft text, a draft label selection and a label picker.
"""

import logging
from typing import Awaitable, Callable, Iterable, List

from markupsafe import Markup

from my_todo.models.domain.label import Label
from my_todo.models.domain.todo import NewTodoPayload
from my_todo.utils.helpers import toggle_labels
from my_todo.web.templating import render_fragment

logger = logging.getLogger(__name__)

SubmitHandler = Callable[[NewTodoPayload], Awaitable[None]]


class TodoForm:
    def __init__(self, on_submit: SubmitHandler):
        self.on_submit = on_submit
        self.edit_text = ""
        self.edit_labels: List[Label] = []
        self.label_modal_open = False

    def set_text(self, text: str) -> None:
        self.edit_text = text

    def open_label_modal(self) -> None:
        self.label_modal_open = True

    def close_label_modal(self) -> None:
        self.label_modal_open = False

    def toggle_label(self, label: Label) -> None:
        self.edit_labels = toggle_labels(self.edit_labels, label)

    def forget_label(self, label_id: int) -> None:
        self.edit_labels = [label for label in self.edit_labels if label.id != label_id]

    def is_selected(self, label: Label) -> bool:
        return any(selected.id == label.id for selected in self.edit_labels)

    async def submit(self) -> bool:
        """
        Emit the draft as a NewTodoPayload and clear the draft text.

        Returns False (and emits nothing) when the draft text is empty.
        The label selection is kept for the next todo.
        """
        if not self.edit_text:
            logger.debug("Ignoring todo submit with empty text")
            return False

        payload = NewTodoPayload(
            text=self.edit_text,
            labels=[label.id for label in self.edit_labels],
        )
        self.edit_text = ""
        await self.on_submit(payload)
        return True

    def render(self, labels: Iterable[Label]) -> Markup:
        return render_fragment(
            "components/todo_form.html",
            form=self,
            labels=list(labels),
        )
