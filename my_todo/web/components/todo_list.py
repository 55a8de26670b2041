"""
Todo list with per-item completion toggle, inline editor and delete.
"""

from typing import Awaitable, Callable, Iterable, List, Optional

from markupsafe import Markup

from my_todo.models.domain.label import Label
from my_todo.models.domain.todo import Todo, UpdateTodoPayload
from my_todo.utils.helpers import toggle_labels
from my_todo.web.templating import render_fragment

UpdateHandler = Callable[[UpdateTodoPayload], Awaitable[None]]
DeleteHandler = Callable[[int], Awaitable[None]]


class TodoList:
    def __init__(self, on_update: UpdateHandler, on_delete: DeleteHandler):
        self.on_update = on_update
        self.on_delete = on_delete
        # Inline editor state, one todo at a time
        self.editing_id: Optional[int] = None
        self.edit_text = ""
        self.edit_labels: List[Label] = []

    async def toggle_completed(self, todo: Todo) -> None:
        await self.on_update(UpdateTodoPayload(id=todo.id, completed=not todo.completed))

    async def delete(self, todo_id: int) -> None:
        if self.editing_id == todo_id:
            self.cancel_edit()
        await self.on_delete(todo_id)

    def start_edit(self, todo: Todo) -> None:
        self.editing_id = todo.id
        self.edit_text = todo.text
        self.edit_labels = list(todo.labels)

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.edit_text = ""
        self.edit_labels = []

    def toggle_edit_label(self, label: Label) -> None:
        self.edit_labels = toggle_labels(self.edit_labels, label)

    def forget_label(self, label_id: int) -> None:
        self.edit_labels = [label for label in self.edit_labels if label.id != label_id]

    def is_edit_selected(self, label: Label) -> bool:
        return any(selected.id == label.id for selected in self.edit_labels)

    async def save_edit(self, text: str) -> bool:
        """Emit the edited text and labels; an empty text keeps the editor open."""
        self.edit_text = text
        if self.editing_id is None or not text:
            return False

        payload = UpdateTodoPayload(
            id=self.editing_id,
            text=text,
            labels=[label.id for label in self.edit_labels],
        )
        self.cancel_edit()
        await self.on_update(payload)
        return True

    def render(self, todos: Iterable[Todo], labels: Iterable[Label]) -> Markup:
        return render_fragment(
            "components/todo_list.html",
            todo_list=self,
            todos=list(todos),
            labels=list(labels),
        )
