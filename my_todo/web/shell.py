"""
Application shell for the browser UI.

TodoApp owns the state container and the view components. View components
emit intents through the handlers below; each handler awaits the matching
API Client call and dispatches the result into the store.

Write semantics:
- todo add/update/delete: one write request, then one full `GET /todos`
  whose result replaces the cached list
- label add: rejected locally on a duplicate name, otherwise the server's
  Label (with its id) is appended
- label delete: one delete request, then the id is dropped locally
- filter selection never touches the network

ApiClientError from any call propagates to the caller unchanged. Nothing is
updated optimistically, so there is nothing to roll back.
"""

import asyncio
from typing import Optional

import structlog
from markupsafe import Markup

from my_todo.models.domain.label import Label, NewLabelPayload
from my_todo.models.domain.todo import NewTodoPayload, Todo, UpdateTodoPayload
from my_todo.services.todo_client import TodoApiClient
from my_todo.web.components import SideNav, TodoForm, TodoList
from my_todo.web.store import (
    FilterSelected,
    LabelAdded,
    LabelRemoved,
    LabelsLoaded,
    TodosLoaded,
    TodoStore,
    has_label_named,
    visible_todos,
)
from my_todo.web.templating import render_fragment

logger = structlog.get_logger(__name__)


class TodoApp:
    def __init__(self, client: TodoApiClient, store: TodoStore | None = None):
        self.client = client
        self.store = store or TodoStore()
        self.mounted = False
        self._mount_lock = asyncio.Lock()

        self.todo_form = TodoForm(on_submit=self.on_submit)
        self.todo_list = TodoList(on_update=self.on_update, on_delete=self.on_delete)
        self.side_nav = SideNav(
            on_select_label=self.on_select_label,
            on_submit_new_label=self.on_submit_new_label,
            on_delete_label=self.on_delete_label,
        )

    @property
    def state(self):
        return self.store.snapshot

    async def mount(self) -> None:
        """
        Load todos and labels once; later calls are no-ops.

        Callers arriving while the first load is in flight wait for it, so
        nobody renders from an empty store.
        """
        async with self._mount_lock:
            if self.mounted:
                return
            await self._refresh_todos()
            labels = await self.client.get_labels()
            self.store.dispatch(LabelsLoaded(tuple(labels)))
            self.mounted = True
        logger.info("ui_mounted", todos=len(self.state.todos), labels=len(self.state.labels))

    async def _refresh_todos(self) -> None:
        todos = await self.client.get_todos()
        self.store.dispatch(TodosLoaded(tuple(todos)))

    # ===== Todo intents =====

    async def on_submit(self, payload: NewTodoPayload) -> None:
        if not payload.text:
            return

        await self.client.add_todo(payload)
        await self._refresh_todos()

    async def on_update(self, payload: UpdateTodoPayload) -> None:
        await self.client.update_todo(payload)
        await self._refresh_todos()

    async def on_delete(self, todo_id: int) -> None:
        await self.client.delete_todo(todo_id)
        await self._refresh_todos()

    # ===== Label intents =====

    def on_select_label(self, label: Optional[Label]) -> None:
        self.store.dispatch(FilterSelected(label.id if label else None))

    async def on_submit_new_label(self, payload: NewLabelPayload) -> None:
        if has_label_named(self.state, payload.name):
            logger.debug("duplicate_label_ignored", name=payload.name)
            return

        label = await self.client.add_label(payload)
        self.store.dispatch(LabelAdded(label))

    async def on_delete_label(self, label_id: int) -> None:
        await self.client.delete_label(label_id)
        self.store.dispatch(LabelRemoved(label_id))
        self.todo_form.forget_label(label_id)
        self.todo_list.forget_label(label_id)

    # ===== Lookups for the web layer =====

    def find_label(self, label_id: int) -> Optional[Label]:
        return next((label for label in self.state.labels if label.id == label_id), None)

    def find_todo(self, todo_id: int) -> Optional[Todo]:
        return next((todo for todo in self.state.todos if todo.id == todo_id), None)

    def render(self) -> Markup:
        state = self.state
        return render_fragment(
            "page.html",
            side_nav=self.side_nav.render(state.labels, state.filter_label_id),
            todo_form=self.todo_form.render(state.labels),
            todo_list=self.todo_list.render(visible_todos(state), state.labels),
        )
