"""
Browser UI routes.

Every form post maps to one component intent and answers with a 303
redirect back to the page, so a reload never repeats a write. The page
itself is rendered from the shell's current snapshot.

The UI is single-user: one TodoApp per process, mounted on first use.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from my_todo.core.deps import TodoApiClientDep
from my_todo.web.shell import TodoApp

router = APIRouter(prefix="/ui", tags=["ui"])

_todo_app: TodoApp | None = None


async def get_todo_app(client: TodoApiClientDep) -> TodoApp:
    global _todo_app

    if _todo_app is None:
        _todo_app = TodoApp(client)
    await _todo_app.mount()
    return _todo_app


def reset_todo_app() -> None:
    """Drop the process-wide shell (shutdown hook)."""
    global _todo_app
    _todo_app = None


TodoAppDep = Annotated[TodoApp, Depends(get_todo_app)]


def _back_to_page() -> RedirectResponse:
    return RedirectResponse("/ui/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def page(shell: TodoAppDep):
    return HTMLResponse(shell.render())


# ===== TodoForm =====

@router.post("/todos")
async def submit_todo(shell: TodoAppDep, text: Annotated[str, Form()] = ""):
    shell.todo_form.set_text(text)
    await shell.todo_form.submit()
    return _back_to_page()


@router.post("/form/modal/open")
async def open_label_modal(shell: TodoAppDep, text: Annotated[str, Form()] = ""):
    shell.todo_form.set_text(text)
    shell.todo_form.open_label_modal()
    return _back_to_page()


@router.post("/form/modal/close")
async def close_label_modal(shell: TodoAppDep, text: Annotated[str, Form()] = ""):
    shell.todo_form.set_text(text)
    shell.todo_form.close_label_modal()
    return _back_to_page()


@router.post("/form/labels/toggle")
async def toggle_form_label(
    shell: TodoAppDep,
    label_id: Annotated[int, Form()],
    text: Annotated[str, Form()] = "",
):
    shell.todo_form.set_text(text)
    label = shell.find_label(label_id)
    if label is not None:
        shell.todo_form.toggle_label(label)
    return _back_to_page()


# ===== TodoList =====

@router.post("/todos/{todo_id}/toggle")
async def toggle_todo(todo_id: int, shell: TodoAppDep):
    todo = shell.find_todo(todo_id)
    if todo is not None:
        await shell.todo_list.toggle_completed(todo)
    return _back_to_page()


@router.post("/todos/{todo_id}/delete")
async def delete_todo(todo_id: int, shell: TodoAppDep):
    await shell.todo_list.delete(todo_id)
    return _back_to_page()


@router.post("/todos/{todo_id}/edit")
async def start_edit(todo_id: int, shell: TodoAppDep):
    todo = shell.find_todo(todo_id)
    if todo is not None:
        shell.todo_list.start_edit(todo)
    return _back_to_page()


@router.post("/todos/edit/labels/toggle")
async def toggle_edit_label(
    shell: TodoAppDep,
    label_id: Annotated[int, Form()],
    text: Annotated[str, Form()] = "",
):
    shell.todo_list.edit_text = text
    label = shell.find_label(label_id)
    if label is not None:
        shell.todo_list.toggle_edit_label(label)
    return _back_to_page()


@router.post("/todos/edit/save")
async def save_edit(shell: TodoAppDep, text: Annotated[str, Form()] = ""):
    await shell.todo_list.save_edit(text)
    return _back_to_page()


@router.post("/todos/edit/cancel")
async def cancel_edit(shell: TodoAppDep):
    shell.todo_list.cancel_edit()
    return _back_to_page()


# ===== SideNav =====

@router.post("/filter")
async def select_filter(shell: TodoAppDep, label_id: Annotated[Optional[int], Form()] = None):
    label = shell.find_label(label_id) if label_id is not None else None
    shell.side_nav.select_label(label)
    return _back_to_page()


@router.post("/labels/editing")
async def toggle_label_editing(shell: TodoAppDep):
    shell.side_nav.toggle_editing()
    return _back_to_page()


@router.post("/labels")
async def submit_label(shell: TodoAppDep, name: Annotated[str, Form()] = ""):
    await shell.side_nav.submit_new_label(name)
    return _back_to_page()


@router.post("/labels/{label_id}/delete")
async def delete_label(label_id: int, shell: TodoAppDep):
    await shell.side_nav.delete_label(label_id)
    return _back_to_page()
