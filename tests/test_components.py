"""Tests for the view components in isolation (intents captured by stub handlers)."""

import pytest

from my_todo.models.domain.label import Label
from my_todo.utils.helpers import toggle_labels
from my_todo.web.components import SideNav, TodoForm, TodoList


class Recorder:
    def __init__(self):
        self.received = []

    async def __call__(self, value):
        self.received.append(value)


def test_toggle_labels_adds_and_removes(sample_labels):
    work, home, _ = sample_labels

    selected = toggle_labels([], work)
    selected = toggle_labels(selected, home)
    assert selected == [work, home]

    selected = toggle_labels(selected, Label(id=work.id, name=work.name))
    assert selected == [home]


class TestTodoForm:

    @pytest.mark.asyncio
    async def test_empty_text_emits_nothing(self):
        on_submit = Recorder()
        form = TodoForm(on_submit)

        assert await form.submit() is False
        assert on_submit.received == []

    @pytest.mark.asyncio
    async def test_submit_emits_payload_and_clears_text(self, sample_labels):
        on_submit = Recorder()
        form = TodoForm(on_submit)
        form.set_text("Buy milk")
        form.toggle_label(sample_labels[0])
        form.toggle_label(sample_labels[1])

        assert await form.submit() is True

        assert len(on_submit.received) == 1
        assert on_submit.received[0].model_dump() == {"text": "Buy milk", "labels": [1, 2]}
        assert form.edit_text == ""
        assert form.edit_labels == sample_labels[:2]

    def test_toggle_twice_never_duplicates(self, sample_labels):
        form = TodoForm(Recorder())

        form.toggle_label(sample_labels[0])
        form.toggle_label(sample_labels[0])
        form.toggle_label(sample_labels[0])

        assert form.edit_labels == [sample_labels[0]]

    def test_render_lists_labels_only_when_picker_open(self, sample_labels):
        form = TodoForm(Recorder())

        assert "urgent" not in form.render(sample_labels)

        form.open_label_modal()
        assert "urgent" in form.render(sample_labels)

        form.close_label_modal()
        assert "urgent" not in form.render(sample_labels)


class TestTodoList:

    @pytest.mark.asyncio
    async def test_toggle_completed_flips_flag(self, sample_todos):
        on_update = Recorder()
        todo_list = TodoList(on_update, Recorder())

        await todo_list.toggle_completed(sample_todos[1])

        payload = on_update.received[0]
        assert payload.id == 2
        assert payload.changes() == {"completed": False}

    @pytest.mark.asyncio
    async def test_delete_forwards_id(self):
        on_delete = Recorder()
        todo_list = TodoList(Recorder(), on_delete)

        await todo_list.delete(7)

        assert on_delete.received == [7]

    @pytest.mark.asyncio
    async def test_edit_text_and_labels(self, sample_todos, sample_labels):
        on_update = Recorder()
        todo_list = TodoList(on_update, Recorder())
        todo = sample_todos[0]

        todo_list.start_edit(todo)
        todo_list.toggle_edit_label(sample_labels[2])
        todo_list.toggle_edit_label(sample_labels[0])
        assert await todo_list.save_edit("Pay rent today") is True

        payload = on_update.received[0]
        assert payload.changes() == {"text": "Pay rent today", "labels": [2, 1]}
        assert todo_list.editing_id is None

    @pytest.mark.asyncio
    async def test_empty_edit_text_keeps_editor_open(self, sample_todos):
        on_update = Recorder()
        todo_list = TodoList(on_update, Recorder())
        todo_list.start_edit(sample_todos[0])

        assert await todo_list.save_edit("") is False

        assert on_update.received == []
        assert todo_list.editing_id == sample_todos[0].id

    def test_render_marks_completed(self, sample_todos, sample_labels):
        html = TodoList(Recorder(), Recorder()).render(sample_todos, sample_labels)

        assert 'class="completed">Write report' in html
        assert 'class="">Pay rent' in html


class TestSideNav:

    @pytest.mark.asyncio
    async def test_empty_label_name_emits_nothing(self):
        on_new = Recorder()
        nav = SideNav(lambda label: None, on_new, Recorder())

        assert await nav.submit_new_label("") is False
        assert on_new.received == []

    @pytest.mark.asyncio
    async def test_submit_and_delete(self):
        on_new = Recorder()
        on_delete = Recorder()
        nav = SideNav(lambda label: None, on_new, on_delete)

        await nav.submit_new_label("errands")
        await nav.delete_label(4)

        assert on_new.received[0].name == "errands"
        assert on_delete.received == [4]

    def test_select_label_forwards_selection(self, sample_labels):
        selected = []
        nav = SideNav(selected.append, Recorder(), Recorder())

        nav.select_label(sample_labels[1])
        nav.select_label(None)

        assert selected == [sample_labels[1], None]

    def test_delete_controls_only_in_edit_mode(self, sample_labels):
        nav = SideNav(lambda label: None, Recorder(), Recorder())

        assert "/ui/labels/1/delete" not in nav.render(sample_labels, None)

        nav.toggle_editing()
        assert "/ui/labels/1/delete" in nav.render(sample_labels, None)
