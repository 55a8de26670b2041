"""
Label sidebar: filter selection plus label creation and deletion.
"""

from typing import Awaitable, Callable, Iterable, Optional

from markupsafe import Markup

from my_todo.models.domain.label import Label, NewLabelPayload
from my_todo.web.templating import render_fragment

SelectHandler = Callable[[Optional[Label]], None]
NewLabelHandler = Callable[[NewLabelPayload], Awaitable[None]]
DeleteLabelHandler = Callable[[int], Awaitable[None]]


class SideNav:
    def __init__(
        self,
        on_select_label: SelectHandler,
        on_submit_new_label: NewLabelHandler,
        on_delete_label: DeleteLabelHandler,
    ):
        self.on_select_label = on_select_label
        self.on_submit_new_label = on_submit_new_label
        self.on_delete_label = on_delete_label
        self.editing = False

    def toggle_editing(self) -> None:
        self.editing = not self.editing

    def select_label(self, label: Optional[Label]) -> None:
        self.on_select_label(label)

    async def submit_new_label(self, name: str) -> bool:
        if not name:
            return False
        await self.on_submit_new_label(NewLabelPayload(name=name))
        return True

    async def delete_label(self, label_id: int) -> None:
        await self.on_delete_label(label_id)

    def render(self, labels: Iterable[Label], filter_label_id: Optional[int]) -> Markup:
        return render_fragment(
            "components/side_nav.html",
            nav=self,
            labels=list(labels),
            filter_label_id=filter_label_id,
        )
