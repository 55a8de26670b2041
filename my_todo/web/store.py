"""
State container for the browser UI.

The UI state is an immutable AppState snapshot. Every change goes through
`reduce(state, action)`, a pure function keyed by action type, and
TodoStore only holds the current snapshot and applies dispatched actions.
Network calls never happen here; the shell performs them and dispatches
the results.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from my_todo.models.domain.label import Label
from my_todo.models.domain.todo import Todo


@dataclass(frozen=True)
class AppState:
    todos: Tuple[Todo, ...] = ()
    labels: Tuple[Label, ...] = ()
    filter_label_id: Optional[int] = None


# ===== Actions =====

@dataclass(frozen=True)
class TodosLoaded:
    """Replace the cached todo list wholesale."""
    todos: Tuple[Todo, ...]


@dataclass(frozen=True)
class LabelsLoaded:
    """Replace the cached label list wholesale."""
    labels: Tuple[Label, ...]


@dataclass(frozen=True)
class LabelAdded:
    label: Label


@dataclass(frozen=True)
class LabelRemoved:
    label_id: int


@dataclass(frozen=True)
class FilterSelected:
    """None clears the filter."""
    label_id: Optional[int] = None


Action = Union[TodosLoaded, LabelsLoaded, LabelAdded, LabelRemoved, FilterSelected]


# ===== Transitions =====

def _todos_loaded(state: AppState, action: TodosLoaded) -> AppState:
    return replace(state, todos=tuple(action.todos))


def _labels_loaded(state: AppState, action: LabelsLoaded) -> AppState:
    return replace(state, labels=tuple(action.labels))


def _label_added(state: AppState, action: LabelAdded) -> AppState:
    return replace(state, labels=(*state.labels, action.label))


def _label_removed(state: AppState, action: LabelRemoved) -> AppState:
    return replace(
        state,
        labels=tuple(label for label in state.labels if label.id != action.label_id),
    )


def _filter_selected(state: AppState, action: FilterSelected) -> AppState:
    return replace(state, filter_label_id=action.label_id)


_REDUCERS = {
    TodosLoaded: _todos_loaded,
    LabelsLoaded: _labels_loaded,
    LabelAdded: _label_added,
    LabelRemoved: _label_removed,
    FilterSelected: _filter_selected,
}


def reduce(state: AppState, action: Action) -> AppState:
    try:
        reducer = _REDUCERS[type(action)]
    except KeyError:
        raise TypeError(f"Unknown action: {type(action).__name__}") from None
    return reducer(state, action)


def visible_todos(state: AppState) -> Tuple[Todo, ...]:
    """Todos carrying the active filter label, or all of them when no filter is set."""
    if state.filter_label_id is None:
        return state.todos
    return tuple(
        todo for todo in state.todos
        if any(label.id == state.filter_label_id for label in todo.labels)
    )


def has_label_named(state: AppState, name: str) -> bool:
    return any(label.name == name for label in state.labels)


@dataclass
class TodoStore:
    """Holds the current snapshot; `dispatch` is the only way to change it."""
    state: AppState = field(default_factory=AppState)

    @property
    def snapshot(self) -> AppState:
        return self.state

    def dispatch(self, action: Action) -> AppState:
        self.state = reduce(self.state, action)
        return self.state
