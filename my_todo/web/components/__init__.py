from my_todo.web.components.side_nav import SideNav
from my_todo.web.components.todo_form import TodoForm
from my_todo.web.components.todo_list import TodoList

__all__ = ["SideNav", "TodoForm", "TodoList"]
