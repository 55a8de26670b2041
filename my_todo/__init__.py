"""my-todo: todo list REST API with a server-rendered browser UI."""

__version__ = "0.1.0"
