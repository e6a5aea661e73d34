# app/db/models/todo/__init__.py
from .todo import Todo
from .label import Label
from .todo_label import TodoLabel
