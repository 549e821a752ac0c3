# app/db/models/kanban/__init__.py
from .board import Board
from .column import BoardColumn
from .task import Task, Priority
