"""
Todo item record.

Items live in memory only (see TodoStore); there is no Django model or table.
"""
from dataclasses import dataclass


@dataclass
class TodoItem:
    todo_item_id: int
    name: str  # always stored HTML-escaped
    priority: int
    completed: bool


def seed_items() -> list:
    """Items present in a freshly started process."""
    return [
        TodoItem(todo_item_id=0, name="an item", priority=3, completed=False),
        TodoItem(todo_item_id=1, name="another item", priority=2, completed=False),
        TodoItem(todo_item_id=2, name="a done item", priority=1, completed=True),
    ]
