"""
Business rules for the todo item endpoints.

Services take the store explicitly and never touch HTTP. Conventions:
- a lookup miss returns None (the API layer answers 404)
- invalid input raises ValueError with the client-facing message
"""
from dataclasses import replace
from typing import List, Optional

from .models import TodoItem
from .store import TodoStore
from .validation import validate_and_sanitize, validate_partial

COMPLETED_FILTERS = {"true": True, "false": False}


def list_todo_items(store: TodoStore, completed: Optional[str] = None) -> List[TodoItem]:
    """
    List all items, or only those matching ?completed=true|false.
    Any other value for completed is rejected.
    """
    if completed is None:
        return store.list()

    if completed not in COMPLETED_FILTERS:
        raise ValueError("Invalid query parameter")

    return store.filter(COMPLETED_FILTERS[completed])


def get_todo_item(store: TodoStore, todo_item_id: int) -> Optional[TodoItem]:
    return store.find_by_id(todo_item_id)


def create_todo_item(store: TodoStore, data: dict) -> TodoItem:
    """Validate a full payload (todoItemId included) and append it."""
    validation = validate_and_sanitize(data)
    if not validation.is_valid:
        raise ValueError(validation.message)

    item = TodoItem(**validation.sanitized)
    with store.lock:
        if store.find_by_id(item.todo_item_id) is not None:
            raise ValueError(f"Todo item with ID {item.todo_item_id} already exists")
        return store.append(item)


def replace_todo_item(store: TodoStore, todo_item_id: int, data: dict) -> Optional[TodoItem]:
    """
    Replace every field of an existing item. The id always comes from the
    path; a todoItemId in the body is ignored.
    """
    with store.lock:
        if store.find_by_id(todo_item_id) is None:
            return None

        validation = validate_and_sanitize(
            {**data, "todoItemId": todo_item_id},
            require_id=False,
        )
        if not validation.is_valid:
            raise ValueError(validation.message)

        return store.replace_by_id(todo_item_id, TodoItem(**validation.sanitized))


def update_todo_item(store: TodoStore, todo_item_id: int, data: dict) -> Optional[TodoItem]:
    """Overwrite only the fields present in data."""
    with store.lock:
        existing = store.find_by_id(todo_item_id)
        if existing is None:
            return None

        validation = validate_partial(data)
        if not validation.is_valid:
            raise ValueError(validation.message)

        return store.replace_by_id(todo_item_id, replace(existing, **validation.sanitized))


def delete_todo_item(store: TodoStore, todo_item_id: int) -> Optional[TodoItem]:
    return store.remove_by_id(todo_item_id)
