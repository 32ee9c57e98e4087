"""
Todo item API endpoints.

CRUD over the in-memory todo collection:
- GET    /api/TodoItems[?completed=true|false]
- GET    /api/TodoItems/{id}
- POST   /api/TodoItems
- PUT    /api/TodoItems/{id}
- PATCH  /api/TodoItems/{id}
- DELETE /api/TodoItems/{id}

Every error answers {"status": "error", "message": ...} (see config/urls.py).
"""
import json
from typing import List, Optional

from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from .apps import get_error_log, get_store
from .dtos import TodoItemOut, ErrorOut
from .validation import parse_item_id
from . import services

router = Router(tags=["TodoItems"])


# =============================================================================
# Helper Functions
# =============================================================================

def require_item_id(raw: str) -> int:
    todo_item_id = parse_item_id(raw)
    if todo_item_id is None:
        raise HttpError(400, "Invalid ID format")
    return todo_item_id


def read_json_body(request: HttpRequest) -> dict:
    """
    Decode the request body as a JSON object. An empty body counts as {}.
    """
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise HttpError(400, "Invalid JSON body")
    if not isinstance(data, dict):
        raise HttpError(400, "Invalid JSON body")
    return data


def not_found(todo_item_id: int) -> HttpError:
    """Record the miss in the error log and build the 404."""
    get_error_log().record(f"404: Todo item with ID {todo_item_id} not found")
    return HttpError(404, "Todo item not found")


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response={200: List[TodoItemOut], 400: ErrorOut})
def list_todo_items_api(request: HttpRequest, completed: Optional[str] = None):
    """
    List todo items.

    Query Parameters:
    - completed: "true" or "false" to filter by completion state
    """
    try:
        return services.list_todo_items(get_store(), completed)
    except ValueError as e:
        raise HttpError(400, str(e))


@router.get("/{item_id}", response={200: TodoItemOut, 400: ErrorOut, 404: ErrorOut})
def get_todo_item_api(request: HttpRequest, item_id: str):
    todo_item_id = require_item_id(item_id)

    item = services.get_todo_item(get_store(), todo_item_id)
    if item is None:
        raise not_found(todo_item_id)

    return item


@router.post("", response={201: TodoItemOut, 400: ErrorOut})
def create_todo_item_api(request: HttpRequest):
    """
    Create a todo item. The client supplies todoItemId, name, priority
    and completed. The stored name is HTML-escaped.
    """
    data = read_json_body(request)
    try:
        item = services.create_todo_item(get_store(), data)
    except ValueError as e:
        raise HttpError(400, str(e))

    return 201, item


@router.put("/{item_id}", response={200: TodoItemOut, 400: ErrorOut, 404: ErrorOut})
def replace_todo_item_api(request: HttpRequest, item_id: str):
    """
    Replace a todo item. name, priority and completed are all required.
    """
    todo_item_id = require_item_id(item_id)
    data = read_json_body(request)
    try:
        item = services.replace_todo_item(get_store(), todo_item_id, data)
    except ValueError as e:
        raise HttpError(400, str(e))

    if item is None:
        raise not_found(todo_item_id)

    return item


@router.patch("/{item_id}", response={200: TodoItemOut, 400: ErrorOut, 404: ErrorOut})
def update_todo_item_api(request: HttpRequest, item_id: str):
    """
    Partially update a todo item. Only the fields sent are changed.
    """
    todo_item_id = require_item_id(item_id)
    data = read_json_body(request)
    try:
        item = services.update_todo_item(get_store(), todo_item_id, data)
    except ValueError as e:
        raise HttpError(400, str(e))

    if item is None:
        raise not_found(todo_item_id)

    return item


@router.delete("/{item_id}", response={200: TodoItemOut, 400: ErrorOut, 404: ErrorOut})
def delete_todo_item_api(request: HttpRequest, item_id: str):
    todo_item_id = require_item_id(item_id)

    item = services.delete_todo_item(get_store(), todo_item_id)
    if item is None:
        raise not_found(todo_item_id)

    return item
