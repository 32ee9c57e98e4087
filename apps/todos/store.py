"""
In-memory todo item store.

Keeps items in insertion order. Replacing an item keeps its position and
removing an item deletes exactly that slot. All access goes through a
reentrant lock so the store can be shared by a threaded server. Callers that
read, decide and then write hold `store.lock` across all three steps.
"""
import threading
from typing import Iterable, List, Optional

from .models import TodoItem


class TodoStore:

    def __init__(self, items: Optional[Iterable[TodoItem]] = None):
        self._items: List[TodoItem] = list(items or [])
        self._lock = threading.RLock()

    @property
    def lock(self):
        """Lock to hold across a read-then-write sequence."""
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list(self) -> List[TodoItem]:
        with self._lock:
            return list(self._items)

    def filter(self, completed: bool) -> List[TodoItem]:
        with self._lock:
            return [item for item in self._items if item.completed == completed]

    def find_by_id(self, todo_item_id: int) -> Optional[TodoItem]:
        with self._lock:
            index = self._index_of(todo_item_id)
            return None if index is None else self._items[index]

    def append(self, item: TodoItem) -> TodoItem:
        with self._lock:
            self._items.append(item)
            return item

    def replace_by_id(self, todo_item_id: int, item: TodoItem) -> Optional[TodoItem]:
        """Swap the item in place. Returns None if the id is unknown."""
        with self._lock:
            index = self._index_of(todo_item_id)
            if index is None:
                return None
            self._items[index] = item
            return item

    def remove_by_id(self, todo_item_id: int) -> Optional[TodoItem]:
        with self._lock:
            index = self._index_of(todo_item_id)
            if index is None:
                return None
            return self._items.pop(index)

    def _index_of(self, todo_item_id: int) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.todo_item_id == todo_item_id:
                return index
        return None
