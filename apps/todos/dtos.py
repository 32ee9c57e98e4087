from ninja import Schema


class TodoItemOut(Schema):
    todoItemId: int
    name: str
    priority: int
    completed: bool

    @staticmethod
    def resolve_todoItemId(obj):
        return obj.todo_item_id


class ErrorOut(Schema):
    status: str = "error"
    message: str
