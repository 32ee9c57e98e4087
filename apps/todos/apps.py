from django.apps import AppConfig, apps
from django.conf import settings


class TodosConfig(AppConfig):
    """
    Owns the process-wide state of the todo API: the item store and the
    error sink. Both are built once when Django starts.
    """
    name = "apps.todos"
    label = "todos"
    verbose_name = "Todo Items"

    store = None
    error_log = None

    def ready(self):
        self.reset_state()

    def reset_state(self):
        """Rebuild the seeded store and the error sink from settings."""
        from .error_log import ErrorLog
        from .models import seed_items
        from .store import TodoStore

        self.store = TodoStore(seed_items())
        self.error_log = ErrorLog(settings.TODO_ERROR_LOG)


def get_store():
    return apps.get_app_config("todos").store


def get_error_log():
    return apps.get_app_config("todos").error_log
