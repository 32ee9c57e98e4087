"""
Durable error sink.

Appends one line per event to a plain-text file:

    [2024-05-01T12:00:00.000Z] 404: Todo item with ID 9 not found

record() is fire-and-forget. It never raises, so a full disk or a missing
permission never turns a 404 into a 500.
"""
import logging
import threading
from pathlib import Path

from django.utils import timezone

logger = logging.getLogger(__name__)


def format_timestamp(moment) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ErrorLog:

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create error log directory {self.path.parent}: {e}")

    def record(self, message: str) -> bool:
        """
        Append a timestamped line to the sink.

        Returns True on success, False if the write failed.
        """
        line = f"[{format_timestamp(timezone.now())}] {message}\n"
        try:
            with self._lock:
                with self.path.open("a", encoding="utf-8", errors="backslashreplace") as sink:
                    sink.write(line)
            return True
        except (OSError, ValueError) as e:
            # Safety net: never let error logging break a request
            logger.warning(f"Could not write to error log {self.path}: {e}")
            return False
