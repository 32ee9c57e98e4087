"""
URL configuration for the Todo Items API.
"""
import logging
import traceback

from django.urls import path
from ninja import NinjaAPI
from ninja.errors import HttpError

from apps.todos.apps import get_error_log

logger = logging.getLogger(__name__)

api = NinjaAPI(
    title="Todo Items API",
    version="1.0.0",
    description="CRUD over an in-memory todo item collection",
    docs_url="/docs",
)

from apps.core.api import router as core_router
from apps.todos.api import router as todos_router

api.add_router("", core_router)
api.add_router("/api/TodoItems", todos_router)


# =============================================================================
# Error responses
# =============================================================================
# Every failure answers {"status": "error", "message": ...}.

def error_response(request, status: int, message: str):
    return api.create_response(
        request,
        {"status": "error", "message": message},
        status=status,
    )


@api.exception_handler(HttpError)
def handle_http_error(request, exc: HttpError):
    return error_response(request, exc.status_code, str(exc))


@api.exception_handler(Exception)
def handle_unexpected_error(request, exc: Exception):
    """Log the full traceback and answer with an opaque 500."""
    logger.exception(f"Unhandled error on {request.method} {request.path}")
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    get_error_log().record(f"500 Internal Error: {stack}")
    return error_response(request, 500, "Internal Server Error")


urlpatterns = [
    path('', api.urls),
]
