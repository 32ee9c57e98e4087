import logging
import time
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

class RequestLogMiddleware(MiddlewareMixin):
    """
    Logs one console line per request:

        GET /api/TodoItems/2 200 0.412 ms
    """

    def process_request(self, request):
        request._started_at = time.perf_counter()

    def process_response(self, request, response):
        started_at = getattr(request, '_started_at', None)
        if started_at is None:
            return response

        elapsed_ms = (time.perf_counter() - started_at) * 1000
        logger.info(f"{request.method} {request.get_full_path()} {response.status_code} {elapsed_ms:.3f} ms")
        return response
