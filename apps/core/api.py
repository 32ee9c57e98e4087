"""
Health endpoint.
"""
import time

from django.apps import apps
from django.http import HttpRequest
from ninja import Router, Schema

router = Router(tags=["Health"])


class HealthOut(Schema):
    status: str
    uptime: str


def uptime_seconds() -> int:
    started_at = apps.get_app_config('core').started_at
    return int(time.monotonic() - started_at)


@router.get("/", response=HealthOut)
def health(request: HttpRequest):
    """Report that the service is up and for how many whole seconds."""
    return {"status": "ok", "uptime": f"{uptime_seconds()} seconds"}
