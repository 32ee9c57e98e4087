import time

from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = 'apps.core'
    label = 'core'

    # time.monotonic() reading taken when the app registry is populated,
    # which wsgi/asgi/manage.py all do before serving the first request
    started_at = None

    def ready(self):
        self.started_at = time.monotonic()
