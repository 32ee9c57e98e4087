"""
ASGI config for the Todo Items API.

Supports ASGI servers such as Uvicorn or Daphne:

    uvicorn config.asgi:application --port 8484
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at module load time so the todo store is seeded
# before the first request.
application = get_asgi_application()
