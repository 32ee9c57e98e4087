"""
Django settings for the Todo Items API.

All deployment-specific values come from environment variables (a local
.env file is loaded first when present). There is no database: todo items
live in memory for the lifetime of the process.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() in ('1', 'true', 'yes')


# =============================================================================
# Core
# =============================================================================

SECRET_KEY = os.getenv('SECRET_KEY', 'dev-only-insecure-secret-key')

DEBUG = _env_bool('DEBUG')

ALLOWED_HOSTS = [h.strip() for h in os.getenv('ALLOWED_HOSTS', '*').split(',') if h.strip()]

# Port used by `manage.py serve`
PORT = int(os.getenv('PORT', '8484'))

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'ninja',
    'apps.core.apps.CoreConfig',
    'apps.todos.apps.TodosConfig',
]

MIDDLEWARE = [
    'apps.core.middleware.RequestLogMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.urls'

WSGI_APPLICATION = 'config.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

# In-memory only
DATABASES = {}

APPEND_SLASH = False

USE_TZ = True
TIME_ZONE = 'UTC'

STATIC_URL = 'static/'


# =============================================================================
# Todo items
# =============================================================================

# Append-only sink for 404 and 500 events
TODO_ERROR_LOG = Path(os.getenv('TODO_ERROR_LOG', BASE_DIR / 'logs' / 'error.log'))


# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '%(asctime)s %(levelname)s %(name)s %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'config': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
