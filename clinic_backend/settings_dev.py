"""
Development settings (SQLite + local-memory cache).

Usage:
    export DJANGO_SETTINGS_MODULE=clinic_backend.settings_dev
    python manage.py migrate
    python manage.py runserver

The test suite runs against these settings as well.
"""

from .settings import *  # noqa: F401,F403

# ---------------------------------------------------------
# DEVELOPMENT SETTINGS
# ---------------------------------------------------------

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]', 'testserver', '*']

# ---------------------------------------------------------
# DATABASES: SQLite for local development
# ---------------------------------------------------------

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'dev.sqlite3',
        'OPTIONS': {
            'timeout': 20,
        },
    },
}

# ---------------------------------------------------------
# REST FRAMEWORK: browsable API in DEV
# ---------------------------------------------------------

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ),
}

# ---------------------------------------------------------
# CORS: allow every origin locally
# ---------------------------------------------------------

CORS_ALLOW_ALL_ORIGINS = True

CSRF_TRUSTED_ORIGINS = [
    'http://localhost:3000',
    'http://127.0.0.1:3000',
    'http://localhost:8000',
    'http://127.0.0.1:8000',
]

# ---------------------------------------------------------
# CACHES: local memory cache
# ---------------------------------------------------------

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'clinic-records-dev',
    }
}

# ---------------------------------------------------------
# LOGGING: verbose for development
# ---------------------------------------------------------

LOGGING['loggers']['clinic_backend']['level'] = 'DEBUG'
LOGGING['loggers']['django.db.backends'] = {
    'handlers': ['console'],
    'level': 'WARNING',  # DEBUG prints every SQL query
    'propagate': False,
}

SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_HSTS_SECONDS = 0
