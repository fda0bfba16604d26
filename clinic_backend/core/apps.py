"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Shared API helpers, health check and the token-guarded example route."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic_backend.core'
    verbose_name = 'Core'
