"""
Frontend App Configuration
"""

from django.apps import AppConfig


class FrontendConfig(AppConfig):
    """Single-page UI for patients and medical records"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic_backend.frontend'
    verbose_name = 'Frontend'
