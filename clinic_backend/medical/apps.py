"""
Medical App Configuration
"""

from django.apps import AppConfig


class MedicalConfig(AppConfig):
    """Medical records per patient"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic_backend.medical'
    verbose_name = 'Medical records'
