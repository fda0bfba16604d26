"""Clinic records URL configuration (explicit routing table).

Routes:
    /                - Single-page frontend (frontend)
    /admin/          - Django admin
    /api/health/     - Health check (core)
    /api/user/       - Token-guarded example route (core)
    /api/patients/   - Patients (patients)
    /api/records/    - Medical records (medical)
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('', include('clinic_backend.frontend.urls')),
    path('admin/', admin.site.urls),

    path('api/', include('clinic_backend.core.urls')),
    path('api/', include('clinic_backend.patients.urls')),
    path('api/', include('clinic_backend.medical.urls')),
]
