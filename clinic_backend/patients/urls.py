"""Patients App URLs.

Prefix: /api/  (trailing slash optional)
Routes:
    GET/POST              /api/patients               - List/Create patients
    GET/PUT/PATCH/DELETE  /api/patients/<pk>          - Retrieve/Update/Delete patient
    GET                   /api/patients/<pk>/records  - Patient's records (cache refreshed)
"""

from django.urls import re_path

from clinic_backend.patients.views import (
    PatientDetailView,
    PatientListCreateView,
    PatientRecordsView,
)

app_name = 'patients'

urlpatterns = [
    re_path(r'^patients/?$', PatientListCreateView.as_view(), name='list'),
    re_path(r'^patients/(?P<pk>\d+)/?$', PatientDetailView.as_view(), name='detail'),
    re_path(r'^patients/(?P<pk>\d+)/records/?$', PatientRecordsView.as_view(), name='records'),
]
