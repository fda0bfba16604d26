"""Medical App URLs - medical records.

Prefix: /api/  (trailing slash optional)
Routes:
    GET/POST              /api/records       - List/Create records
    GET/PUT/PATCH/DELETE  /api/records/<pk>  - Retrieve/Update/Delete record
"""

from django.urls import re_path

from clinic_backend.medical.views import (
    MedicalRecordDetailView,
    MedicalRecordListCreateView,
)

app_name = 'medical'

urlpatterns = [
    re_path(r'^records/?$', MedicalRecordListCreateView.as_view(), name='list'),
    re_path(r'^records/(?P<pk>\d+)/?$', MedicalRecordDetailView.as_view(), name='detail'),
]
