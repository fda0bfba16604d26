from __future__ import annotations

from datetime import date

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.test import RequestFactory, TestCase

from clinic_backend.medical.cache import PatientRecordsCache
from clinic_backend.medical.models import MedicalRecord
from clinic_backend.patients.admin import PatientAdmin
from clinic_backend.patients.models import Patient


class PatientAdminTest(TestCase):
    """Changelist record counts and cache eviction from the admin."""

    databases = {"default"}

    def setUp(self):
        cache.clear()
        self.superuser = get_user_model().objects.create_superuser(
            username="admin_clinic_test",
            email="admin_clinic@example.com",
            password="DummyPass123!",
        )
        self.patient = Patient.objects.create(first_name="Lukas", last_name="Becker")
        self.empty = Patient.objects.create(first_name="Jonas", last_name="Weber")
        for day in (1, 2):
            MedicalRecord.objects.create(
                patient=self.patient,
                visit_date=date(2024, 3, day),
                diagnosis="Checkup",
                prescription="-",
            )
        self.model_admin = PatientAdmin(Patient, admin.site)
        self.request = RequestFactory().get("/admin/patients/patient/")
        self.request.user = self.superuser

    def test_record_count_is_annotated(self):
        queryset = self.model_admin.get_queryset(self.request)

        counts = {p.pk: self.model_admin.record_count(p) for p in queryset}
        self.assertEqual(counts, {self.patient.pk: 2, self.empty.pk: 0})

    def test_record_count_needs_no_extra_queries(self):
        patients = list(self.model_admin.get_queryset(self.request))

        with self.assertNumQueries(0):
            for patient in patients:
                self.model_admin.record_count(patient)

    def test_changelist_renders(self):
        self.client.force_login(self.superuser)

        response = self.client.get("/admin/patients/patient/")

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Becker")

    def test_bulk_delete_evicts_cache(self):
        records_cache = PatientRecordsCache()
        records_cache.put(self.patient.pk, [{"id": 1}])

        self.model_admin.delete_queryset(
            self.request,
            self.model_admin.get_queryset(self.request).filter(pk=self.patient.pk),
        )

        self.assertFalse(Patient.objects.filter(pk=self.patient.pk).exists())
        self.assertEqual(MedicalRecord.objects.count(), 0)
        self.assertIsNone(records_cache.get(self.patient.pk))
