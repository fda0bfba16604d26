from __future__ import annotations

from datetime import date
from unittest.mock import Mock

from django.core.cache.backends.locmem import LocMemCache
from django.test import SimpleTestCase, TestCase, override_settings

from clinic_backend.medical.cache import PatientRecordsCache
from clinic_backend.medical.models import MedicalRecord
from clinic_backend.medical.services import refresh_patient_records
from clinic_backend.patients.models import Patient


def _backend(name="records-cache-tests"):
    backend = LocMemCache(name, {})
    backend.clear()
    return backend


class PatientRecordsCacheTest(SimpleTestCase):
    def test_key_format(self):
        records_cache = PatientRecordsCache(backend=_backend())

        self.assertEqual(records_cache.key(7), "patient.7.records")

    def test_put_get_forget(self):
        records_cache = PatientRecordsCache(backend=_backend())

        self.assertIsNone(records_cache.get(1))
        records_cache.put(1, [{"id": 3}])
        self.assertEqual(records_cache.get(1), [{"id": 3}])
        self.assertIsNone(records_cache.get(2))

        records_cache.forget(1)
        self.assertIsNone(records_cache.get(1))

    def test_put_uses_ttl(self):
        backend = Mock()
        records_cache = PatientRecordsCache(backend=backend, ttl=60)

        records_cache.put(5, [])

        backend.set.assert_called_once_with("patient.5.records", [], timeout=60)

    @override_settings(PATIENT_RECORDS_CACHE_TTL=120)
    def test_ttl_from_settings(self):
        self.assertEqual(PatientRecordsCache(backend=_backend()).ttl, 120)

    def test_default_ttl_is_five_minutes(self):
        self.assertEqual(PatientRecordsCache(backend=_backend()).ttl, 300)


class RefreshPatientRecordsTest(TestCase):
    databases = {"default"}

    def setUp(self):
        self.patient = Patient.objects.create(first_name="Anna", last_name="Weber")
        self.backend = Mock()
        self.backend.get.return_value = None
        self.records_cache = PatientRecordsCache(backend=self.backend, ttl=300)

    def test_evicts_then_stores_fresh_list(self):
        for day in (1, 3, 2):
            MedicalRecord.objects.create(
                patient=self.patient,
                visit_date=date(2024, day, 1),
                diagnosis=f"Visit {day}",
                prescription="-",
            )

        payload = refresh_patient_records(self.patient.pk, self.records_cache)

        self.assertEqual([r["diagnosis"] for r in payload], ["Visit 3", "Visit 2", "Visit 1"])
        self.backend.delete.assert_called_once_with(f"patient.{self.patient.pk}.records")
        self.backend.set.assert_called_once_with(
            f"patient.{self.patient.pk}.records",
            payload,
            timeout=300,
        )

    def test_same_visit_date_newest_row_first(self):
        first = MedicalRecord.objects.create(
            patient=self.patient, visit_date=date(2024, 1, 1), diagnosis="A", prescription="-",
        )
        second = MedicalRecord.objects.create(
            patient=self.patient, visit_date=date(2024, 1, 1), diagnosis="B", prescription="-",
        )

        payload = refresh_patient_records(self.patient.pk, self.records_cache)

        self.assertEqual([r["id"] for r in payload], [second.pk, first.pk])
