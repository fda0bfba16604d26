from __future__ import annotations

from io import StringIO

from django.core.cache import cache
from django.core.management import call_command
from django.test import TestCase

from clinic_backend.medical.models import MedicalRecord
from clinic_backend.patients.models import Patient


class SeedCommandTest(TestCase):
    databases = {"default"}

    def setUp(self):
        cache.clear()

    def _seed(self, *args):
        out = StringIO()
        call_command("seed", *args, stdout=out)
        return out.getvalue()

    def test_seed_creates_patients_and_records(self):
        output = self._seed("--patients", "5")

        self.assertEqual(Patient.objects.count(), 5)
        self.assertGreaterEqual(MedicalRecord.objects.count(), 5)
        for patient in Patient.objects.all():
            self.assertTrue(patient.medical_records.exists())
        self.assertIn("Seeding finished.", output)

    def test_seed_is_safe_to_rerun(self):
        self._seed("--patients", "4")
        records = MedicalRecord.objects.count()

        self._seed("--patients", "4")

        self.assertEqual(Patient.objects.count(), 4)
        self.assertEqual(MedicalRecord.objects.count(), records)

    def test_flush_replaces_existing_data(self):
        Patient.objects.create(first_name="Old", last_name="Entry")

        self._seed("--flush", "--patients", "3")

        self.assertEqual(Patient.objects.count(), 3)
        self.assertFalse(Patient.objects.filter(first_name="Old").exists())
