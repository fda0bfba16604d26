from __future__ import annotations

from datetime import date
from unittest.mock import Mock

from django.test import SimpleTestCase, TestCase

from clinic_backend.core.changes import UNSET
from clinic_backend.medical.exceptions import RecordDeleteFailed
from clinic_backend.medical.models import MedicalRecord
from clinic_backend.medical.services import (
    RecordChanges,
    create_record,
    delete_record,
    update_record,
)
from clinic_backend.patients.models import Patient


class RecordChangesTest(SimpleTestCase):
    def test_absent_fields_are_unset(self):
        changes = RecordChanges.from_validated({"diagnosis": "Flu"})

        self.assertIs(changes.prescription, UNSET)
        self.assertEqual(changes.present(), {"diagnosis": "Flu"})

    def test_unknown_keys_are_ignored(self):
        changes = RecordChanges.from_validated({"diagnosis": "Flu", "id": 9})

        self.assertEqual(changes.present(), {"diagnosis": "Flu"})

    def test_unset_is_falsy(self):
        self.assertFalse(UNSET)
        self.assertEqual(repr(UNSET), "UNSET")


class RecordServicesTest(TestCase):
    databases = {"default"}

    def setUp(self):
        self.patient = Patient.objects.create(first_name="Mia", last_name="Fischer")
        self.cache = Mock()
        self.record = create_record(
            {
                "patient": self.patient,
                "visit_date": date(2024, 6, 1),
                "diagnosis": "Otitis media",
                "prescription": "Amoxicillin",
            },
            self.cache,
        )

    def test_create_evicts(self):
        self.cache.forget.assert_called_once_with(self.patient.pk)

    def test_update_only_present_fields(self):
        update_record(self.record, RecordChanges(diagnosis="Resolved"), self.cache)

        self.record.refresh_from_db()
        self.assertEqual(self.record.diagnosis, "Resolved")
        self.assertEqual(self.record.prescription, "Amoxicillin")

    def test_update_without_changes_does_not_save(self):
        before = self.record.updated_at

        update_record(self.record, RecordChanges(), self.cache)

        self.record.refresh_from_db()
        self.assertEqual(self.record.updated_at, before)

    def test_delete_removes_row(self):
        delete_record(self.record, self.cache)

        self.assertFalse(MedicalRecord.objects.filter(pk=self.record.pk).exists())

    def test_delete_missing_row_raises(self):
        MedicalRecord.objects.filter(pk=self.record.pk).delete()

        with self.assertRaises(RecordDeleteFailed) as ctx:
            delete_record(self.record, self.cache)

        self.assertEqual(ctx.exception.to_dict()["error"], "Unknown error occurred")
