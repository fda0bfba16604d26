"""
Medical record write operations.

Each operation wraps exactly one row mutation in ``transaction.atomic()`` so
the write either fully applies or is discarded. After a successful write the
affected patient's records cache entry is evicted. Failures propagate to the
caller; views translate them to responses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import transaction

from clinic_backend.core.changes import UNSET, Changes
from clinic_backend.medical.cache import PatientRecordsCache
from clinic_backend.medical.exceptions import RecordDeleteFailed
from clinic_backend.medical.models import MedicalRecord
from clinic_backend.medical.serializers import MedicalRecordSerializer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordChanges(Changes):
    """Fields sent in a record update; absent ones stay ``UNSET``."""

    patient: object = UNSET
    visit_date: object = UNSET
    diagnosis: object = UNSET
    prescription: object = UNSET


def create_record(data: dict, cache: PatientRecordsCache) -> MedicalRecord:
    with transaction.atomic():
        record = MedicalRecord.objects.create(**data)

    cache.forget(record.patient_id)
    return record


def update_record(
    record: MedicalRecord,
    changes: RecordChanges,
    cache: PatientRecordsCache,
) -> MedicalRecord:
    """Apply the present fields of ``changes`` to ``record``.

    Moving a record to another patient evicts both patients' lists.
    """
    previous_patient_id = record.patient_id
    present = changes.present()

    with transaction.atomic():
        for attr, value in present.items():
            setattr(record, attr, value)
        if present:
            record.save()

    cache.forget(previous_patient_id)
    if record.patient_id != previous_patient_id:
        cache.forget(record.patient_id)
    return record


def delete_record(record: MedicalRecord, cache: PatientRecordsCache) -> None:
    patient_id = record.patient_id

    with transaction.atomic():
        deleted, _ = MedicalRecord.objects.filter(pk=record.pk).delete()
        if not deleted:
            raise RecordDeleteFailed(record.pk)

    cache.forget(patient_id)


def refresh_patient_records(patient_id: int, cache: PatientRecordsCache) -> list[dict]:
    """Rebuild and store the records list of one patient.

    Always reads from the database: the current entry is evicted first, then
    the fresh list (newest visit first) is written back with the TTL.
    """
    cache.forget(patient_id)

    records = (
        MedicalRecord.objects
        .filter(patient_id=patient_id)
        .order_by('-visit_date', '-id')
    )
    payload = [dict(item) for item in MedicalRecordSerializer(records, many=True).data]

    cache.put(patient_id, payload)
    return payload
