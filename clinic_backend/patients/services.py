"""Patient write operations.

Views validate input with the write serializer and hand the validated data
to these functions. Deleting a patient also drops its cached records list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import transaction

from clinic_backend.core.changes import UNSET, Changes
from clinic_backend.medical.cache import PatientRecordsCache
from clinic_backend.patients.models import Patient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatientChanges(Changes):
    """Fields sent in a patient update; absent ones stay ``UNSET``."""

    first_name: object = UNSET
    last_name: object = UNSET


def create_patient(data: dict) -> Patient:
    return Patient.objects.create(**data)


def update_patient(patient: Patient, changes: PatientChanges) -> Patient:
    """Merge the present fields into ``patient``.

    No present fields means nothing is written.
    """
    present = changes.present()
    if not present:
        return patient

    for attr, value in present.items():
        setattr(patient, attr, value)
    patient.save(update_fields=[*present, 'updated_at'])
    return patient


def delete_patient(patient: Patient, cache: PatientRecordsCache) -> None:
    patient_id = patient.pk
    with transaction.atomic():
        patient.delete()
    cache.forget(patient_id)
    logger.info('Patient deleted (patient_id=%s)', patient_id)
